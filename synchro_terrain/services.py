# synchro_terrain/services.py
from django.conf import settings

from .auth_client import AuthenticationClient
from .exporter import ContribuableExporter, ParcelleExporter
from .refs_sync import synchronize
from .transfer import TransferClient


def construire_client(login=None) -> TransferClient:
    """
    login=None : connexion seulement si aucun token n'est configuré mais
    que des identifiants le sont. Lève AuthenticationError si elle échoue.
    """
    if login is None:
        login = not settings.RECENSEMENT_API_TOKEN and bool(settings.RECENSEMENT_EMAIL)
    if login:
        return AuthenticationClient().client_authentifie()
    return TransferClient()


def exporter_contribuables(chunk_size=None, login=None, purge=True):
    return ContribuableExporter(construire_client(login), purge=purge).export_all(chunk_size)


def exporter_parcelles(chunk_size=None, login=None, purge=True):
    return ParcelleExporter(construire_client(login), purge=purge).export_all(chunk_size)


def synchroniser_referentiels(login=None):
    return synchronize(construire_client(login))
