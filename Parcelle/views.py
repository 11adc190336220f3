import logging

from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import JSONParser

from Referentiel.utils import reponse_texte, reponse_erreur
from .services import enregistrer_parcelles, enregistrer_parcelle

logger = logging.getLogger(__name__)


@api_view(['POST'])
@parser_classes([JSONParser])
def enregistrer_lot(request):
    """Tableau JSON de parcelles, chacune avec ses bâtiments et personnes."""
    try:
        dtos = request.data
        if not isinstance(dtos, list):
            raise ValueError("Le corps de la requête doit être un tableau JSON.")
        total = enregistrer_parcelles(dtos)
        return reponse_texte(f"Opération terminée avec succès. {total} parcelle(s) enregistrée(s).")
    except Exception as e:
        logger.warning(f"Lot parcelles rejeté: {e}")
        return reponse_erreur(e)


@api_view(['POST'])
@parser_classes([JSONParser])
def enregistrer_une(request):
    try:
        enregistrer_parcelle(request.data)
        return reponse_texte("Parcelle enregistrée avec succès.")
    except Exception as e:
        logger.warning(f"Parcelle rejetée: {e}")
        return reponse_erreur(e)
