# synchro_terrain/management/commands/exporter_parcelles.py
from synchro_terrain.management.base import ExportCommand
from synchro_terrain.services import exporter_parcelles


class Command(ExportCommand):
    help = "Exporte les parcelles (bâtiments et personne inclus) vers le serveur central."
    libelle = "parcelle(s)"

    def exporter(self, chunk_size, login, purge):
        return exporter_parcelles(chunk_size, login=login, purge=purge)
