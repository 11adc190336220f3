# synchro_terrain/management/commands/exporter_contribuables.py
from synchro_terrain.management.base import ExportCommand
from synchro_terrain.services import exporter_contribuables


class Command(ExportCommand):
    help = "Exporte les contribuables saisis sur le poste vers le serveur central (par lots)."
    libelle = "contribuable(s)"

    def exporter(self, chunk_size, login, purge):
        return exporter_contribuables(chunk_size, login=login, purge=purge)
