# synchro_terrain/management/base.py
from django.core.management.base import BaseCommand, CommandError

from synchro_terrain.auth_client import AuthenticationError


class ExportCommand(BaseCommand):
    """Commande d'export d'une table du poste vers le serveur central."""
    libelle = "fiches"

    def add_arguments(self, parser):
        parser.add_argument("--chunk-size", type=int, default=None,
                            help="Nombre de fiches par lot (défaut : RECENSEMENT_EXPORT_CHUNK_SIZE).")
        parser.add_argument("--login", action="store_true",
                            help="S'authentifier avec RECENSEMENT_EMAIL / RECENSEMENT_PASSWORD avant l'export.")
        parser.add_argument("--conserver", action="store_true",
                            help="Marquer les fiches exportées comme synchronisées au lieu de les supprimer.")

    def exporter(self, chunk_size, login, purge):
        raise NotImplementedError

    def handle(self, *args, **opts):
        chunk_size = opts["chunk_size"]
        if chunk_size is not None and chunk_size < 1:
            raise CommandError("--chunk-size doit être >= 1")
        try:
            res = self.exporter(chunk_size, opts["login"] or None, not opts["conserver"])
        except AuthenticationError as e:
            raise CommandError(f"Authentification impossible ({e.type}) : {e}")

        if res.success:
            self.stdout.write(self.style.SUCCESS(f"✔ {res.synced_count} {self.libelle} exporté(s)."))
        else:
            raise CommandError(
                f"Export interrompu : {res.synced_count} exporté(s), {res.failed_count} en échec. {res.error}"
            )
