# synchro_terrain/management/commands/synchroniser_referentiels.py
from django.core.management.base import BaseCommand, CommandError

from synchro_terrain.auth_client import AuthenticationError
from synchro_terrain.services import synchroniser_referentiels


class Command(BaseCommand):
    help = "Recharge les tables de référence du poste depuis le serveur central."

    def add_arguments(self, parser):
        parser.add_argument("--login", action="store_true",
                            help="S'authentifier avec RECENSEMENT_EMAIL / RECENSEMENT_PASSWORD.")

    def handle(self, *args, **opts):
        try:
            res = synchroniser_referentiels(login=opts["login"] or None)
        except AuthenticationError as e:
            raise CommandError(f"Authentification impossible ({e.type}) : {e}")
        if not res.success:
            raise CommandError(res.message)
        for cle, n in res.counts.items():
            self.stdout.write(f"{cle} : {n}")
        self.stdout.write(self.style.SUCCESS(f"✔ {res.message}"))
