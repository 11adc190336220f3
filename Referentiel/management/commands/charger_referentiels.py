# Referentiel/management/commands/charger_referentiels.py
from django.core.management.base import BaseCommand
from django.db import transaction

from Referentiel.models import RefCommune, RefQuartier, RefAvenue, RefZoneType, RefTypeActivite

TYPES_ACTIVITE = [
    "Commerce général", "Agriculture", "Artisanat", "Services", "Transport",
    "Restauration", "Hôtellerie", "Construction", "Industrie", "Santé",
    "Éducation", "Télécommunications", "Banque et Finance", "Immobilier", "Autre",
]

ZONES = [
    "Zone urbaine", "Zone périurbaine", "Zone rurale", "Zone industrielle",
    "Zone commerciale", "Zone résidentielle", "Zone mixte",
]

COMMUNES = [
    "Bandalungwa", "Barumbu", "Bumbu", "Gombe", "Kalamu", "Kasa-Vubu",
    "Kimbanseke", "Kinshasa", "Kintambo", "Kisenso", "Lemba", "Limete",
    "Lingwala", "Makala", "Maluku", "Masina", "Matete", "Mont-Ngafula",
    "Ndjili", "Ngaba", "Ngaliema", "Ngiri-Ngiri", "Nsele", "Selembao",
]

QUARTIERS = [
    "Centre-ville", "Matonge", "Yolo", "Righini", "Livulu",
    "Mbanza-Lemba", "Funa", "Industriel", "Résidentiel", "Commercial",
]

AVENUES = [
    "Avenue de la Libération", "Avenue Lumumba", "Avenue Kasavubu",
    "Avenue du Commerce", "Avenue de la Paix", "Avenue des Huileries",
    "Avenue Colonel Mondjiba", "Avenue de l'Université", "Avenue Sendwe",
    "Avenue Kasa-Vubu",
]

DONNEES = [
    (RefTypeActivite, TYPES_ACTIVITE),
    (RefZoneType, ZONES),
    (RefCommune, COMMUNES),
    (RefQuartier, QUARTIERS),
    (RefAvenue, AVENUES),
]


class Command(BaseCommand):
    help = "Peuple les tables de référence (communes, quartiers, avenues, zones, types d'activité)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Vide les tables de référence avant de les recharger.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            for model, _ in DONNEES:
                deleted, _ = model.objects.all().delete()
                self.stdout.write(f"{model._meta.verbose_name_plural} : {deleted} supprimé(s)")

        for model, libelles in DONNEES:
            created_count = 0
            for libelle in libelles:
                _, created = model.objects.get_or_create(libelle=libelle)
                created_count += int(created)
            self.stdout.write(
                f"{model._meta.verbose_name_plural} : {created_count} créé(s), "
                f"{len(libelles) - created_count} déjà présent(s)"
            )

        self.stdout.write(self.style.SUCCESS("✔ Tables de référence initialisées."))
