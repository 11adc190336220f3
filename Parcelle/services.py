# Parcelle/services.py
import logging

from django.db import transaction
from django.utils import timezone

from .models import Parcelle, Batiment, Personne
from .serializers import ParcelleDtoSerializer

logger = logging.getLogger(__name__)

CHAMPS_PARCELLE = {
    "codeParcelle": "code_parcelle",
    "referenceCadastrale": "reference_cadastrale",
    "numeroAdresse": "numero_adresse",
    "rue": "rue",
    "numeroParcelle": "numero_parcelle",
    "superficieM2": "superficie_m2",
    "gpsLat": "gps_lat",
    "gpsLon": "gps_lon",
    "statutParcelle": "statut_parcelle",
    "sourceDonnee": "source_donnee",
}

REFERENCES_PARCELLE = {
    "commune": "commune_id",
    "quartier": "quartier_id",
    "rueAvenue": "rue_avenue_id",
}

CHAMPS_BATIMENT = {
    "typeBatiment": "type_batiment",
    "nombreEtages": "nombre_etages",
    "anneeConstruction": "annee_construction",
    "surfaceBatieM2": "surface_batie_m2",
    "usagePrincipal": "usage_principal",
    "statutBatiment": "statut_batiment",
}

CHAMPS_PERSONNE = {
    "typePersonne": "type_personne",
    "nomRaisonSociale": "nom_raison_sociale",
    "nif": "nif",
    "contact": "contact",
    "adressePostale": "adresse_postale",
}


def _mapper(dto: dict, correspondances: dict) -> dict:
    return {champ: dto.get(cle) for cle, champ in correspondances.items()}


def _creer_parcelle(dto: dict) -> Parcelle:
    maintenant = timezone.now()
    champs = _mapper(dto, CHAMPS_PARCELLE)
    for cle, colonne in REFERENCES_PARCELLE.items():
        if dto.get(cle) is not None:
            champs[colonne] = dto[cle]

    parcelle = Parcelle.objects.create(**champs, created_at=maintenant)

    batiments = [
        Batiment(parcelle=parcelle, created_at=maintenant, **_mapper(b, CHAMPS_BATIMENT))
        for b in dto.get("batiments") or []
    ]
    personnes = [
        Personne(parcelle=parcelle, created_at=maintenant, **_mapper(p, CHAMPS_PERSONNE))
        for p in dto.get("personnes") or []
    ]
    if batiments:
        Batiment.objects.bulk_create(batiments)
    if personnes:
        Personne.objects.bulk_create(personnes)
    return parcelle


def enregistrer_parcelles(dtos) -> int:
    """Lot de parcelles (avec bâtiments et personnes), tout ou rien."""
    serializer = ParcelleDtoSerializer(data=dtos, many=True)
    serializer.is_valid(raise_exception=True)

    with transaction.atomic():
        for dto in serializer.validated_data:
            _creer_parcelle(dto)

    logger.info(f"Lot parcelles enregistré: {len(serializer.validated_data)} parcelle(s)")
    return len(serializer.validated_data)


def enregistrer_parcelle(dto) -> Parcelle:
    serializer = ParcelleDtoSerializer(data=dto)
    serializer.is_valid(raise_exception=True)

    with transaction.atomic():
        parcelle = _creer_parcelle(serializer.validated_data)

    logger.info(f"Parcelle {parcelle.pk} enregistrée")
    return parcelle
