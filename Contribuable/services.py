# Contribuable/services.py
import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import FileSystemStorage
from django.db import transaction
from django.utils import timezone

from .exceptions import FichierNonSauvegardeError
from .models import Contribuable, Document
from .serializers import ContribuableDtoSerializer

logger = logging.getLogger(__name__)

CREE_PAR_DEFAUT = "system"

# DTO (camelCase) -> champ du modèle
CHAMPS_SCALAIRES = {
    "nif": "nif",
    "typeNif": "type_nif",
    "typeContribuable": "type_contribuable",
    "nom": "nom",
    "postNom": "post_nom",
    "prenom": "prenom",
    "raisonSociale": "raison_sociale",
    "telephone1": "telephone1",
    "telephone2": "telephone2",
    "email": "email",
    "rue": "rue",
    "numeroParcelle": "numero_parcelle",
    "origineFiche": "origine_fiche",
    "statut": "statut",
    "gpsLatitude": "gps_latitude",
    "gpsLongitude": "gps_longitude",
    "pieceIdentiteUrl": "piece_identite_url",
    "dateInscription": "date_inscription",
    "dateMaj": "date_maj",
    "formeJuridique": "forme_juridique",
    "numeroRccm": "numero_rccm",
}

# DTO -> colonne de clé étrangère ; l'id est passé tel quel, la base le vérifie au commit
CHAMPS_REFERENCES = {
    "refTypeActivite": "ref_type_activite_id",
    "refZoneType": "ref_zone_type_id",
    "refAvenue": "ref_avenue_id",
    "refQuartier": "ref_quartier_id",
    "refCommune": "ref_commune_id",
}


def _storage() -> FileSystemStorage:
    return FileSystemStorage(location=settings.RECENSEMENT_UPLOAD_DIR)


def valider_dtos(dtos, many=True):
    serializer = ContribuableDtoSerializer(data=dtos, many=many)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def mapper_vers_modele(dto: dict, cree_par: str = CREE_PAR_DEFAUT) -> Contribuable:
    champs = {champ: dto.get(cle) for cle, champ in CHAMPS_SCALAIRES.items()}
    for cle, colonne in CHAMPS_REFERENCES.items():
        if dto.get(cle) is not None:
            champs[colonne] = dto[cle]
    return Contribuable(
        **champs,
        created_at=timezone.now(),
        cree_par=cree_par or CREE_PAR_DEFAUT,
    )


def sauvegarder_fichier(fichier) -> str:
    """Écrit le fichier sous un nom unique et renvoie son chemin absolu."""
    nom_origine = os.path.basename(getattr(fichier, "name", None) or "") or "file"
    storage = _storage()
    try:
        nom_stocke = storage.save(f"{uuid.uuid4()}_{nom_origine}", fichier)
    except OSError as e:
        raise FichierNonSauvegardeError(nom_origine, e) from e
    return storage.path(nom_stocke)


def supprimer_fichiers(chemins):
    for chemin in chemins:
        try:
            os.remove(chemin)
        except FileNotFoundError:
            pass
        except OSError:
            logger.warning(f"Impossible de supprimer le fichier orphelin {chemin}")


def _attacher_documents(contribuable: Contribuable, fichiers, stockes: list):
    for fichier in fichiers or []:
        if not fichier.size:
            continue
        chemin = sauvegarder_fichier(fichier)
        stockes.append(chemin)
        Document.objects.create(contribuable=contribuable, url=chemin)


def enregistrer_contribuables(dtos, fichiers_par_index=None, cree_par: str = CREE_PAR_DEFAUT) -> int:
    """
    Enregistre un lot de contribuables et leurs pièces jointes.

    - dtos : liste de dicts camelCase (validés ici, avant toute écriture)
    - fichiers_par_index : {i: [UploadedFile, ...]} ; i = position dans dtos
    Tout le lot est écrit dans une seule transaction ; en cas d'échec, les
    fichiers déjà copiés dans le répertoire d'upload sont supprimés.
    """
    valides = valider_dtos(dtos, many=True)
    fichiers_par_index = fichiers_par_index or {}

    stockes = []
    try:
        with transaction.atomic():
            for i, dto in enumerate(valides):
                contribuable = mapper_vers_modele(dto, cree_par)
                contribuable.save()
                _attacher_documents(contribuable, fichiers_par_index.get(i), stockes)
    except Exception:
        supprimer_fichiers(stockes)
        raise

    logger.info(f"Lot contribuables enregistré: {len(valides)} fiche(s), {len(stockes)} document(s)")
    return len(valides)


def enregistrer_contribuable(dto, cree_par: str, fichiers=None) -> Contribuable:
    valide = valider_dtos(dto, many=False)

    stockes = []
    try:
        with transaction.atomic():
            contribuable = mapper_vers_modele(valide, cree_par)
            contribuable.save()
            _attacher_documents(contribuable, fichiers, stockes)
    except Exception:
        supprimer_fichiers(stockes)
        raise

    logger.info(f"Contribuable {contribuable.pk} enregistré par {contribuable.cree_par}")
    return contribuable
