# synchro_terrain/refs_sync.py
import logging
from dataclasses import dataclass, field
from typing import Dict

from django.db import transaction

from Referentiel.models import REFERENTIELS
from .transfer import TransferClient, TransferError

logger = logging.getLogger(__name__)

ENDPOINT_REFS = "reftypes/all"


@dataclass
class RefsSyncResult:
    success: bool
    message: str
    counts: Dict[str, int] = field(default_factory=dict)


def lignes_valides(rows) -> list:
    """Garde les lignes avec un id entier (ou numérique en texte) et un libellé non vide."""
    propres = []
    for row in rows or []:
        if not isinstance(row, dict):
            continue
        _id, libelle = row.get("id"), row.get("libelle")
        if _id is None or libelle is None:
            continue
        if isinstance(_id, bool):
            continue
        try:
            _id = _id if isinstance(_id, int) else int(str(_id).strip())
        except ValueError:
            continue
        libelle = str(libelle).strip()
        if not libelle:
            continue
        propres.append({"id": _id, "libelle": libelle})
    return propres


@transaction.atomic
def remplacer_referentiels(payload: dict) -> Dict[str, int]:
    counts = {}
    for cle, model in REFERENTIELS.items():
        lignes = lignes_valides(payload.get(cle))
        model.objects.all().delete()
        model.objects.bulk_create([model(**ligne) for ligne in lignes])
        counts[cle] = len(lignes)
    return counts


def synchronize(client: TransferClient = None) -> RefsSyncResult:
    """Recharge les cinq tables de référence du poste depuis le serveur central."""
    client = client or TransferClient()
    try:
        r = client.get(ENDPOINT_REFS)
        if r.status_code != 200:
            return RefsSyncResult(False, f"HTTP {r.status_code}: {r.text[:300]}")
        payload = r.json()
        if not isinstance(payload, dict):
            return RefsSyncResult(False, "Réponse inattendue: objet JSON attendu.")
        counts = remplacer_referentiels(payload)
    except TransferError as e:
        logger.warning(f"Synchro référentiels: {e}")
        return RefsSyncResult(False, str(e))
    except ValueError as e:  # corps non JSON
        logger.warning(f"Synchro référentiels: réponse illisible ({e})")
        return RefsSyncResult(False, f"Réponse illisible: {e}")
    except Exception as e:
        logger.exception("Synchro référentiels: échec de l'écriture locale")
        return RefsSyncResult(False, f"Erreur lors de l'enregistrement: {e}")

    total = sum(counts.values())
    logger.info(f"Synchro référentiels: {total} ligne(s) chargée(s) {counts}")
    return RefsSyncResult(True, f"{total} ligne(s) de référence synchronisée(s).", counts)
