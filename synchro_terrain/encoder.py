# synchro_terrain/encoder.py
import json
import logging
import mimetypes
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from django.core.serializers.json import DjangoJSONEncoder

logger = logging.getLogger(__name__)


@dataclass
class BatchEnvelope:
    """Corps d'un lot prêt à poster : `data` (JSON) + parties `files_<i>`."""
    data: str
    cree_par: Optional[str] = None
    files: List[Tuple[str, Tuple[str, bytes, str]]] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def as_multipart(self) -> list:
        # `data` passé comme partie de formulaire pour forcer le multipart même sans fichier
        parts = [("data", (None, self.data, "application/json"))]
        if self.cree_par:
            parts.append(("creePar", (None, self.cree_par)))
        return parts + list(self.files)


def dumps(dtos) -> str:
    return json.dumps(list(dtos), cls=DjangoJSONEncoder, ensure_ascii=False)


def _lire_fichier(chemin: str) -> Optional[Tuple[str, bytes, str]]:
    if not os.path.isfile(chemin):
        return None
    try:
        with open(chemin, "rb") as fh:
            contenu = fh.read()
    except OSError as e:
        logger.warning(f"Fichier illisible {chemin}: {e}")
        return None
    nom = os.path.basename(chemin)
    mime = mimetypes.guess_type(nom)[0] or "application/octet-stream"
    return nom, contenu, mime


def encode_contribuables(
    dtos: List[Dict[str, Any]], fichiers: List[List[str]] = None, cree_par: str = None
) -> BatchEnvelope:
    """
    Encode un lot de contribuables.
    - dtos : liste ordonnée ; la position i de chaque DTO est la clé `files_<i>`
    - fichiers : fichiers[i] = chemins locaux des photos du DTO i
    - cree_par : auteur du lot, envoyé dans la partie `creePar`
    Les fichiers absents du disque sont ignorés, le lot part sans eux.
    """
    fichiers = fichiers or []
    envelope = BatchEnvelope(data=dumps(dtos), cree_par=cree_par)
    for i, chemins in enumerate(fichiers[:len(dtos)]):
        for chemin in chemins or []:
            if not chemin:
                continue
            partie = _lire_fichier(chemin)
            if partie is None:
                logger.warning(f"Fichier absent ou illisible, ignoré: {chemin}")
                envelope.skipped.append(chemin)
                continue
            envelope.files.append((f"files_{i}", partie))
    return envelope


def encode_parcelles(dtos: List[Dict[str, Any]]) -> str:
    return dumps(dtos)
