import json
import logging

from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import MultiPartParser, FormParser

from Referentiel.utils import reponse_texte, reponse_erreur
from .exceptions import LotInvalideError
from .services import enregistrer_contribuables, enregistrer_contribuable, CREE_PAR_DEFAUT

logger = logging.getLogger(__name__)


def _lire_json(request, champ="data"):
    brut = request.data.get(champ)
    if brut is None:
        raise LotInvalideError(f"Partie '{champ}' manquante.")
    if hasattr(brut, "read"):  # envoyé comme fichier plutôt que comme champ texte
        brut = brut.read().decode("utf-8")
    try:
        return json.loads(brut)
    except json.JSONDecodeError as e:
        raise LotInvalideError(f"JSON invalide dans '{champ}': {e}") from e


@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser])
def enregistrer_lot(request):
    """
    multipart/form-data :
      - data     : tableau JSON de contribuables
      - creePar  : (optionnel) auteur du lot
      - files_0, files_1, ... : pièces jointes du contribuable d'indice i
    """
    try:
        dtos = _lire_json(request)
        if not isinstance(dtos, list):
            raise LotInvalideError("Le champ 'data' doit contenir un tableau JSON.")

        fichiers_par_index = {}
        for i in range(len(dtos)):
            fichiers = request.FILES.getlist(f"files_{i}")
            if fichiers:
                fichiers_par_index[i] = fichiers

        cree_par = request.data.get("creePar") or CREE_PAR_DEFAUT
        total = enregistrer_contribuables(dtos, fichiers_par_index, cree_par=cree_par)
        return reponse_texte(f"Opération terminée avec succès. {total} contribuable(s) enregistré(s).")
    except Exception as e:
        logger.warning(f"Lot contribuables rejeté: {e}")
        return reponse_erreur(e)


@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser])
def enregistrer_un(request):
    """
    multipart/form-data :
      - data      : un contribuable (objet JSON)
      - creePar   : auteur de la fiche
      - documents : (optionnel) pièces jointes
    """
    try:
        dto = _lire_json(request)
        cree_par = request.data.get("creePar")
        if not cree_par:
            raise LotInvalideError("Paramètre 'creePar' manquant.")
        enregistrer_contribuable(dto, cree_par, request.FILES.getlist("documents"))
        return reponse_texte("Contribuable enregistré avec succès.")
    except Exception as e:
        logger.warning(f"Contribuable rejeté: {e}")
        return reponse_erreur(e)
