# Referentiel/utils.py
# Réponses texte communes aux endpoints d'ingestion (contribuables, parcelles).
from django.http import HttpResponse
from rest_framework.exceptions import ValidationError


def _aplatir(detail, chemin=""):
    if isinstance(detail, dict):
        for cle, valeur in detail.items():
            yield from _aplatir(valeur, f"{chemin}.{cle}" if chemin else str(cle))
    elif isinstance(detail, list):
        if all(not isinstance(x, (dict, list)) for x in detail):
            for x in detail:
                yield f"{chemin}: {x}" if chemin else str(x)
        else:
            for i, x in enumerate(detail):
                yield from _aplatir(x, f"{chemin}[{i}]")
    else:
        yield f"{chemin}: {detail}" if chemin else str(detail)


def message_erreur(exc: Exception) -> str:
    """Message lisible, y compris pour les erreurs de validation DRF imbriquées."""
    if isinstance(exc, ValidationError):
        return "; ".join(_aplatir(exc.detail))
    return str(exc)


def reponse_texte(message: str, status: int = 200) -> HttpResponse:
    return HttpResponse(message, status=status, content_type="text/plain; charset=utf-8")


def reponse_erreur(exc: Exception) -> HttpResponse:
    return reponse_texte(f"Erreur lors du traitement: {message_erreur(exc)}", status=400)
