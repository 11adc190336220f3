# synchro_terrain/transfer.py
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class TransferError(Exception):
    """Échec de transport (timeout, connexion) ou erreur 5xx du serveur central."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class TransferClient:
    """
    Client HTTP du poste vers le serveur central.
    Les statuts 200-499 sont rendus tels quels à l'appelant ; les 5xx et
    les erreurs réseau lèvent TransferError. Aucun rejeu dans un appel.
    """

    def __init__(self, base_url=None, token=None, timeout=None, session=None):
        self.base_url = (base_url or settings.RECENSEMENT_SERVER_URL).rstrip("/")
        self.token = token if token is not None else (settings.RECENSEMENT_API_TOKEN or None)
        t = timeout or settings.RECENSEMENT_HTTP_TIMEOUT
        self.timeout = (t, t)  # (connexion, lecture)
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self):
        headers = {"Accept": "application/json, text/plain"}
        if self.token:
            headers["Authorization"] = f"Token {self.token.strip()}"
        return headers

    def _send(self, method: str, path: str, headers=None, **kwargs) -> requests.Response:
        url = self._url(path)
        try:
            r = self.session.request(
                method, url, headers={**self._headers(), **(headers or {})}, timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} : erreur réseau {e}")
            raise TransferError(f"Erreur réseau: {e}") from e

        if r.status_code >= 500:
            logger.warning(f"{method} {url} : HTTP {r.status_code}")
            raise TransferError(f"Erreur serveur HTTP {r.status_code}: {r.text[:500]}", status_code=r.status_code)
        return r

    def post_multipart(self, path: str, files: list) -> requests.Response:
        return self._send("POST", path, files=files)

    def post_json(self, path: str, body: str) -> requests.Response:
        """`body` est déjà sérialisé (cf. encoder.encode_parcelles)."""
        return self._send(
            "POST", path, data=body.encode("utf-8"), headers={"Content-Type": "application/json; charset=utf-8"}
        )

    def get(self, path: str, **params) -> requests.Response:
        return self._send("GET", path, params=params or None)
