# synchro_terrain/auth_client.py
import json
import logging

from django.conf import settings

from .transfer import TransferClient, TransferError

logger = logging.getLogger(__name__)

ENDPOINT_LOGIN = "auth/login"
CLES_TOKEN = ("token", "access_token", "jwt", "accessToken")


class AuthenticationError(Exception):
    NO_CREDENTIALS = "no_credentials"
    INVALID_CREDENTIALS = "invalid_credentials"
    NETWORK_ERROR = "network_error"
    SERVER_ERROR = "server_error"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN_ERROR = "unknown_error"

    def __init__(self, type_erreur, message):
        super().__init__(message)
        self.type = type_erreur


def extraire_token(corps: str):
    corps = (corps or "").strip()
    if not corps:
        return None
    try:
        js = json.loads(corps)
    except ValueError:
        return corps  # certains serveurs renvoient le token brut
    if isinstance(js, str):
        return js.strip() or None
    if isinstance(js, (int, float)) and not isinstance(js, bool):
        return corps
    if not isinstance(js, dict):
        return None
    for cle in CLES_TOKEN:
        if js.get(cle):
            return str(js[cle])
    return None


class AuthenticationClient:

    def __init__(self, client: TransferClient = None):
        self.client = client or TransferClient(token="")

    def authenticate(self, email=None, password=None) -> str:
        email = email or settings.RECENSEMENT_EMAIL
        password = password or settings.RECENSEMENT_PASSWORD
        if not email or not password:
            raise AuthenticationError(AuthenticationError.NO_CREDENTIALS, "Aucun identifiant configuré.")

        try:
            r = self.client.post_json(ENDPOINT_LOGIN, json.dumps({"email": email, "password": password}))
        except TransferError as e:
            if e.status_code is not None:
                raise AuthenticationError(AuthenticationError.SERVER_ERROR, str(e)) from e
            raise AuthenticationError(AuthenticationError.NETWORK_ERROR, str(e)) from e

        if r.status_code in (401, 403):
            raise AuthenticationError(AuthenticationError.INVALID_CREDENTIALS, "Identifiants invalides.")
        if r.status_code not in (200, 201):
            raise AuthenticationError(AuthenticationError.UNKNOWN_ERROR, f"HTTP {r.status_code}: {r.text[:300]}")

        token = extraire_token(r.text)
        if not token:
            raise AuthenticationError(AuthenticationError.INVALID_RESPONSE, "Token absent de la réponse.")
        logger.info(f"Authentifié auprès du serveur central en tant que {email}")
        return token

    def client_authentifie(self, email=None, password=None) -> TransferClient:
        token = self.authenticate(email, password)
        return TransferClient(base_url=self.client.base_url, token=token, session=self.client.session)
