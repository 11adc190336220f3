"""Tests for the HTTP transfer client."""
import pytest
import requests

from synchro_terrain.transfer import TransferClient, TransferError

from .helpers import http_response


class TestTransferClient:

    def test_returns_4xx_responses(self, transfer_client, mock_session):
        """Statuses below 500 are handed back to the caller."""
        mock_session.request.return_value = http_response(400, "Erreur lors du traitement: x")
        r = transfer_client.post_multipart("contribuables/batch", [("data", (None, "[]", "application/json"))])
        assert r.status_code == 400

    def test_5xx_raises(self, transfer_client, mock_session):
        mock_session.request.return_value = http_response(503, "indisponible")
        with pytest.raises(TransferError) as exc:
            transfer_client.get("reftypes/all")
        assert exc.value.status_code == 503

    def test_network_error_raises(self, transfer_client, mock_session):
        mock_session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransferError) as exc:
            transfer_client.post_json("parcelles/batch", "[]")
        assert exc.value.status_code is None

    def test_timeout_raises(self, transfer_client, mock_session):
        mock_session.request.side_effect = requests.Timeout("read timed out")
        with pytest.raises(TransferError):
            transfer_client.get("reftypes/all")

    def test_url_timeout_and_headers(self, mock_session):
        """Timeouts apply to connect and read; the token goes in Authorization."""
        client = TransferClient(base_url="http://central.test/", token="abc", timeout=7, session=mock_session)
        client.post_json("/parcelles/batch", "[]")
        args, kwargs = mock_session.request.call_args
        assert args == ("POST", "http://central.test/parcelles/batch")
        assert kwargs["timeout"] == (7, 7)
        assert kwargs["headers"]["Authorization"] == "Token abc"
        assert kwargs["headers"]["Content-Type"].startswith("application/json")
        assert kwargs["data"] == b"[]"

    def test_no_token_no_header(self, transfer_client, mock_session):
        transfer_client.get("reftypes/all")
        assert "Authorization" not in mock_session.request.call_args.kwargs["headers"]

    def test_defaults_from_settings(self, settings, mock_session):
        settings.RECENSEMENT_SERVER_URL = "http://autre.test"
        settings.RECENSEMENT_HTTP_TIMEOUT = 60
        settings.RECENSEMENT_API_TOKEN = "tok"
        client = TransferClient(session=mock_session)
        assert client.base_url == "http://autre.test"
        assert client.timeout == (60, 60)
        assert client.token == "tok"
