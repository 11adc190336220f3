"""Tests for the management commands, Celery tasks and admin action."""
from io import StringIO
from unittest import mock

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.urls import reverse

from Referentiel.models import RefCommune
from synchro_terrain import services
from synchro_terrain.auth_client import AuthenticationError
from synchro_terrain.models import ContribuableLocal, ParcelleLocal
from synchro_terrain.tasks import export_contribuables_task, export_parcelles_task, sync_referentiels_task

from .helpers import http_response, json_response


@pytest.fixture
def patched_client(transfer_client):
    with mock.patch.object(services, "construire_client", return_value=transfer_client) as m:
        yield m


def _contribuable(n=0):
    return ContribuableLocal.objects.create(
        type_contribuable="PP", nom=f"T{n}", telephone1=f"0810{n:04d}", origine_fiche="mobile"
    )


class TestConstruireClient:

    def test_no_login_by_default(self, settings):
        client = services.construire_client()
        assert client.token is None

    def test_configured_token_used(self, settings):
        settings.RECENSEMENT_API_TOKEN = "tok"
        assert services.construire_client().token == "tok"

    def test_auto_login_with_credentials(self, settings):
        settings.RECENSEMENT_EMAIL = "agent@recensement.cd"
        settings.RECENSEMENT_PASSWORD = "pw"
        with mock.patch("synchro_terrain.services.AuthenticationClient") as auth:
            services.construire_client()
        auth.return_value.client_authentifie.assert_called_once_with()


@pytest.mark.django_db
class TestCommands:

    def test_exporter_contribuables(self, patched_client, mock_session):
        for i in range(3):
            _contribuable(i)
        out = StringIO()
        call_command("exporter_contribuables", "--chunk-size", "2", stdout=out)
        assert "3 contribuable(s) exporté(s)" in out.getvalue()
        assert mock_session.request.call_count == 2
        patched_client.assert_called_once_with(None)

    def test_login_flag(self, patched_client):
        call_command("exporter_parcelles", "--login", stdout=StringIO())
        patched_client.assert_called_once_with(True)

    def test_conserver(self, patched_client):
        _contribuable()
        call_command("exporter_contribuables", "--conserver", stdout=StringIO())
        assert ContribuableLocal.objects.get().sync_status == ContribuableLocal.SYNCHRONISE

    def test_failure_is_command_error(self, patched_client, mock_session):
        ParcelleLocal.objects.create(code_parcelle="P-1")
        mock_session.request.return_value = http_response(400, "Erreur lors du traitement: x")
        with pytest.raises(CommandError, match="1 en échec"):
            call_command("exporter_parcelles", stdout=StringIO())

    def test_bad_chunk_size(self, patched_client):
        with pytest.raises(CommandError):
            call_command("exporter_contribuables", "--chunk-size", "0", stdout=StringIO())

    def test_auth_failure(self):
        err = AuthenticationError(AuthenticationError.INVALID_CREDENTIALS, "Identifiants invalides.")
        with mock.patch.object(services, "construire_client", side_effect=err):
            with pytest.raises(CommandError, match="invalid_credentials"):
                call_command("exporter_contribuables", "--login", stdout=StringIO())

    def test_synchroniser_referentiels(self, patched_client, mock_session):
        mock_session.request.return_value = json_response({"communes": [{"id": 3, "libelle": "Gombe"}]})
        out = StringIO()
        call_command("synchroniser_referentiels", stdout=out)
        assert "communes : 1" in out.getvalue()
        assert RefCommune.objects.get().id == 3

    def test_synchroniser_referentiels_failure(self, patched_client, mock_session):
        mock_session.request.return_value = http_response(404, "")
        with pytest.raises(CommandError, match="HTTP 404"):
            call_command("synchroniser_referentiels", stdout=StringIO())


@pytest.mark.django_db
class TestTasks:

    def test_export_contribuables_task(self, patched_client):
        _contribuable()
        res = export_contribuables_task.delay().get()
        assert res == {"success": True, "synced": 1, "failed": 0, "error": None, "retryable": False}

    def test_export_parcelles_task_failure(self, patched_client, mock_session):
        ParcelleLocal.objects.create()
        mock_session.request.return_value = http_response(503, "")
        res = export_parcelles_task.delay().get()
        assert res["success"] is False
        assert res["retryable"] is True

    def test_sync_referentiels_task(self, patched_client, mock_session):
        mock_session.request.return_value = json_response({})
        res = sync_referentiels_task.delay().get()
        assert res["success"] is True
        assert res["counts"]["communes"] == 0


@pytest.mark.django_db
class TestAdminAction:

    def test_export_now(self, admin_client, patched_client, mock_session):
        for i in range(2):
            _contribuable(i)
        url = reverse("admin:synchro_terrain_contribuablelocal_changelist")
        resp = admin_client.post(url, {
            "action": "exporter_maintenant",
            "_selected_action": [str(pk) for pk in ContribuableLocal.objects.values_list("pk", flat=True)],
        }, follow=True)
        assert resp.status_code == 200
        assert "Export terminé : 2 fiche(s) envoyée(s)." in resp.content.decode()
        assert ContribuableLocal.objects.count() == 0

    def test_changelist_renders(self, admin_client):
        ParcelleLocal.objects.create(code_parcelle="P-1")
        resp = admin_client.get(reverse("admin:synchro_terrain_parcellelocal_changelist"))
        assert resp.status_code == 200
