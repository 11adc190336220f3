"""Shared pytest fixtures."""
from unittest import mock

import pytest
import requests

from Referentiel.models import RefCommune, RefQuartier, RefAvenue, RefZoneType, RefTypeActivite
from synchro_terrain.transfer import TransferClient

from .helpers import DjangoClientSession, http_response


@pytest.fixture
def upload_dir(settings, tmp_path):
    d = tmp_path / "uploads"
    d.mkdir()
    settings.RECENSEMENT_UPLOAD_DIR = d
    return d


@pytest.fixture
def refs(db):
    return {
        "commune": RefCommune.objects.create(libelle="Gombe"),
        "quartier": RefQuartier.objects.create(libelle="Matonge"),
        "avenue": RefAvenue.objects.create(libelle="Avenue Lumumba"),
        "zone": RefZoneType.objects.create(libelle="Zone urbaine"),
        "activite": RefTypeActivite.objects.create(libelle="Commerce général"),
    }


@pytest.fixture
def mock_session():
    session = mock.Mock(spec=requests.Session)
    session.request.return_value = http_response(200, "Opération terminée avec succès.")
    return session


@pytest.fixture
def transfer_client(mock_session):
    return TransferClient(base_url="http://central.test", token="", timeout=5, session=mock_session)


@pytest.fixture
def loopback_client(client):
    """TransferClient whose HTTP calls land on this project's own server views."""
    return TransferClient(base_url="http://testserver", token="", session=DjangoClientSession(client))
