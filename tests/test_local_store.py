"""Tests for the field-station store and its datasources."""
import pytest

from synchro_terrain.datasources import ContribuableLocalDatasource, ParcelleLocalDatasource
from synchro_terrain.models import (
    FicheSynchronisable, ContribuableLocal, ParcelleLocal, BatimentLocal, PersonneLocal,
)


def _contribuable(n=0, **extra):
    champs = dict(type_contribuable="PP", nom=f"Local{n}", telephone1=f"08100{n:03d}", origine_fiche="mobile")
    champs.update(extra)
    return ContribuableLocal.objects.create(**champs)


@pytest.mark.django_db
class TestToDto:

    def test_contribuable_omits_nulls(self):
        """Null columns are left out of the DTO; mandatory ones are always there."""
        dto = _contribuable(1, commune_id=3, gps_latitude=-4.3).to_dto()
        assert dto["typeContribuable"] == "PP"
        assert dto["refCommune"] == 3
        assert dto["gpsLatitude"] == -4.3
        assert "email" not in dto
        assert "refAvenue" not in dto

    def test_parcelle_nests_children(self):
        """Buildings and the optional owner are nested in the parcel DTO."""
        p = ParcelleLocal.objects.create(code_parcelle="P-1", commune_id=2, avenue_id=7)
        BatimentLocal.objects.create(parcelle=p, type_batiment="maison", nombre_etages=2)
        dto = p.to_dto()
        assert dto["statutParcelle"] == "active"
        assert dto["rueAvenue"] == 7
        assert dto["batiments"] == [
            {"typeBatiment": "maison", "usagePrincipal": "autre", "statutBatiment": "en_usage", "nombreEtages": 2}
        ]
        assert dto["personnes"] == []

        PersonneLocal.objects.create(parcelle=p, type_personne="morale", nom_raison_sociale="SARL X")
        p = ParcelleLocal.objects.get(pk=p.pk)
        assert p.to_dto()["personnes"] == [{"typePersonne": "morale", "nomRaisonSociale": "SARL X"}]


@pytest.mark.django_db
class TestContribuableDatasource:

    @pytest.fixture
    def ds(self):
        return ContribuableLocalDatasource()

    def test_fetch_unsynced_order_and_limit(self, ds):
        """Pending and failed rows are returned oldest first."""
        rows = [_contribuable(i) for i in range(5)]
        rows[1].sync_status = FicheSynchronisable.SYNCHRONISE
        rows[1].save()
        rows[2].sync_status = FicheSynchronisable.ECHEC
        rows[2].save()
        page = ds.fetch_unsynced(3)
        assert [r.pk for r in page] == [rows[0].pk, rows[2].pk, rows[3].pk]
        assert ds.count_unsynced() == 4

    def test_mark_failed(self, ds):
        """mark_failed stores the error and counts attempts."""
        row = _contribuable()
        ds.mark_failed([row.pk], "HTTP 400: refusé")
        ds.mark_failed([row.pk], "HTTP 400: refusé")
        row.refresh_from_db()
        assert row.sync_status == FicheSynchronisable.ECHEC
        assert row.sync_error == "HTTP 400: refusé"
        assert row.sync_attempts == 2
        assert row.last_sync_at is not None

    def test_mark_synced(self, ds):
        row = _contribuable()
        ds.mark_failed([row.pk], "boom")
        ds.mark_synced([row.pk])
        row.refresh_from_db()
        assert row.sync_status == FicheSynchronisable.SYNCHRONISE
        assert row.sync_error is None
        assert ds.fetch_unsynced() == []

    def test_empty_ids_are_noops(self, ds):
        assert ds.mark_synced([]) == 0
        assert ds.mark_failed([], "x") == 0
        assert ds.delete_exported([]) == 0

    def test_delete_exported_removes_photos(self, ds, tmp_path):
        """Exported rows are deleted together with their local photos."""
        photo = tmp_path / "cni.jpg"
        photo.write_bytes(b"jpeg")
        row = _contribuable(pieces_identite=[str(photo), str(tmp_path / "deja_absente.jpg")])
        other = _contribuable(1)
        assert ds.delete_exported([row]) == 1
        assert not photo.exists()
        assert list(ContribuableLocal.objects.all()) == [other]


@pytest.mark.django_db
class TestParcelleDatasource:

    def test_delete_cascades_children(self):
        p = ParcelleLocal.objects.create(code_parcelle="P-1")
        BatimentLocal.objects.create(parcelle=p, type_batiment="maison")
        PersonneLocal.objects.create(parcelle=p, type_personne="physique")
        ds = ParcelleLocalDatasource()
        page = ds.fetch_unsynced(10)
        ds.delete_exported(page)
        assert ParcelleLocal.objects.count() == 0
        assert BatimentLocal.objects.count() == 0
        assert PersonneLocal.objects.count() == 0
