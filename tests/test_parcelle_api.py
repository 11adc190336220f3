"""Tests for parcel ingestion."""
import pytest

from Parcelle.models import Parcelle, Batiment, Personne


def _parcelle(code="P-1", **extra):
    dto = {
        "codeParcelle": code,
        "statutParcelle": "active",
        "superficieM2": 450.5,
        "batiments": [
            {"typeBatiment": "maison", "usagePrincipal": "résidentiel", "statutBatiment": "en_usage", "nombreEtages": 1},
            {"typeBatiment": "commerce", "usagePrincipal": "commercial", "statutBatiment": "en_usage"},
        ],
        "personnes": [{"typePersonne": "physique", "nomRaisonSociale": "Mbala"}],
    }
    dto.update(extra)
    return dto


@pytest.mark.django_db
class TestParcelleBatch:

    def test_batch_with_children(self, client, refs):
        """Parcels are stored with their buildings and owner."""
        dtos = [_parcelle("P-1", commune=refs["commune"].id, rueAvenue=refs["avenue"].id), _parcelle("P-2")]
        resp = client.post("/parcelles/batch", dtos, content_type="application/json")
        assert resp.status_code == 200
        assert resp.content.decode() == "Opération terminée avec succès. 2 parcelle(s) enregistrée(s)."
        p1 = Parcelle.objects.get(code_parcelle="P-1")
        assert p1.commune == refs["commune"]
        assert p1.rue_avenue == refs["avenue"]
        assert p1.batiments.count() == 2
        assert p1.personnes.get().nom_raison_sociale == "Mbala"
        assert Batiment.objects.count() == 4

    def test_parcel_without_children(self, client):
        """batiments/personnes may be absent or null."""
        dto = {"codeParcelle": "P-3", "statutParcelle": "active", "batiments": None}
        resp = client.post("/parcelles/batch", [dto], content_type="application/json")
        assert resp.status_code == 200
        assert Parcelle.objects.get().batiments.count() == 0

    def test_invalid_child_rejects_batch(self, client):
        """A building without typeBatiment rejects every parcel."""
        bad = _parcelle("P-2")
        del bad["batiments"][0]["typeBatiment"]
        resp = client.post("/parcelles/batch", [_parcelle("P-1"), bad], content_type="application/json")
        assert resp.status_code == 400
        assert "typeBatiment" in resp.content.decode()
        assert Parcelle.objects.count() == 0
        assert Personne.objects.count() == 0

    def test_body_must_be_list(self, client):
        resp = client.post("/parcelles/batch", _parcelle(), content_type="application/json")
        assert resp.status_code == 400


@pytest.mark.django_db
class TestParcelleSingle:

    def test_single(self, client):
        resp = client.post("/parcelles", _parcelle("P-9"), content_type="application/json")
        assert resp.status_code == 200
        assert resp.content.decode() == "Parcelle enregistrée avec succès."
        assert Parcelle.objects.get().code_parcelle == "P-9"

    def test_missing_statut(self, client):
        """statutParcelle is mandatory."""
        dto = _parcelle()
        del dto["statutParcelle"]
        resp = client.post("/parcelles", dto, content_type="application/json")
        assert resp.status_code == 400
        assert Parcelle.objects.count() == 0
