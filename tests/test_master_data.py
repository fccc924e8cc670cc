"""
Tests for option lists and company settings
"""
import pytest

from organiza.application.services.auth_service import AUTHORIZED, create_access_token, create_user
from organiza.application.services.master_data_service import DEFAULT_OPTIONS, seed_master_data


@pytest.mark.integration
class TestMasterData:

    def test_seeded_options(self, api_client, db):
        seed_master_data(db)
        names = [o["name"] for o in api_client.get("/api/master-data/project_status").json()]
        assert names == list(DEFAULT_OPTIONS["project_status"])

    def test_seeding_is_idempotent(self, db):
        assert seed_master_data(db) > 0
        assert seed_master_data(db) == 0

    def test_add_and_delete_option(self, api_client):
        created = api_client.post("/api/master-data/payment_instrument", json={"name": "Boleto"})
        assert created.status_code == 201

        duplicate = api_client.post("/api/master-data/payment_instrument", json={"name": "Boleto"})
        assert duplicate.status_code == 422

        deleted = api_client.delete(f"/api/master-data/payment_instrument/{created.json()['id']}")
        assert deleted.status_code == 204
        assert api_client.get("/api/master-data/payment_instrument").json() == []

    def test_unknown_kind(self, api_client):
        assert api_client.get("/api/master-data/colors").status_code == 422

    def test_regular_user_cannot_add_options(self, client, db):
        user = create_user(db, name="Carlos Lima", email="carlos@example.com", password="segredo123", status=AUTHORIZED)
        headers = {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}
        response = client.post("/api/master-data/visit_status", json={"name": "remarcada"}, headers=headers)
        assert response.status_code == 403


@pytest.mark.integration
class TestCompanySettings:

    def test_defaults_then_update(self, api_client):
        assert api_client.get("/api/settings/company").json()["company_name"] == "Minha Empresa"

        response = api_client.put(
            "/api/settings/company", json={"company_name": "Casa Organizada", "logo_url": "https://cdn.example.com/logo.png"},
        )

        assert response.status_code == 200
        assert api_client.get("/api/settings/company").json()["company_name"] == "Casa Organizada"
