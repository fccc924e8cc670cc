"""
Tests for the finance, dashboard and report endpoints
"""
from datetime import date, datetime, timedelta
from decimal import Decimal
from io import BytesIO

import pandas as pd
import pytest

from organiza.application.services.report_service import PROJECT_COLUMNS, XLSX_MEDIA_TYPE
from organiza.core.clock import now_local


@pytest.mark.integration
class TestFinanceSummary:

    def test_totals_without_window(self, api_client, ana, make_project):
        make_project(ana, date(2024, 7, 1), date(2024, 7, 15))
        make_project(ana, date(2024, 9, 1), date(2024, 9, 10), payments=(("400", "pago"), ("600", "pendente")))

        body = api_client.get("/api/finance/summary").json()

        assert Decimal(body["realized_revenue"]) == Decimal("1900")
        assert Decimal(body["pending_revenue"]) == Decimal("600")
        assert body["window"] is None
        assert len(body["pending_projects"]) == 1

    def test_window_outside_project(self, api_client, ana_project):
        body = api_client.get(
            "/api/finance/summary", params={"start_date": "2024-08-01", "end_date": "2024-08-31"},
        ).json()
        assert Decimal(body["realized_revenue"]) == Decimal("0")
        assert body["window"] == {"start": "2024-08-01", "end": "2024-08-31"}

    def test_half_open_window_is_rejected(self, api_client):
        response = api_client.get("/api/finance/summary", params={"start_date": "2024-08-01"})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "InvalidRangeError"

    def test_partition(self, api_client, ana, make_project):
        paid = make_project(ana, date(2024, 7, 1), date(2024, 7, 15))
        open_project = make_project(ana, date(2024, 9, 1), date(2024, 9, 10), payments=(("1000", "pendente"),))

        body = api_client.get("/api/finance/projects").json()

        assert [p["id"] for p in body["paid"]] == [paid.id]
        assert [p["id"] for p in body["pending"]] == [open_project.id]


@pytest.mark.integration
class TestDashboard:

    def test_todays_schedule(self, api_client, ana, make_visit, make_project):
        now = now_local()
        visit = make_visit(ana, now.replace(hour=23, minute=59, second=0, microsecond=0))
        project = make_project(ana, now.date() - timedelta(days=2), now.date() + timedelta(days=2))

        body = api_client.get("/api/dashboard/summary").json()

        ids = [item["id"] for item in body["schedule"]]
        assert f"visit-{visit.id}" in ids
        assert f"project-{project.id}" in ids
        assert [p["id"] for p in body["active_projects"]] == [project.id]
        assert body["visits_by_status"] == {"pendente": 1}
        assert Decimal(body["revenue"]["realized"]) == Decimal("1500")

    def test_empty_dashboard(self, api_client):
        body = api_client.get("/api/dashboard/summary").json()
        assert body["schedule"] == []
        assert Decimal(body["revenue"]["pending"]) == Decimal("0")


@pytest.mark.integration
class TestReports:

    def test_projects_export(self, api_client, ana_project):
        response = api_client.get("/api/reports/projects.xlsx")

        assert response.status_code == 200
        assert response.headers["content-type"] == XLSX_MEDIA_TYPE
        assert "relatorio_projetos_" in response.headers["content-disposition"]

        df = pd.read_excel(BytesIO(response.content))
        assert list(df.columns) == PROJECT_COLUMNS
        assert df.loc[0, "Cliente"] == "Ana Silva"
        assert df.loc[0, "Recebido (R$)"] == 1500.0
        assert df.loc[0, "Status do Pagamento"] == "pago"

    def test_empty_clients_export_has_header(self, api_client):
        response = api_client.get("/api/reports/clients.xlsx")
        df = pd.read_excel(BytesIO(response.content))
        assert df.empty
        assert "Nome" in df.columns

    def test_visits_export_by_range(self, api_client, ana, make_visit):
        make_visit(ana, datetime(2024, 7, 2, 10, 0))
        make_visit(ana, datetime(2024, 8, 2, 10, 0))

        response = api_client.get(
            "/api/reports/visits.xlsx", params={"start_date": "2024-07-01", "end_date": "2024-07-31"},
        )

        df = pd.read_excel(BytesIO(response.content))
        assert list(df["Data"]) == ["02/07/2024"]
        assert list(df["Hora"]) == ["10:00"]
