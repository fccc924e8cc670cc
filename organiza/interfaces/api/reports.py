"""Report API — .xlsx exports."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from organiza.application.services.report_service import (
    CLIENT_COLUMNS,
    PROJECT_COLUMNS,
    VISIT_COLUMNS,
    XLSX_MEDIA_TYPE,
    client_rows,
    project_rows,
    to_xlsx,
    visit_rows,
)
from organiza.core.clock import today_local
from organiza.domain.models.user import User
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.interfaces.api.deps import get_current_user
from organiza.interfaces.deps import get_client_repository, get_project_repository, get_visit_repository

router = APIRouter(prefix="/api/reports", tags=["Reports"])


def _xlsx_response(content: bytes, name: str) -> Response:
    filename = f"relatorio_{name}_{today_local():%Y-%m-%d}.xlsx"
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/clients.xlsx")
def export_clients(
    repo: ClientRepository = Depends(get_client_repository),
    user: User = Depends(get_current_user),
):
    return _xlsx_response(to_xlsx(client_rows(repo), CLIENT_COLUMNS), "clientes")


@router.get("/visits.xlsx")
def export_visits(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    client_repo: ClientRepository = Depends(get_client_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    rows = visit_rows(client_repo, visit_repo, start_date, end_date)
    return _xlsx_response(to_xlsx(rows, VISIT_COLUMNS), "visitas")


@router.get("/projects.xlsx")
def export_projects(
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    rows = project_rows(client_repo, project_repo)
    return _xlsx_response(to_xlsx(rows, PROJECT_COLUMNS), "projetos")
