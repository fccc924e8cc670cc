"""Dashboard API — today's agenda and aggregated stats for the frontend."""

from typing import List

from fastapi import APIRouter, Depends

from organiza.application.services.dashboard_service import get_dashboard_summary, get_todays_schedule
from organiza.domain.models.user import User
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.schedule import DashboardSummary, ScheduleItem
from organiza.interfaces.api.deps import get_current_user
from organiza.interfaces.deps import get_client_repository, get_project_repository, get_visit_repository

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummary)
def dashboard_summary(
    client_repo: ClientRepository = Depends(get_client_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    """Get unified dashboard data: agenda, active projects, visits and revenue."""
    return get_dashboard_summary(client_repo, visit_repo, project_repo)


@router.get("/schedule", response_model=List[ScheduleItem])
def todays_schedule(
    client_repo: ClientRepository = Depends(get_client_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    return get_todays_schedule(client_repo, visit_repo, project_repo)
