"""Visit API routes — scheduling, photos, budgets and conflict checks."""

from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from organiza.application.services.scheduling import check_visit_conflict
from organiza.application.services.visit_service import (
    add_budget_to_visit,
    add_photo_to_visit,
    create_visit,
    get_visit,
    list_visits,
    update_visit,
)
from organiza.domain.models.user import User
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.photo import PhotoCreate
from organiza.domain.schemas.visit import BudgetCreate, VisitConflict, VisitCreate, VisitRead, VisitRef, VisitUpdate
from organiza.interfaces.api.deps import get_current_user
from organiza.interfaces.deps import get_client_repository, get_project_repository, get_visit_repository

router = APIRouter(prefix="/api/visits", tags=["Visits"])


@router.get("", response_model=List[VisitRead])
def get_visits(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    """List visits, optionally within an inclusive date range."""
    return list_visits(repo, start_date, end_date)


@router.get("/conflicts", response_model=VisitConflict)
def visit_conflicts(
    client_id: int,
    when: datetime,
    exclude_visit_id: Optional[int] = None,
    client_repo: ClientRepository = Depends(get_client_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    """Check whether the client already has a visit at this time."""
    conflict = check_visit_conflict(client_repo, visit_repo, client_id, when, exclude_visit_id)
    return VisitConflict(conflict=VisitRef.model_validate(conflict) if conflict else None)


@router.post("", response_model=VisitRead, status_code=status.HTTP_201_CREATED)
def post_visit(
    body: VisitCreate,
    client_repo: ClientRepository = Depends(get_client_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    return create_visit(client_repo, visit_repo, body)


@router.get("/{visit_id}", response_model=VisitRead)
def read_visit(
    visit_id: int,
    repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    return get_visit(repo, visit_id)


@router.patch("/{visit_id}", response_model=VisitRead)
def patch_visit(
    visit_id: int,
    body: VisitUpdate,
    client_repo: ClientRepository = Depends(get_client_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    return update_visit(client_repo, visit_repo, project_repo, visit_id, body)


@router.post("/{visit_id}/photos", response_model=VisitRead)
def post_visit_photo(
    visit_id: int,
    body: PhotoCreate,
    repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    return add_photo_to_visit(repo, visit_id, body)


@router.post("/{visit_id}/budget", response_model=VisitRead)
def post_visit_budget(
    visit_id: int,
    body: BudgetCreate,
    repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    """Attach a budget to the visit and move it to 'orçamento'."""
    return add_budget_to_visit(repo, visit_id, body)
