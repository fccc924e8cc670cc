"""Project API routes — projects, installments, photos and conflict checks."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from organiza.application.services.project_service import (
    add_photo_to_project,
    create_project,
    get_project,
    list_projects,
    set_payment_status,
    update_project,
)
from organiza.application.services.scheduling import check_project_conflict
from organiza.domain.models.user import User
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.photo import ProjectPhotoCreate
from organiza.domain.schemas.project import (
    PaymentStatusUpdate,
    ProjectConflict,
    ProjectCreate,
    ProjectRead,
    ProjectRef,
    ProjectUpdate,
)
from organiza.interfaces.api.deps import get_current_user
from organiza.interfaces.deps import get_client_repository, get_project_repository, get_visit_repository

router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.get("", response_model=List[ProjectRead])
def get_projects(
    client_id: Optional[int] = None,
    repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    return list_projects(repo, client_id)


@router.get("/conflicts", response_model=ProjectConflict)
def project_conflicts(
    client_id: int,
    start_date: date,
    end_date: date,
    exclude_project_id: Optional[int] = None,
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    """Check whether the client already has a project overlapping these dates."""
    conflict = check_project_conflict(client_repo, project_repo, client_id, start_date, end_date, exclude_project_id)
    return ProjectConflict(conflict=ProjectRef.model_validate(conflict) if conflict else None)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def post_project(
    body: ProjectCreate,
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    return create_project(client_repo, project_repo, visit_repo, body)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project(
    project_id: int,
    repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    return get_project(repo, project_id)


@router.patch("/{project_id}", response_model=ProjectRead)
def patch_project(
    project_id: int,
    body: ProjectUpdate,
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    return update_project(client_repo, project_repo, project_id, body)


@router.patch("/{project_id}/payments/{payment_id}", response_model=ProjectRead)
def patch_payment(
    project_id: int,
    payment_id: int,
    body: PaymentStatusUpdate,
    repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    """Mark an installment as paid or pending."""
    return set_payment_status(repo, project_id, payment_id, body.status)


@router.post("/{project_id}/photos", response_model=ProjectRead)
def post_project_photo(
    project_id: int,
    body: ProjectPhotoCreate,
    repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    return add_photo_to_project(repo, project_id, body)
