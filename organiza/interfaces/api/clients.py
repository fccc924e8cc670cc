"""Client API routes — CRUD, history and AI preference summary."""

from typing import Callable

from fastapi import APIRouter, Depends, status

from organiza.application.services.client_service import (
    build_client_details,
    create_client,
    get_client,
    get_client_history,
    get_clients,
    update_client,
)
from organiza.domain.models.user import User
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.client import (
    ClientCreate,
    ClientFilter,
    ClientHistory,
    ClientRead,
    ClientUpdate,
    PreferenceAnalysisResponse,
)
from organiza.interfaces.api.deps import get_current_user
from organiza.interfaces.deps import (
    get_client_repository,
    get_preference_analyzer,
    get_project_repository,
    get_visit_repository,
)

router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("")
def list_clients(
    search: str = None,
    page: int = 1,
    page_size: int = 50,
    repo: ClientRepository = Depends(get_client_repository),
    user: User = Depends(get_current_user),
):
    """List clients with name search and pagination."""
    filters = ClientFilter(search=search, page=page, page_size=page_size)
    result = get_clients(repo, filters)
    result["items"] = [ClientRead.model_validate(c) for c in result["items"]]
    return result


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
def post_client(
    body: ClientCreate,
    repo: ClientRepository = Depends(get_client_repository),
    user: User = Depends(get_current_user),
):
    return create_client(repo, body)


@router.get("/{client_id}", response_model=ClientRead)
def read_client(
    client_id: int,
    repo: ClientRepository = Depends(get_client_repository),
    user: User = Depends(get_current_user),
):
    return get_client(repo, client_id)


@router.patch("/{client_id}", response_model=ClientRead)
def patch_client(
    client_id: int,
    body: ClientUpdate,
    repo: ClientRepository = Depends(get_client_repository),
    user: User = Depends(get_current_user),
):
    return update_client(repo, client_id, body)


@router.get("/{client_id}/history", response_model=ClientHistory)
def client_history(
    client_id: int,
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    user: User = Depends(get_current_user),
):
    """Client record with all of their visits and projects."""
    return get_client_history(client_repo, project_repo, visit_repo, client_id)


@router.post("/{client_id}/preferences", response_model=PreferenceAnalysisResponse)
def analyze_preferences(
    client_id: int,
    client_repo: ClientRepository = Depends(get_client_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    visit_repo: VisitRepository = Depends(get_visit_repository),
    analyzer: Callable[[str, str], str] = Depends(get_preference_analyzer),
    user: User = Depends(get_current_user),
):
    """Summarize the client's preferences with the configured LLM."""
    history = get_client_history(client_repo, project_repo, visit_repo, client_id)
    summary = analyzer(history["client"].name, build_client_details(history))
    return PreferenceAnalysisResponse(client_id=client_id, preference_summary=summary)
