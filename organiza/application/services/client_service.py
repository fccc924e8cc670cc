"""Client service — business logic for client records and history."""

from typing import Any, Dict

from organiza.core.exceptions import UnknownClientError
from organiza.domain.models.client import Client
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.client import ClientCreate, ClientFilter, ClientUpdate


def get_clients(repo: ClientRepository, filters: ClientFilter) -> Dict[str, Any]:
    """Get clients with name search and pagination."""
    return repo.get_with_filters(filters)


def get_client(repo: ClientRepository, client_id: int) -> Client:
    client = repo.get_by_id(client_id)
    if client is None:
        raise UnknownClientError(client_id)
    return client


def create_client(repo: ClientRepository, data: ClientCreate) -> Client:
    return repo.create(data)


def update_client(repo: ClientRepository, client_id: int, data: ClientUpdate) -> Client:
    client = get_client(repo, client_id)
    return repo.update(client, data)


def get_client_history(
    client_repo: ClientRepository,
    project_repo: ProjectRepository,
    visit_repo: VisitRepository,
    client_id: int,
) -> Dict[str, Any]:
    """Client record with every project and visit booked for them."""
    client = get_client(client_repo, client_id)
    return {
        "client": client,
        "projects": project_repo.list_by_client(client_id),
        "visits": visit_repo.list_by_client(client_id),
    }


def build_client_details(history: Dict[str, Any]) -> str:
    """Flatten a client's history into the free text fed to the preference summary."""
    client = history["client"]
    lines = [f"Preferências registradas: {client.preferences or 'Nenhuma'}"]

    for visit in history["visits"]:
        lines.append(f"Visita em {visit.date:%d/%m/%Y} ({visit.status}): {visit.summary}")

    for project in history["projects"]:
        lines.append(
            f"Projeto '{project.name}' de {project.start_date:%d/%m/%Y} a {project.end_date:%d/%m/%Y}"
            f" ({project.status}): {project.description or 'sem descrição'}"
        )

    return "\n".join(lines)
