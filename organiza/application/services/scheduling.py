"""Scheduling rules — booking conflict detection and overdue checks.

The conflict checks only read from the repositories they are given; they
never write. A conflict is a warning for the caller to confirm, so "no
conflict" is ``None`` and only malformed input raises.
"""

from datetime import date, datetime, timedelta
from typing import Any, Optional

import structlog

from organiza.config import get_settings
from organiza.core.clock import to_local_naive
from organiza.core.exceptions import (
    BusinessRuleViolationException,
    InvalidRangeError,
    UnknownClientError,
    UnknownProjectError,
    UnknownVisitError,
)
from organiza.domain.models.project import Project
from organiza.domain.models.visit import Visit
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository

settings = get_settings()
logger = structlog.get_logger(__name__)

ACTIVE_PROJECT_STATUSES = ("Em andamento", "A iniciar", "Pausado", "Atrasado")
CLOSED_PROJECT_STATUSES = ("Concluído", "Cancelado")
OVERDUE_PROJECT_STATUS = "Atrasado"
PENDING_VISIT_STATUS = "pendente"


def ensure_valid_range(start: Optional[date], end: Optional[date]) -> None:
    if start is None or end is None or end < start:
        raise InvalidRangeError(start, end)


def ranges_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """Inclusive interval overlap: ranges sharing a single day overlap."""
    return max(start_a, start_b) <= min(end_a, end_b)


def check_visit_conflict(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    client_id: int,
    when: datetime,
    exclude_visit_id: Optional[int] = None,
    tolerance: Optional[timedelta] = None,
) -> Optional[Visit]:
    """Return an existing visit of the client booked at the same instant.

    Visits of every status occupy their slot. ``tolerance`` widens the slot
    symmetrically; it defaults to ``VISIT_CONFLICT_TOLERANCE_MINUTES``
    (zero means exact timestamp collision).
    """
    if when is None:
        raise BusinessRuleViolationException("Data da visita é obrigatória")
    if client_repo.get_by_id(client_id) is None:
        raise UnknownClientError(client_id)
    if exclude_visit_id is not None and visit_repo.get_by_id(exclude_visit_id) is None:
        raise UnknownVisitError(exclude_visit_id)

    if tolerance is None:
        tolerance = timedelta(minutes=settings.VISIT_CONFLICT_TOLERANCE_MINUTES)
    candidate = to_local_naive(when)

    for visit in visit_repo.list_by_client(client_id):
        if visit.id == exclude_visit_id:
            continue
        if abs(to_local_naive(visit.date) - candidate) <= tolerance:
            logger.info("Visit conflict detected", client_id=client_id, visit_id=visit.id)
            return visit
    return None


def check_project_conflict(
    client_repo: ClientRepository,
    project_repo: ProjectRepository,
    client_id: int,
    start: date,
    end: date,
    exclude_project_id: Optional[int] = None,
) -> Optional[Project]:
    """Return an existing project of the client whose dates overlap [start, end]."""
    ensure_valid_range(start, end)
    if client_repo.get_by_id(client_id) is None:
        raise UnknownClientError(client_id)
    if exclude_project_id is not None and project_repo.get_by_id(exclude_project_id) is None:
        raise UnknownProjectError(exclude_project_id)

    for project in project_repo.list_by_client(client_id):
        if project.id == exclude_project_id:
            continue
        if ranges_overlap(project.start_date, project.end_date, start, end):
            logger.info("Project conflict detected", client_id=client_id, project_id=project.id)
            return project
    return None


def is_project_overdue(project: Any, today: date) -> bool:
    return project.end_date < today and project.status not in CLOSED_PROJECT_STATUSES


def is_visit_overdue(visit: Any, now: datetime) -> bool:
    return to_local_naive(visit.date) < now and visit.status == PENDING_VISIT_STATUS
