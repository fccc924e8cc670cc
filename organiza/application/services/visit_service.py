"""Visit service — scheduling, updates, photos and budgets for visits."""

import uuid
from datetime import date, datetime, time
from typing import List, Optional

import structlog

from organiza.application.services.scheduling import check_visit_conflict, ensure_valid_range
from organiza.core.clock import now_local
from organiza.core.exceptions import ConfirmationRequiredException, UnknownProjectError, UnknownVisitError
from organiza.domain.models.visit import Visit
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.photo import PhotoCreate
from organiza.domain.schemas.visit import BudgetCreate, VisitCreate, VisitRef, VisitUpdate

logger = structlog.get_logger(__name__)

BUDGET_STATUS = "orçamento"
CONFIRM_FLAGS = {"confirm_conflict", "confirm_past_date"}


def _guard_booking(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    client_id: int,
    when: datetime,
    exclude_visit_id: Optional[int],
    confirm_conflict: bool,
    confirm_past_date: bool,
    now: Optional[datetime],
) -> None:
    """Raise ConfirmationRequiredException unless the user already confirmed."""
    conflict = check_visit_conflict(client_repo, visit_repo, client_id, when, exclude_visit_id)
    if conflict is not None and not confirm_conflict:
        raise ConfirmationRequiredException(
            "Já existe uma visita agendada para este cliente neste horário",
            {
                "reason": "visit_conflict",
                "conflict": VisitRef.model_validate(conflict).model_dump(mode="json"),
            },
        )

    if when < (now or now_local()) and not confirm_past_date:
        raise ConfirmationRequiredException(
            "A data da visita está no passado",
            {"reason": "past_date", "date": when.isoformat()},
        )


def get_visit(repo: VisitRepository, visit_id: int) -> Visit:
    visit = repo.get_by_id(visit_id)
    if visit is None:
        raise UnknownVisitError(visit_id)
    return visit


def list_visits(repo: VisitRepository, start: Optional[date] = None, end: Optional[date] = None) -> List[Visit]:
    """Visits in an inclusive date range; all visits when no range is given."""
    if start is None and end is None:
        return repo.list_between()
    ensure_valid_range(start, end)
    return repo.list_between(datetime.combine(start, time.min), datetime.combine(end, time.max))


def create_visit(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    data: VisitCreate,
    now: Optional[datetime] = None,
) -> Visit:
    _guard_booking(
        client_repo, visit_repo, data.client_id, data.date, None,
        data.confirm_conflict, data.confirm_past_date, now,
    )
    visit = visit_repo.create(data.model_dump(exclude=CONFIRM_FLAGS))
    logger.info("Visit scheduled", visit_id=visit.id, client_id=visit.client_id)
    return visit


def update_visit(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    project_repo: ProjectRepository,
    visit_id: int,
    data: VisitUpdate,
    now: Optional[datetime] = None,
) -> Visit:
    visit = get_visit(visit_repo, visit_id)
    changes = data.model_dump(exclude_unset=True, exclude=CONFIRM_FLAGS)

    if changes.get("project_id") is not None and project_repo.get_by_id(changes["project_id"]) is None:
        raise UnknownProjectError(changes["project_id"])

    moved = "date" in changes and changes["date"] != visit.date
    reassigned = "client_id" in changes and changes["client_id"] != visit.client_id
    if moved or reassigned:
        when = changes.get("date", visit.date)
        _guard_booking(
            client_repo, visit_repo,
            changes.get("client_id", visit.client_id), when, visit.id,
            data.confirm_conflict,
            # only a new date can trip the past-date gate
            data.confirm_past_date or not moved,
            now,
        )

    return visit_repo.update(visit, changes)


def add_photo_to_visit(repo: VisitRepository, visit_id: int, photo: PhotoCreate) -> Visit:
    visit = get_visit(repo, visit_id)
    new_photo = {"id": str(uuid.uuid4()), **photo.model_dump()}
    # reassign so the JSON column is flagged as modified
    visit.photos = [*(visit.photos or []), new_photo]
    repo.save(visit)
    return visit


def add_budget_to_visit(repo: VisitRepository, visit_id: int, budget: BudgetCreate) -> Visit:
    visit = get_visit(repo, visit_id)
    return repo.update(
        visit,
        {"budget_amount": budget.amount, "budget_pdf_url": budget.pdf_url, "status": BUDGET_STATUS},
    )
