"""Project service — project lifecycle, installment plans and photos."""

import uuid
from decimal import Decimal
from typing import List, Optional

import structlog

from organiza.application.services.payment_plan import (
    INSTALLMENTS,
    PAID,
    PENDING,
    ZERO,
    build_payment_plan,
    ensure_payments_match_value,
    rescale_payments,
    to_money,
)
from organiza.application.services.scheduling import check_project_conflict, ensure_valid_range
from organiza.core.exceptions import (
    ConfirmationRequiredException,
    EntityNotFoundException,
    PrecisionMismatchError,
    UnknownClientError,
    UnknownProjectError,
    UnknownVisitError,
)
from organiza.domain.models.project import Payment, Project
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.domain.schemas.photo import ProjectPhotoCreate
from organiza.domain.schemas.project import PaymentCreate, ProjectCreate, ProjectRef, ProjectUpdate

logger = structlog.get_logger(__name__)

PLAN_FIELDS = {"payments", "first_installment_percentage", "confirm_conflict"}


def _raise_on_conflict(conflict: Optional[Project], confirmed: bool) -> None:
    if conflict is not None and not confirmed:
        raise ConfirmationRequiredException(
            "Já existe um projeto para este cliente nesse período",
            {
                "reason": "project_conflict",
                "conflict": ProjectRef.model_validate(conflict).model_dump(mode="json"),
            },
        )


def _apply_plan(project_repo: ProjectRepository, project: Project, plan: List[PaymentCreate]) -> None:
    """Write the plan onto the project's installments, reusing rows by position."""
    existing = list(project.payments)
    payments = []
    for index, item in enumerate(plan):
        payment = existing[index] if index < len(existing) else Payment()
        payment.amount = item.amount
        payment.status = item.status
        payment.due_date = item.due_date
        payment.description = item.description
        payments.append(payment)
    project_repo.replace_payments(project, payments)


def _carry_over_statuses(current: List[Payment], plan: List[PaymentCreate]) -> List[PaymentCreate]:
    """Keep an installment's status only where the rebuilt one has the same amount; others start 'pendente'."""
    result = []
    for index, item in enumerate(plan):
        old = current[index] if index < len(current) else None
        if old is not None and to_money(old.amount) == item.amount:
            item = item.model_copy(update={"status": old.status})
        else:
            item = item.model_copy(update={"status": PENDING})
        result.append(item)
    return result


def _rescale_pending(current: List[Payment], value: Decimal) -> List[PaymentCreate]:
    """Spread the new value over pending installments; paid ones are money already received."""
    paid_total = sum((to_money(p.amount) for p in current if p.status == PAID), ZERO)
    pending = [p for p in current if p.status != PAID]
    if value < paid_total or not pending:
        raise PrecisionMismatchError(value, paid_total)

    amounts = iter(rescale_payments([p.amount for p in pending], value - paid_total))
    return [
        PaymentCreate(
            amount=to_money(p.amount) if p.status == PAID else next(amounts),
            status=p.status,
            due_date=p.due_date,
            description=p.description,
        )
        for p in current
    ]


def current_first_installment_percentage(project: Project) -> Decimal:
    value = to_money(project.value)
    if project.payment_method == INSTALLMENTS and len(project.payments) == 2 and value > 0:
        return (to_money(project.payments[0].amount) / value * 100).quantize(Decimal("0.01"))
    return Decimal("50")


def get_project(repo: ProjectRepository, project_id: int) -> Project:
    project = repo.get_by_id(project_id)
    if project is None:
        raise UnknownProjectError(project_id)
    return project


def list_projects(repo: ProjectRepository, client_id: Optional[int] = None) -> List[Project]:
    if client_id is not None:
        return repo.list_by_client(client_id)
    return repo.list_all()


def create_project(
    client_repo: ClientRepository,
    project_repo: ProjectRepository,
    visit_repo: VisitRepository,
    data: ProjectCreate,
) -> Project:
    """Create a project with its installments, linking back the originating visit."""
    ensure_valid_range(data.start_date, data.end_date)
    if client_repo.get_by_id(data.client_id) is None:
        raise UnknownClientError(data.client_id)

    visit = None
    if data.visit_id is not None:
        visit = visit_repo.get_by_id(data.visit_id)
        if visit is None:
            raise UnknownVisitError(data.visit_id)

    conflict = check_project_conflict(client_repo, project_repo, data.client_id, data.start_date, data.end_date)
    _raise_on_conflict(conflict, data.confirm_conflict)

    if data.payments is not None:
        plan = data.payments
    else:
        plan = build_payment_plan(
            data.value, data.payment_method, data.start_date, data.end_date,
            data.first_installment_percentage,
        )
    ensure_payments_match_value(data.value, plan)

    project = Project(
        **data.model_dump(exclude=PLAN_FIELDS),
        photos_before=[],
        photos_after=[],
        payments=[Payment(**p.model_dump()) for p in plan],
    )
    project_repo.save(project)

    if visit is not None:
        visit_repo.update(visit, {"project_id": project.id})

    logger.info("Project created", project_id=project.id, client_id=project.client_id, installments=len(plan))
    return project


def update_project(
    client_repo: ClientRepository,
    project_repo: ProjectRepository,
    project_id: int,
    data: ProjectUpdate,
) -> Project:
    """Update a project.

    Installments follow the first matching rule: explicit ``payments`` replace
    the plan; a new payment method or first-installment percentage rebuilds it
    (an installment keeps its paid flag only if its amount is unchanged); a new
    value is spread over the pending installments, paid ones keep their amount.
    """
    project = get_project(project_repo, project_id)
    changes = data.model_dump(exclude_unset=True, exclude=PLAN_FIELDS)

    start = changes.get("start_date", project.start_date)
    end = changes.get("end_date", project.end_date)
    ensure_valid_range(start, end)

    client_id = changes.get("client_id", project.client_id)
    if (start, end, client_id) != (project.start_date, project.end_date, project.client_id):
        conflict = check_project_conflict(client_repo, project_repo, client_id, start, end, project.id)
        _raise_on_conflict(conflict, data.confirm_conflict)

    value = to_money(changes.get("value", project.value))
    method = changes.get("payment_method", project.payment_method)

    if data.payments is not None:
        plan = data.payments
    elif method != project.payment_method or data.first_installment_percentage is not None:
        percentage = data.first_installment_percentage
        if percentage is None:
            percentage = current_first_installment_percentage(project)
        plan = build_payment_plan(value, method, start, end, percentage)
        plan = _carry_over_statuses(project.payments, plan)
    elif value != to_money(project.value):
        plan = _rescale_pending(project.payments, value)
    else:
        plan = None

    if plan is not None:
        ensure_payments_match_value(value, plan)
    else:
        ensure_payments_match_value(value, project.payments)

    for field, field_value in changes.items():
        setattr(project, field, field_value)

    if plan is not None:
        _apply_plan(project_repo, project, plan)
    else:
        project_repo.save(project)

    logger.info("Project updated", project_id=project.id, fields=sorted(changes))
    return project


def set_payment_status(repo: ProjectRepository, project_id: int, payment_id: int, status: str) -> Project:
    """Mark a single installment as paid or pending."""
    project = get_project(repo, project_id)
    payment = repo.get_payment(project_id, payment_id)
    if payment is None:
        raise EntityNotFoundException("Parcela não encontrada", {"project_id": project_id, "payment_id": payment_id})

    payment.status = status
    repo.save(payment)
    repo.save(project)
    logger.info("Payment status changed", project_id=project_id, payment_id=payment_id, status=status)
    return project


def add_photo_to_project(repo: ProjectRepository, project_id: int, photo: ProjectPhotoCreate) -> Project:
    project = get_project(repo, project_id)
    new_photo = {"id": str(uuid.uuid4()), **photo.model_dump(exclude={"stage"})}

    if photo.stage == "before":
        project.photos_before = [*(project.photos_before or []), new_photo]
    else:
        project.photos_after = [*(project.photos_after or []), new_photo]

    repo.save(project)
    return project
