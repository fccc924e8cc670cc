"""Finance service — revenue aggregation over projects and their installments.

All functions are pure over the projects they receive. A date window
selects projects whose active period overlaps it (``basis="project"``), or
installments whose due date falls inside it (``basis="due_date"``).
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from organiza.application.services.payment_plan import CENT, PAID, PENDING, ZERO, to_money
from organiza.application.services.scheduling import ensure_valid_range, ranges_overlap
from organiza.config import get_settings
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.schemas.finance import DateRange, FinanceSummary
from organiza.domain.schemas.project import ProjectRead

settings = get_settings()

WINDOW_BASES = ("project", "due_date")


def _sum_payments(projects: Iterable[Any], status: str, window: Optional[Any], basis: Optional[str]) -> Decimal:
    basis = basis or settings.REVENUE_WINDOW_BASIS
    if basis not in WINDOW_BASES:
        raise ValueError(f"Unknown revenue window basis: {basis}")
    if window is not None:
        ensure_valid_range(window.start, window.end)

    total = ZERO
    for project in projects:
        if window is not None and basis == "project":
            if not ranges_overlap(project.start_date, project.end_date, window.start, window.end):
                continue
        for payment in project.payments or []:
            if payment.status != status:
                continue
            if window is not None and basis == "due_date":
                if payment.due_date is None or not window.start <= payment.due_date <= window.end:
                    continue
            total += to_money(payment.amount)
    return total.quantize(CENT)


def total_realized_revenue(projects: Iterable[Any], window: Optional[Any] = None, basis: Optional[str] = None) -> Decimal:
    """Sum of installments marked 'pago'."""
    return _sum_payments(projects, PAID, window, basis)


def total_pending_revenue(projects: Iterable[Any], window: Optional[Any] = None, basis: Optional[str] = None) -> Decimal:
    """Sum of installments still 'pendente'."""
    return _sum_payments(projects, PENDING, window, basis)


def partition_projects_by_payment_status(projects: Iterable[Any]) -> Dict[str, List[Any]]:
    """Split projects into fully paid ones and everything else."""
    result: Dict[str, List[Any]] = {"paid": [], "pending": []}
    for project in projects:
        key = "paid" if project.payment_status == PAID else "pending"
        result[key].append(project)
    return result


def get_finance_summary(repo: ProjectRepository, window: Optional[DateRange] = None) -> FinanceSummary:
    """Revenue totals plus the projects that still have money to receive."""
    projects = repo.list_all()
    partition = partition_projects_by_payment_status(projects)
    return FinanceSummary(
        realized_revenue=total_realized_revenue(projects, window),
        pending_revenue=total_pending_revenue(projects, window),
        window=window,
        pending_projects=[ProjectRead.model_validate(p) for p in partition["pending"]],
    )
