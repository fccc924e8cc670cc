"""Finance API routes — revenue totals and payment status breakdown."""

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends

from organiza.application.services.finance import get_finance_summary, partition_projects_by_payment_status
from organiza.core.exceptions import InvalidRangeError
from organiza.domain.models.user import User
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.schemas.finance import DateRange, FinanceSummary
from organiza.domain.schemas.project import ProjectRead
from organiza.interfaces.api.deps import get_current_user
from organiza.interfaces.deps import get_project_repository

router = APIRouter(prefix="/api/finance", tags=["Finance"])


@router.get("/summary", response_model=FinanceSummary)
def finance_summary(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    """Realized and pending revenue, optionally restricted to a date window."""
    window = None
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            raise InvalidRangeError(start_date, end_date)
        window = DateRange(start=start_date, end=end_date)
    return get_finance_summary(repo, window)


@router.get("/projects", response_model=Dict[str, List[ProjectRead]])
def projects_by_payment_status(
    repo: ProjectRepository = Depends(get_project_repository),
    user: User = Depends(get_current_user),
):
    """Projects split into fully paid and still pending."""
    return partition_projects_by_payment_status(repo.list_all())
