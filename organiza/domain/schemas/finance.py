"""Pydantic schemas for financial reporting."""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from organiza.domain.schemas.project import ProjectRead


class DateRange(BaseModel):
    """Inclusive calendar-date range. Ordering is checked by the services."""
    start: date
    end: date


class FinanceSummary(BaseModel):
    realized_revenue: Decimal
    pending_revenue: Decimal
    window: Optional[DateRange] = None
    pending_projects: List[ProjectRead] = []
