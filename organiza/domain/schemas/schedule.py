"""Pydantic schemas for the dashboard schedule."""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

from organiza.domain.schemas.project import ProjectRead
from organiza.domain.schemas.visit import VisitRead


class ScheduleItem(BaseModel):
    id: str
    type: Literal["visit", "project"]
    date: str
    time: Optional[str] = None
    title: str
    client_id: int
    client_name: str
    client_phone: Optional[str] = None
    client_address: Optional[str] = None
    status: str
    path: str
    project_start_date: Optional[date] = None
    project_end_date: Optional[date] = None
    is_overdue: bool = False


class DashboardSummary(BaseModel):
    schedule: List[ScheduleItem] = []
    active_projects: List[ProjectRead] = []
    upcoming_visits: List[VisitRead] = []
    visits_by_status: Dict[str, int] = {}
    revenue: Dict[str, Decimal] = {}
