"""Pydantic schemas for Visit domain."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from organiza.core.clock import to_local_naive
from organiza.domain.schemas.photo import PhotoRead


class VisitBase(BaseModel):
    client_id: int
    date: datetime
    status: str = "pendente"
    summary: str = Field(min_length=3)

    @field_validator("date")
    @classmethod
    def _localize(cls, value: datetime) -> datetime:
        return to_local_naive(value)


class VisitCreate(VisitBase):
    confirm_conflict: bool = False
    confirm_past_date: bool = False


class VisitUpdate(BaseModel):
    client_id: Optional[int] = None
    date: Optional[datetime] = None
    status: Optional[str] = None
    summary: Optional[str] = Field(default=None, min_length=3)
    project_id: Optional[int] = None
    confirm_conflict: bool = False
    confirm_past_date: bool = False

    @field_validator("date")
    @classmethod
    def _localize(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value) if value is not None else None

    @field_validator("client_id", "date", "status", "summary", mode="before")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("não pode ser nulo")
        return value


class VisitRead(VisitBase):
    id: int
    project_id: Optional[int] = None
    photos: List[PhotoRead] = []
    budget_amount: Optional[Decimal] = None
    budget_pdf_url: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class VisitRef(BaseModel):
    """Compact visit reference returned by conflict checks."""
    id: int
    summary: str
    date: datetime

    model_config = {"from_attributes": True}


class BudgetCreate(BaseModel):
    amount: Decimal = Field(ge=0, decimal_places=2)
    pdf_url: str = Field(min_length=1)


class VisitConflict(BaseModel):
    conflict: Optional[VisitRef] = None
