"""Pydantic schemas for Project and Payment."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from organiza.domain.schemas.photo import PhotoRead

PaymentStatus = Literal["pendente", "pago"]
PaymentMethod = Literal["vista", "parcelado"]


class PaymentCreate(BaseModel):
    amount: Decimal = Field(ge=0, decimal_places=2)
    status: PaymentStatus = "pendente"
    due_date: Optional[date] = None
    description: Optional[str] = None


class PaymentRead(PaymentCreate):
    id: int
    project_id: int

    model_config = {"from_attributes": True}


class PaymentStatusUpdate(BaseModel):
    status: PaymentStatus


class ProjectBase(BaseModel):
    client_id: int
    visit_id: Optional[int] = None
    name: str = Field(min_length=3)
    description: Optional[str] = None
    status: str = "A iniciar"
    start_date: date
    end_date: date
    value: Decimal = Field(ge=0, decimal_places=2)
    payment_method: PaymentMethod = "vista"
    payment_instrument: Optional[str] = None


class ProjectCreate(ProjectBase):
    first_installment_percentage: Decimal = Field(default=Decimal("50"), ge=0, le=100)
    # Explicit installments; when omitted the plan is built from payment_method
    payments: Optional[List[PaymentCreate]] = None
    confirm_conflict: bool = False


class ProjectUpdate(BaseModel):
    client_id: Optional[int] = None
    name: Optional[str] = Field(default=None, min_length=3)
    description: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    value: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    payment_method: Optional[PaymentMethod] = None
    payment_instrument: Optional[str] = None
    first_installment_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)
    payments: Optional[List[PaymentCreate]] = None
    confirm_conflict: bool = False

    @field_validator(
        "client_id", "name", "status", "start_date", "end_date", "value", "payment_method", mode="before",
    )
    @classmethod
    def _not_null(cls, value):
        # omit the field to keep the current value
        if value is None:
            raise ValueError("não pode ser nulo")
        return value


class ProjectRead(ProjectBase):
    id: int
    payment_status: str
    payments: List[PaymentRead] = []
    photos_before: List[PhotoRead] = []
    photos_after: List[PhotoRead] = []
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProjectRef(BaseModel):
    """Compact project reference returned by conflict checks."""
    id: int
    name: str
    start_date: date
    end_date: date

    model_config = {"from_attributes": True}


class ProjectConflict(BaseModel):
    conflict: Optional[ProjectRef] = None
