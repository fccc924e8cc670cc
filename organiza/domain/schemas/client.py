"""Pydantic schemas for Client domain."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from organiza.domain.schemas.project import ProjectRead
from organiza.domain.schemas.visit import VisitRead


class ClientBase(BaseModel):
    name: str = Field(min_length=3)
    phone: str = Field(min_length=10)
    email: Optional[EmailStr] = None
    address: str = Field(min_length=5)
    preferences: Optional[str] = None
    cpf: Optional[str] = Field(default=None, max_length=14)
    birthday: Optional[str] = Field(default=None, pattern=r"^\d{2}/\d{2}$")


class ClientCreate(ClientBase):
    pass


class ClientUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=3)
    phone: Optional[str] = Field(default=None, min_length=10)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(default=None, min_length=5)
    preferences: Optional[str] = None
    cpf: Optional[str] = Field(default=None, max_length=14)
    birthday: Optional[str] = Field(default=None, pattern=r"^\d{2}/\d{2}$")

    @field_validator("name", "phone", "address", mode="before")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("não pode ser nulo")
        return value


class ClientRead(ClientBase):
    id: int
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ClientFilter(BaseModel):
    search: Optional[str] = None
    page: int = 1
    page_size: int = 50


class PreferenceAnalysisResponse(BaseModel):
    client_id: int
    preference_summary: str


class ClientHistory(BaseModel):
    client: ClientRead
    projects: List[ProjectRead] = []
    visits: List[VisitRead] = []
