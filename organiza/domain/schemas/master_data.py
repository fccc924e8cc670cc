"""Pydantic schemas for master data and company settings."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

MasterDataKind = Literal[
    "visit_status",
    "project_status",
    "payment_status",
    "payment_instrument",
    "photo_type",
]


class MasterDataItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class MasterDataItemRead(BaseModel):
    id: int
    kind: str
    name: str

    model_config = {"from_attributes": True}


class CompanySettingsRead(BaseModel):
    company_name: str
    logo_url: Optional[str] = None

    model_config = {"from_attributes": True}


class CompanySettingsUpdate(BaseModel):
    company_name: str = Field(min_length=1)
    logo_url: Optional[str] = None
