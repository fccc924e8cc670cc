"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

UserRole = Literal["administrador", "usuario"]
UserStatus = Literal["pending", "authorized", "revoked"]


class UserCreate(BaseModel):
    name: str = Field(min_length=3)
    email: str
    password: str = Field(min_length=6)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserAdminUpdate(BaseModel):
    status: Optional[UserStatus] = None
    role: Optional[UserRole] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
