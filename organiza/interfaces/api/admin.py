"""Admin API routes — user approval and roles."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from organiza.application.services.auth_service import list_users, update_user_access
from organiza.domain.models.user import User
from organiza.domain.schemas.auth import UserAdminUpdate, UserRead
from organiza.infrastructure.database import get_db
from organiza.interfaces.api.deps import require_admin

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/users", response_model=List[UserRead])
def get_users(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return list_users(db)


@router.patch("/users/{user_id}", response_model=UserRead)
def patch_user(
    user_id: int,
    body: UserAdminUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Authorize, revoke or change the role of a user."""
    return update_user_access(db, user_id, body, admin)
