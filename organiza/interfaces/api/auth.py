"""Auth API routes — sign-up, login, me."""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session

from organiza.ai.notifications import notify_admin_of_new_user
from organiza.application.services.auth_service import (
    authenticate_user,
    create_access_token,
    create_user,
    get_user_by_email,
)
from organiza.domain.models.user import User
from organiza.domain.schemas.auth import LoginRequest, TokenResponse, UserCreate, UserRead
from organiza.infrastructure.database import get_db
from organiza.interfaces.api.deps import get_current_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, body.email, body.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email ou senha incorretos, ou acesso ainda não autorizado",
        )

    access_token = create_access_token(data={"sub": user.email, "role": user.role})

    return TokenResponse(
        access_token=access_token,
        user=UserRead.model_validate(user),
    )


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def signup(body: UserCreate, background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    """Register a user; access stays pending until an administrator authorizes it."""
    existing = get_user_by_email(db, body.email)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email já cadastrado",
        )

    user = create_user(db=db, name=body.name, email=body.email, password=body.password)
    background_tasks.add_task(notify_admin_of_new_user, user.name, user.email)
    return UserRead.model_validate(user)


@router.get("/me", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)
