"""Auth service — JWT token management, password hashing and user approval."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from organiza.config import get_settings
from organiza.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from organiza.domain.models.user import User
from organiza.domain.schemas.auth import UserAdminUpdate

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

AUTHORIZED = "authorized"
PENDING = "pending"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Valid credentials of an approved user, else None."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        return None
    if user.status != AUTHORIZED:
        return None
    return user


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def create_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: str = "usuario",
    status: str = PENDING,
) -> User:
    user = User(
        name=name,
        email=email.lower(),
        password_hash=hash_password(password),
        role=role,
        status=status,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User created", email=user.email, role=role, status=status)
    return user


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def update_user_access(db: Session, user_id: int, changes: UserAdminUpdate, acting_user: User) -> User:
    """Authorize/revoke a user or change their role."""
    user = db.get(User, user_id)
    if user is None:
        raise EntityNotFoundException("Usuário não encontrado", {"user_id": user_id})
    if user.id == acting_user.id and (changes.status not in (None, AUTHORIZED) or changes.role not in (None, user.role)):
        raise BusinessRuleViolationException("Você não pode alterar o seu próprio acesso")

    for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    logger.info("User access updated", user_id=user.id, status=user.status, role=user.role, by=acting_user.email)
    return user


def ensure_default_admin(db: Session) -> None:
    """Create the bootstrap administrator when missing."""
    if get_user_by_email(db, settings.DEFAULT_ADMIN_EMAIL):
        return
    create_user(
        db,
        name="Admin",
        email=settings.DEFAULT_ADMIN_EMAIL,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        role="administrador",
        status=AUTHORIZED,
    )
    logger.info("Default admin user created", email=settings.DEFAULT_ADMIN_EMAIL)
