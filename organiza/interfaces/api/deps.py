"""FastAPI dependency — JWT auth middleware."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from organiza.application.services.auth_service import AUTHORIZED, decode_access_token, get_user_by_email
from organiza.core.exceptions import ForbiddenException, UnauthorizedException
from organiza.domain.models.user import User
from organiza.infrastructure.database import get_db

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Extract and validate the current user from JWT token."""
    if credentials is None:
        raise UnauthorizedException("Token de acesso ausente")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Token inválido ou expirado")

    email = payload.get("sub")
    if email is None:
        raise UnauthorizedException("Token inválido")

    user = get_user_by_email(db, email)
    if user is None:
        raise UnauthorizedException("Usuário não encontrado")
    if user.status != AUTHORIZED:
        raise ForbiddenException("Acesso não autorizado. Aguarde a aprovação do administrador.")

    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not user.is_admin:
        raise ForbiddenException("Apenas administradores podem acessar este recurso")
    return user
