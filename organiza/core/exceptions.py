"""
Global exception handling for the application.
Standardizes error responses using Problem Details for HTTP APIs (RFC 7807).
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class BusinessRuleViolationException(AppError):
    """Business logic violation error."""
    def __init__(self, message: str = "Business rule violation", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class ConfirmationRequiredException(AppError):
    """The operation is allowed but needs an explicit confirmation from the user.

    Raised for booking conflicts and past-date scheduling. The client resends
    the request with the matching ``confirm_*`` flag to proceed.
    """
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


# Domain errors

class UnknownClientError(EntityNotFoundException):
    def __init__(self, client_id: Any):
        super().__init__("Cliente não encontrado", {"client_id": client_id})


class UnknownProjectError(EntityNotFoundException):
    def __init__(self, project_id: Any):
        super().__init__("Projeto não encontrado", {"project_id": project_id})


class UnknownVisitError(EntityNotFoundException):
    def __init__(self, visit_id: Any):
        super().__init__("Visita não encontrada", {"visit_id": visit_id})


class InvalidRangeError(BusinessRuleViolationException):
    """End date before start date, or a range with a missing bound."""
    def __init__(self, start: Any, end: Any):
        super().__init__(
            "A data final não pode ser anterior à data inicial",
            {"start": str(start) if start is not None else None, "end": str(end) if end is not None else None},
        )


class PrecisionMismatchError(BusinessRuleViolationException):
    """Payments of a project do not add up to its value."""
    def __init__(self, value: Any, payments_total: Any):
        super().__init__(
            "A soma das parcelas deve ser igual ao valor do projeto",
            {"value": str(value), "payments_total": str(payments_total)},
        )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.__class__.__name__,
                    "message": exc.message,
                    "details": exc.details,
                    "path": request.url.path,
                }
            },
        )

    logger.exception("Unexpected error occurred", path=request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "InternalServerError",
                "message": "An unexpected error occurred. Please try again later.",
                "path": request.url.path,
            }
        },
    )
