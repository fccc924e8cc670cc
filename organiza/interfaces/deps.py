"""
API Dependencies.
"""

from typing import Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from organiza.ai.preferences import analyze_client_preferences
from organiza.domain.models.client import Client
from organiza.domain.models.project import Project
from organiza.domain.models.visit import Visit
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.infrastructure.database import get_db
from organiza.infrastructure.repositories.client_repository import SQLAlchemyClientRepository
from organiza.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from organiza.infrastructure.repositories.visit_repository import SQLAlchemyVisitRepository


def get_client_repository(db: Session = Depends(get_db)) -> ClientRepository:
    """Get client repository instance."""
    return SQLAlchemyClientRepository(db, Client)


def get_visit_repository(db: Session = Depends(get_db)) -> VisitRepository:
    """Get visit repository instance."""
    return SQLAlchemyVisitRepository(db, Visit)


def get_project_repository(db: Session = Depends(get_db)) -> ProjectRepository:
    """Get project repository instance."""
    return SQLAlchemyProjectRepository(db, Project)


def get_preference_analyzer() -> Callable[[str, str], str]:
    """Get the client preference summarizer (overridden in tests)."""
    return analyze_client_preferences
