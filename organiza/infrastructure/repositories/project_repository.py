"""
SQLAlchemy Implementation of Project Repository.
"""

from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy.orm import selectinload

from organiza.domain.models.project import Payment, Project
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProjectRepository(SQLAlchemyRepository[Project], ProjectRepository):
    """Project repository implementation using SQLAlchemy."""

    def _query(self):
        return self.db.query(Project).options(selectinload(Project.payments))

    def list_all(self) -> List[Project]:
        return self._query().order_by(Project.start_date.desc()).all()

    def list_by_client(self, client_id: int) -> List[Project]:
        return (
            self._query()
            .filter(Project.client_id == client_id)
            .order_by(Project.start_date.desc())
            .all()
        )

    def list_by_status(self, statuses: Sequence[str], ending_after: Optional[date] = None) -> List[Project]:
        query = self._query().filter(Project.status.in_(list(statuses)))
        if ending_after is not None:
            query = query.filter(Project.end_date >= ending_after)
        return query.order_by(Project.end_date.asc()).all()

    def get_payment(self, project_id: int, payment_id: int) -> Optional[Payment]:
        return (
            self.db.query(Payment)
            .filter(Payment.id == payment_id, Payment.project_id == project_id)
            .first()
        )

    def replace_payments(self, project: Project, payments: List[Payment]) -> Project:
        # delete-orphan cascade removes installments dropped from the list
        project.payments = payments
        self.save(project)
        return project
