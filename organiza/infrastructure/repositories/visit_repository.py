"""
SQLAlchemy Implementation of Visit Repository.
"""

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func

from organiza.domain.models.visit import Visit
from organiza.domain.repositories.visit_repository import VisitRepository
from organiza.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyVisitRepository(SQLAlchemyRepository[Visit], VisitRepository):
    """Visit repository implementation using SQLAlchemy."""

    def list_by_client(self, client_id: int) -> List[Visit]:
        return (
            self.db.query(Visit)
            .filter(Visit.client_id == client_id)
            .order_by(Visit.date.desc())
            .all()
        )

    def list_between(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[Visit]:
        query = self.db.query(Visit)
        if start is not None:
            query = query.filter(Visit.date >= start)
        if end is not None:
            query = query.filter(Visit.date <= end)
        return query.order_by(Visit.date.asc()).all()

    def count_by_status(self) -> Dict[str, int]:
        rows = (
            self.db.query(Visit.status, func.count(Visit.id))
            .group_by(Visit.status)
            .all()
        )
        return {status: count for status, count in rows}
