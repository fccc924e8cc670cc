"""
SQLAlchemy Implementation of Client Repository.
"""

from typing import Any, Dict, List

from sqlalchemy import func

from organiza.domain.models.client import Client
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.schemas.client import ClientFilter
from organiza.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyClientRepository(SQLAlchemyRepository[Client], ClientRepository):
    """Client repository implementation using SQLAlchemy."""

    def get_with_filters(self, filters: ClientFilter) -> Dict[str, Any]:
        query = self.db.query(Client)

        if filters.search:
            pattern = f"%{filters.search.lower()}%"
            query = query.filter(func.lower(Client.name).like(pattern))

        total = query.count()
        offset = (filters.page - 1) * filters.page_size
        clients = query.order_by(Client.name).offset(offset).limit(filters.page_size).all()

        return {
            "items": clients,
            "total": total,
            "page": filters.page,
            "page_size": filters.page_size,
            "total_pages": (total + filters.page_size - 1) // filters.page_size,
        }

    def list_all(self) -> List[Client]:
        return self.db.query(Client).order_by(Client.name).all()
