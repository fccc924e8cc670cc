"""
Client Repository Interface.
Defines specific data access operations for Clients.
"""

from typing import Any, Dict

from organiza.domain.repositories.base import BaseRepository
from organiza.domain.models.client import Client
from organiza.domain.schemas.client import ClientFilter


class ClientRepository(BaseRepository[Client]):
    """Interface for Client-specific operations."""

    def get_with_filters(self, filters: ClientFilter) -> Dict[str, Any]:
        """Get clients with name search and pagination."""
        ...

    def list_all(self) -> list[Client]:
        """All clients ordered by name."""
        ...
