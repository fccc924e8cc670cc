"""
Visit Repository Interface.
Defines specific data access operations for Visits.
"""

from datetime import datetime
from typing import Dict, List, Optional

from organiza.domain.repositories.base import BaseRepository
from organiza.domain.models.visit import Visit


class VisitRepository(BaseRepository[Visit]):
    """Interface for Visit-specific operations."""

    def list_by_client(self, client_id: int) -> List[Visit]:
        """All visits of a client, most recent first."""
        ...

    def list_between(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[Visit]:
        """Visits whose date falls in [start, end]; open bounds when None."""
        ...

    def count_by_status(self) -> Dict[str, int]:
        """Number of visits per status."""
        ...
