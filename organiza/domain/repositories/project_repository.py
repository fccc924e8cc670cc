"""
Project Repository Interface.
Defines specific data access operations for Projects and their Payments.
"""

from datetime import date
from typing import List, Optional, Sequence

from organiza.domain.repositories.base import BaseRepository
from organiza.domain.models.project import Payment, Project


class ProjectRepository(BaseRepository[Project]):
    """Interface for Project-specific operations."""

    def list_all(self) -> List[Project]:
        """All projects with their payments, most recent start first."""
        ...

    def list_by_client(self, client_id: int) -> List[Project]:
        """All projects of a client."""
        ...

    def list_by_status(self, statuses: Sequence[str], ending_after: Optional[date] = None) -> List[Project]:
        """Projects in any of the given statuses, optionally ending on/after a date."""
        ...

    def get_payment(self, project_id: int, payment_id: int) -> Optional[Payment]:
        """A payment belonging to the given project."""
        ...

    def replace_payments(self, project: Project, payments: List[Payment]) -> Project:
        """Swap the project's installments for a new set and persist."""
        ...
