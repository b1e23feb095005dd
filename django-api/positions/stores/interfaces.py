"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from positions.domain import MandateDetail, MemberSummary, PositionChanges, PositionDetail


class PositionStore(ABC):
    """Interface for position and mandate persistence operations."""

    @abstractmethod
    def get_position(self, position_id: str) -> PositionDetail | None:
        """Return a position with mandates ordered by member first and last
        name, or None if not found."""
        ...

    @abstractmethod
    def position_exists(self, position_id: str) -> bool:
        """Check if a position exists."""
        ...

    @abstractmethod
    def update_position(self, position_id: str, changes: PositionChanges) -> bool:
        """Apply ``changes``; return False if the position does not exist."""
        ...

    @abstractmethod
    def get_member(self, member_id: UUID) -> MemberSummary | None:
        """Return a member by ID, or None if not found."""
        ...

    @abstractmethod
    def get_mandate(self, mandate_id: UUID, position_id: str) -> MandateDetail | None:
        """Return the mandate on this position with its holder, or None."""
        ...

    @abstractmethod
    def create_mandate(
        self, position_id: str, member_id: UUID, start_date: date, end_date: date
    ) -> MandateDetail:
        """Create and return a mandate."""
        ...

    @abstractmethod
    def update_mandate(
        self,
        mandate_id: UUID,
        position_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> None:
        """Change the dates given; None leaves a date as it is."""
        ...

    @abstractmethod
    def delete_mandate(self, mandate_id: UUID, position_id: str) -> None:
        """Delete a mandate from the position."""
        ...
