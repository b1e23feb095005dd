"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from django.db.models import Q

from shop.domain import EventSnapshot, ShopIdentification, TicketId, TicketSnapshot


class TicketStore(ABC):
    """Interface for ticket read operations scoped to one requester."""

    @abstractmethod
    def get_ticket(
        self, ticket_id: TicketId, identification: ShopIdentification, now: datetime
    ) -> TicketSnapshot | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def list_tickets(
        self, identification: ShopIdentification, now: datetime
    ) -> list[TicketSnapshot]:
        """Return visible tickets ordered by available_from ascending."""
        ...

    @abstractmethod
    def list_events_with_tickets(
        self,
        identification: ShopIdentification,
        now: datetime,
        filters: Q | None = None,
    ) -> list[EventSnapshot]:
        """Return published events matching ``filters`` ordered by start_datetime
        ascending, each with its visible tickets."""
        ...
