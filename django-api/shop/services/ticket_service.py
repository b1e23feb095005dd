"""Ticket service - all shop read logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import datetime, timedelta

from django.conf import settings
from django.db.models import Q
from django.utils import timezone

from shop.domain import EventWithTickets, ShopIdentification, TicketId, TicketView
from shop.domain.errors import InvalidTicketIdError
from shop.domain.projection import project_event, project_ticket
from shop.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


class TicketService:
    """Service for listing tickets as a given customer sees them."""

    def __init__(self, store: TicketStore, grace_period: timedelta | None = None) -> None:
        self._store = store
        if grace_period is None:
            grace_period = timedelta(seconds=settings.SHOP_GRACE_PERIOD_SECONDS)
        self._grace_period = grace_period

    def get_ticket(
        self,
        ticket_id: str,
        identification: ShopIdentification,
        now: datetime | None = None,
    ) -> TicketView | None:
        """Return a ticket by ID, or None if it does not exist.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
        """
        try:
            parsed_id = TicketId.from_string(ticket_id)
        except ValueError as exc:
            raise InvalidTicketIdError() from exc
        snapshot = self._store.get_ticket(parsed_id, identification, now or timezone.now())
        if snapshot is None:
            logger.debug("Ticket %s not found", ticket_id)
            return None
        return project_ticket(snapshot, self._grace_period)

    def list_tickets(
        self, identification: ShopIdentification, now: datetime | None = None
    ) -> list[TicketView]:
        """Return visible tickets, earliest release first."""
        snapshots = self._store.list_tickets(identification, now or timezone.now())
        return [project_ticket(snapshot, self._grace_period) for snapshot in snapshots]

    def list_events_with_tickets(
        self,
        identification: ShopIdentification,
        filters: Q | None = None,
        now: datetime | None = None,
    ) -> list[EventWithTickets]:
        """Return published events, earliest first, each with its visible tickets."""
        snapshots = self._store.list_events_with_tickets(
            identification, now or timezone.now(), filters
        )
        return [project_event(snapshot, self._grace_period) for snapshot in snapshots]
