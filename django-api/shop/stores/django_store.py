"""Django ORM implementation of the TicketStore."""

import logging
from datetime import datetime

from django.db.models import Count, Prefetch, Q, QuerySet

from events.filters import basic_event_filter
from events.models import Event
from shop.domain import (
    Capacity,
    ConsumableState,
    EventSnapshot,
    EventSummary,
    Money,
    ShopIdentification,
    TicketId,
    TicketSnapshot,
)
from shop.domain.value_objects import TICKET_VISIBILITY_WINDOW
from shop.identification import db_identification
from shop.models import Consumable, ConsumableReservation, Ticket
from shop.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


def ticket_queryset(owner: Q, now: datetime) -> QuerySet[Ticket]:
    """Tickets with the rows and counts needed to project them for ``owner``.

    The requester's consumables are limited to purchases, unexpired cart holds
    and holds that never expire. Counts cover every customer.
    """
    user_consumables = Consumable.objects.filter(owner).filter(
        Q(purchased_at__isnull=False)
        | Q(expires_at__gt=now)
        | Q(expires_at__isnull=True)
    )
    user_reservations = ConsumableReservation.objects.filter(owner)
    return (
        Ticket.objects.select_related("shoppable")
        .prefetch_related(
            Prefetch(
                "shoppable__consumables",
                queryset=user_consumables,
                to_attr="user_consumables",
            ),
            Prefetch(
                "shoppable__reservations",
                queryset=user_reservations,
                to_attr="user_reservations",
            ),
        )
        .annotate(
            purchased_count=Count(
                "shoppable__consumables",
                filter=Q(shoppable__consumables__purchased_at__isnull=False),
                distinct=True,
            ),
            queued_reservation_count=Count(
                "shoppable__reservations",
                filter=Q(shoppable__reservations__order__isnull=False),
                distinct=True,
            ),
        )
    )


def visible_tickets_filter(now: datetime) -> Q:
    """Tickets not yet removed whose sale closed at most TICKET_VISIBILITY_WINDOW ago."""
    not_removed = Q(shoppable__removed_at__isnull=True) | Q(shoppable__removed_at__gt=now)
    recently_available = Q(shoppable__available_to__isnull=True) | Q(
        shoppable__available_to__gt=now - TICKET_VISIBILITY_WINDOW
    )
    return not_removed & recently_available


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    def get_ticket(
        self, ticket_id: TicketId, identification: ShopIdentification, now: datetime
    ) -> TicketSnapshot | None:
        owner = db_identification(identification)
        ticket = (
            ticket_queryset(owner, now)
            .select_related("event")
            .prefetch_related("event__tags")
            .filter(shoppable_id=ticket_id.value)
            .first()
        )
        if ticket is None:
            return None
        return _to_ticket_snapshot(ticket, _to_event_summary(ticket.event))

    def list_tickets(
        self, identification: ShopIdentification, now: datetime
    ) -> list[TicketSnapshot]:
        owner = db_identification(identification)
        tickets = (
            ticket_queryset(owner, now)
            .select_related("event")
            .prefetch_related("event__tags")
            .filter(visible_tickets_filter(now))
            .order_by("shoppable__available_from")
        )
        return [
            _to_ticket_snapshot(ticket, _to_event_summary(ticket.event))
            for ticket in tickets
        ]

    def list_events_with_tickets(
        self,
        identification: ShopIdentification,
        now: datetime,
        filters: Q | None = None,
    ) -> list[EventSnapshot]:
        owner = db_identification(identification)
        visible_tickets = (
            ticket_queryset(owner, now)
            .filter(visible_tickets_filter(now))
            .order_by("shoppable__available_from")
        )
        events = (
            Event.objects.filter(basic_event_filter(published_only=True))
            .filter(filters or Q())
            .order_by("start_datetime")
            .distinct()
            .prefetch_related(
                "tags",
                Prefetch("tickets", queryset=visible_tickets, to_attr="visible_tickets"),
            )
        )
        snapshots = []
        for event in events:
            summary = _to_event_summary(event)
            snapshots.append(
                EventSnapshot(
                    event=summary,
                    tickets=tuple(
                        _to_ticket_snapshot(ticket, summary)
                        for ticket in event.visible_tickets
                    ),
                )
            )
        logger.debug("Loaded %d events with tickets", len(snapshots))
        return snapshots


def _to_event_summary(event: Event) -> EventSummary:
    return EventSummary(
        id=event.id,
        title=event.title,
        description=event.description,
        start_datetime=event.start_datetime,
        end_datetime=event.end_datetime,
        tags=tuple(tag.name for tag in event.tags.all()),
    )


def _to_ticket_snapshot(ticket: Ticket, event: EventSummary) -> TicketSnapshot:
    shoppable = ticket.shoppable
    return TicketSnapshot(
        id=TicketId(value=shoppable.id),
        title=shoppable.title,
        description=shoppable.description,
        price=Money(amount=shoppable.price),
        stock=Capacity(value=shoppable.stock),
        max_amount_per_user=Capacity(value=ticket.max_amount_per_user),
        available_from=shoppable.available_from,
        available_to=shoppable.available_to,
        removed_at=shoppable.removed_at,
        event=event,
        user_consumables=tuple(
            ConsumableState(purchased_at=c.purchased_at, expires_at=c.expires_at)
            for c in shoppable.user_consumables
        ),
        user_reservation_count=len(shoppable.user_reservations),
        purchased_count=ticket.purchased_count,
        queued_reservation_count=ticket.queued_reservation_count,
    )
