"""Domain models representing persisted state and what clients may see.

These are pure domain objects with no API input rules.
Django ORM models are in shop/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from shop.domain.value_objects import Capacity, Money, TicketId


@dataclass(frozen=True)
class EventSummary:
    """An event as seen from one of its tickets (no tickets list)."""

    id: UUID
    title: str
    description: str
    start_datetime: datetime
    end_datetime: datetime
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConsumableState:
    """One of the requester's claims on a shoppable."""

    purchased_at: datetime | None
    expires_at: datetime | None

    @property
    def is_purchased(self) -> bool:
        return self.purchased_at is not None


@dataclass(frozen=True)
class TicketSnapshot:
    """A ticket as read from the store, scoped to one requester.

    ``user_consumables`` and ``user_reservation_count`` only cover the
    requester's own rows; the two counts cover every customer.
    """

    id: TicketId
    title: str
    description: str
    price: Money
    stock: Capacity
    max_amount_per_user: Capacity
    available_from: datetime
    available_to: datetime | None
    removed_at: datetime | None
    event: EventSummary
    user_consumables: tuple[ConsumableState, ...]
    user_reservation_count: int
    purchased_count: int
    queued_reservation_count: int


@dataclass(frozen=True)
class TicketView:
    """A ticket as shown to a client.

    Carries derived flags only, never other customers' data or raw counts.
    """

    id: TicketId
    title: str
    description: str
    price: Money
    stock: Capacity
    max_amount_per_user: Capacity
    available_from: datetime
    available_to: datetime | None
    removed_at: datetime | None
    event: EventSummary
    grace_period_ends_at: datetime
    is_in_users_cart: bool
    user_already_has_max: bool
    tickets_left: int
    has_queue: bool


@dataclass(frozen=True)
class EventSnapshot:
    """An event with the snapshots of its visible tickets."""

    event: EventSummary
    tickets: tuple[TicketSnapshot, ...] = ()


@dataclass(frozen=True)
class EventWithTickets:
    """An event with the projected views of its visible tickets."""

    event: EventSummary
    tickets: tuple[TicketView, ...] = ()
