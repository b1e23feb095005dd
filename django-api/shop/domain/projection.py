"""Turns store snapshots into what a client is allowed to see."""

from datetime import timedelta

from shop.domain.models import EventSnapshot, EventWithTickets, TicketSnapshot, TicketView
from shop.domain.value_objects import TICKETS_LEFT_DISPLAY_CAP


def project_ticket(snapshot: TicketSnapshot, grace_period: timedelta) -> TicketView:
    """Project a ticket; ``grace_period`` is how long after release all
    purchases count as simultaneous."""
    purchased_by_user = sum(1 for c in snapshot.user_consumables if c.is_purchased)
    has_cart_item = any(not c.is_purchased for c in snapshot.user_consumables)
    return TicketView(
        id=snapshot.id,
        title=snapshot.title,
        description=snapshot.description,
        price=snapshot.price,
        stock=snapshot.stock,
        max_amount_per_user=snapshot.max_amount_per_user,
        available_from=snapshot.available_from,
        available_to=snapshot.available_to,
        removed_at=snapshot.removed_at,
        event=snapshot.event,
        grace_period_ends_at=snapshot.available_from + grace_period,
        is_in_users_cart=has_cart_item or snapshot.user_reservation_count > 0,
        user_already_has_max=purchased_by_user >= snapshot.max_amount_per_user.value,
        # Hide how many others are buying: never more precise than "10 or more".
        # Oversold tickets are reported as-is (may be negative).
        tickets_left=min(
            snapshot.stock.value - snapshot.purchased_count, TICKETS_LEFT_DISPLAY_CAP
        ),
        has_queue=snapshot.queued_reservation_count > 0,
    )


def project_event(snapshot: EventSnapshot, grace_period: timedelta) -> EventWithTickets:
    return EventWithTickets(
        event=snapshot.event,
        tickets=tuple(project_ticket(ticket, grace_period) for ticket in snapshot.tickets),
    )
