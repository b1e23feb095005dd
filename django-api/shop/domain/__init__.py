from shop.domain.models import (
    ConsumableState,
    EventSnapshot,
    EventSummary,
    EventWithTickets,
    TicketSnapshot,
    TicketView,
)
from shop.domain.value_objects import Capacity, MemberId, Money, ShopIdentification, TicketId

__all__ = [
    "ConsumableState",
    "EventSnapshot",
    "EventSummary",
    "EventWithTickets",
    "TicketSnapshot",
    "TicketView",
    "Capacity",
    "MemberId",
    "Money",
    "ShopIdentification",
    "TicketId",
]
