"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Self
from uuid import UUID

# Clients never learn the exact number of tickets left above this value
TICKETS_LEFT_DISPLAY_CAP = 10

# Tickets stay listed this long after their sale has closed
TICKET_VISIBILITY_WINDOW = timedelta(days=10)


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket (shared with its Shoppable)."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class MemberId:
    """Unique identifier for a Member."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class ShopIdentification:
    """Who is shopping: a signed-in member or an anonymous session.

    Exactly one of ``member_id`` and ``session_id`` is set.
    """

    member_id: MemberId | None = None
    session_id: str | None = None

    def __post_init__(self) -> None:
        if (self.member_id is None) == (self.session_id is None):
            raise ValueError("Exactly one of member_id and session_id must be set")
        if self.session_id is not None and not self.session_id.strip():
            raise ValueError("session_id cannot be blank")

    @classmethod
    def for_member(cls, member_id: MemberId) -> Self:
        return cls(member_id=member_id)

    @classmethod
    def for_session(cls, session_id: str) -> Self:
        return cls(session_id=session_id)

    @property
    def is_member(self) -> bool:
        return self.member_id is not None


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
