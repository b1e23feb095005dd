"""Domain models for positions and the members holding them."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class MemberSummary:
    """The parts of a member shown alongside a mandate."""

    id: UUID
    student_id: str
    first_name: str | None
    last_name: str | None


@dataclass(frozen=True)
class MandateDetail:
    """A mandate with the member holding it."""

    id: UUID
    position_id: str
    member: MemberSummary
    start_date: date
    end_date: date


@dataclass(frozen=True)
class PositionDetail:
    """A position with its mandates and e-mail aliases."""

    id: str
    name: str
    description: str | None
    email: str | None
    mandates: tuple[MandateDetail, ...] = ()
    email_aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class PositionChanges:
    """Fields to change on a position. Only keys present in ``fields`` are applied."""

    fields: dict

    def __post_init__(self) -> None:
        unknown = set(self.fields) - {"name", "description", "email"}
        if unknown:
            raise ValueError(f"Unknown position fields: {sorted(unknown)}")
