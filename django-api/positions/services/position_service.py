"""Position service - business rules for positions and mandates.

Services depend only on store interfaces and raise domain errors.
"""

import logging
from datetime import date
from uuid import UUID

from positions.domain import MandateDetail, MemberSummary, PositionChanges, PositionDetail
from positions.domain.errors import (
    InvalidMandatePeriodError,
    MandateNotFoundError,
    MemberNotFoundError,
    PositionNotFoundError,
)
from positions.stores.interfaces import PositionStore

logger = logging.getLogger(__name__)


class PositionService:
    """Service for viewing positions and handing out mandates."""

    def __init__(self, store: PositionStore) -> None:
        self._store = store

    def get_position(self, position_id: str) -> PositionDetail:
        """Return a position with its mandates and e-mail aliases.

        Raises:
            PositionNotFoundError: If the position does not exist.
        """
        position = self._store.get_position(position_id)
        if position is None:
            raise PositionNotFoundError()
        return position

    def update_position(self, position_id: str, changes: PositionChanges) -> None:
        """Raises:
        PositionNotFoundError: If the position does not exist.
        """
        if not self._store.update_position(position_id, changes):
            raise PositionNotFoundError()
        logger.info("Updated position %s: %s", position_id, sorted(changes.fields))

    def add_mandate(
        self, position_id: str, member_id: UUID, start_date: date, end_date: date
    ) -> MandateDetail:
        """Give ``member_id`` a mandate on the position.

        Raises:
            PositionNotFoundError: If the position does not exist.
            MemberNotFoundError: If the member does not exist.
            InvalidMandatePeriodError: If the mandate would end before it starts.
        """
        if end_date < start_date:
            raise InvalidMandatePeriodError()
        if not self._store.position_exists(position_id):
            raise PositionNotFoundError()
        if self._store.get_member(member_id) is None:
            raise MemberNotFoundError()
        mandate = self._store.create_mandate(position_id, member_id, start_date, end_date)
        logger.info(
            "Gave %s a mandate on %s (%s - %s)",
            mandate.member.student_id,
            position_id,
            start_date,
            end_date,
        )
        return mandate

    def update_mandate(
        self,
        position_id: str,
        mandate_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> MemberSummary:
        """Change a mandate's dates and return who holds it.

        Raises:
            MandateNotFoundError: If the mandate is not on this position.
            InvalidMandatePeriodError: If the mandate would end before it starts.
        """
        mandate = self._store.get_mandate(mandate_id, position_id)
        if mandate is None:
            raise MandateNotFoundError()
        if (end_date or mandate.end_date) < (start_date or mandate.start_date):
            raise InvalidMandatePeriodError()
        self._store.update_mandate(mandate_id, position_id, start_date, end_date)
        logger.info("Updated mandate %s on %s", mandate_id, position_id)
        return mandate.member

    def delete_mandate(self, position_id: str, mandate_id: UUID) -> MemberSummary:
        """Remove a mandate and return who held it.

        Raises:
            MandateNotFoundError: If the mandate is not on this position.
        """
        mandate = self._store.get_mandate(mandate_id, position_id)
        if mandate is None:
            raise MandateNotFoundError()
        self._store.delete_mandate(mandate_id, position_id)
        logger.info("Removed mandate %s from %s", mandate_id, position_id)
        return mandate.member
