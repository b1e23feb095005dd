"""Domain error codes for the positions module."""

from enum import Enum

from common.errors import DomainError
from positions.domain import messages


class ErrorCode(Enum):
    """Domain error codes."""

    POSITION_NOT_FOUND = "POSITION_NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    MANDATE_NOT_FOUND = "MANDATE_NOT_FOUND"
    INVALID_MANDATE_PERIOD = "INVALID_MANDATE_PERIOD"


class PositionNotFoundError(DomainError):
    """Raised when a position is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.POSITION_NOT_FOUND,
            message=messages.position_not_found(),
        )


class MemberNotFoundError(DomainError):
    """Raised when the member to give a mandate to does not exist."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MEMBER_NOT_FOUND,
            message=messages.member_not_found(),
        )


class MandateNotFoundError(DomainError):
    """Raised when a mandate is not found on the position."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MANDATE_NOT_FOUND,
            message=messages.mandate_not_found(),
        )


class InvalidMandatePeriodError(DomainError):
    """Raised when a mandate would end before it starts."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MANDATE_PERIOD,
            message=messages.mandate_period_invalid(),
        )
