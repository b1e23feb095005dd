"""Domain error codes for the shop module."""

from enum import Enum

from common.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    INVALID_TICKET_ID = "INVALID_TICKET_ID"


class InvalidTicketIdError(DomainError):
    """Raised when a ticket ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_ID,
            message="Invalid ticket ID format",
        )
