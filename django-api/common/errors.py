"""Base class for domain errors shared by every app."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message.

    Each app defines its own ``ErrorCode`` enum.
    """

    code: Enum
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
