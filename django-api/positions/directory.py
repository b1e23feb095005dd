"""Keeps the identity provider's view of who holds which position in sync."""

import logging
from abc import ABC, abstractmethod

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class MandateDirectory(ABC):
    """Interface for the external directory that grants position roles."""

    @abstractmethod
    def add_mandate(self, student_id: str, position_id: str) -> None:
        ...

    @abstractmethod
    def delete_mandate(self, student_id: str, position_id: str) -> None:
        ...


class LoggingMandateDirectory(MandateDirectory):
    """Directory that only records what would have been synced."""

    def add_mandate(self, student_id: str, position_id: str) -> None:
        logger.info("Directory: add %s to %s", student_id, position_id)

    def delete_mandate(self, student_id: str, position_id: str) -> None:
        logger.info("Directory: remove %s from %s", student_id, position_id)


def get_mandate_directory() -> MandateDirectory:
    """Instantiate the directory named by ``settings.POSITIONS_MANDATE_DIRECTORY``."""
    return import_string(settings.POSITIONS_MANDATE_DIRECTORY)()
