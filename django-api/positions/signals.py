"""Django signals that mirror mandate changes to the identity provider.

The directory is told once the surrounding transaction commits. A directory
failure is logged and never undoes or fails the mandate change.
"""

import logging
from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from positions.directory import get_mandate_directory
from positions.models import Mandate

logger = logging.getLogger(__name__)


def notify_directory(action: str, student_id: str, position_id: str) -> None:
    try:
        getattr(get_mandate_directory(), action)(student_id, position_id)
    except Exception:
        logger.exception(
            "Directory %s failed for %s on %s", action, student_id, position_id
        )


@receiver(post_save, sender=Mandate)
def sync_created_mandate(sender, instance, created, **kwargs):
    """Grant the member the position's role when a mandate is created."""
    if created:
        transaction.on_commit(
            partial(notify_directory, "add_mandate", instance.member.student_id, instance.position_id)
        )


@receiver(post_delete, sender=Mandate)
def sync_deleted_mandate(sender, instance, **kwargs):
    """Revoke the member's role when a mandate is deleted."""
    transaction.on_commit(
        partial(notify_directory, "delete_mandate", instance.member.student_id, instance.position_id)
    )
