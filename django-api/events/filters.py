"""Query predicates shared by everything that lists events."""

from django.db.models import Q


def basic_event_filter(published_only: bool = True) -> Q:
    """Return the predicate every publicly listed event must satisfy.

    Removed events are never listed. Drafts are hidden unless
    ``published_only`` is false (e.g. for editors).
    """
    predicate = Q(removed_at__isnull=True)
    if published_only:
        predicate &= Q(is_draft=False)
    return predicate
