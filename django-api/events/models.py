"""Django ORM models (persistence layer).

Tickets for an event live in the shop app and point back here.
"""

import uuid

from django.db import models


class Tag(models.Model):
    """Persistence model for event tags."""

    name = models.CharField(max_length=100, unique=True)
    color = models.CharField(max_length=7, blank=True, null=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_datetime = models.DateTimeField()
    end_datetime = models.DateTimeField()
    is_draft = models.BooleanField(default=False)
    removed_at = models.DateTimeField(blank=True, null=True)
    tags = models.ManyToManyField(Tag, related_name="events", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_datetime"]
        indexes = [
            models.Index(fields=["start_datetime"]),
        ]

    def __str__(self) -> str:
        return self.title
