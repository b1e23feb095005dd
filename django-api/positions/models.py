"""Django ORM models (persistence layer) for positions and mandates."""

import uuid

from django.db import models

from members.models import Member


class Position(models.Model):
    """A role in the union, e.g. ``dsek.infu.mdlm``."""

    id = models.CharField(primary_key=True, max_length=255)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    email = models.EmailField(blank=True, null=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class EmailAlias(models.Model):
    """An address that forwards to a position's mandate holders."""

    email = models.EmailField()
    position = models.ForeignKey(
        Position, on_delete=models.CASCADE, related_name="email_aliases"
    )

    class Meta:
        indexes = [
            models.Index(fields=["position"]),
        ]

    def __str__(self) -> str:
        return self.email


class Mandate(models.Model):
    """A member holding a position for a period of time."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    position = models.ForeignKey(Position, on_delete=models.CASCADE, related_name="mandates")
    member = models.ForeignKey(Member, on_delete=models.CASCADE, related_name="mandates")
    start_date = models.DateField()
    end_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-start_date"]
        indexes = [
            models.Index(fields=["position", "start_date"]),
        ]

    def __str__(self) -> str:
        return f"{self.member} - {self.position_id} ({self.start_date} - {self.end_date})"
