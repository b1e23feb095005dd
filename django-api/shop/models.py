"""Django ORM models (persistence layer).

These models handle database concerns. Ticket projection lives in
shop/domain/projection.py.
"""

import uuid

from django.db import models

from events.models import Event
from members.models import Member


class Shoppable(models.Model):
    """Anything that can be put in a cart, with an availability window and stock."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    stock = models.PositiveIntegerField()
    available_from = models.DateTimeField()
    available_to = models.DateTimeField(blank=True, null=True)
    removed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["available_from"]
        indexes = [
            models.Index(fields=["available_from"]),
        ]

    def __str__(self) -> str:
        return self.title


class Ticket(models.Model):
    """Event admission, stored as an extension of its shoppable."""

    shoppable = models.OneToOneField(
        Shoppable, on_delete=models.CASCADE, primary_key=True, related_name="ticket"
    )
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    max_amount_per_user = models.PositiveIntegerField(default=1)

    def __str__(self) -> str:
        return f"{self.shoppable.title} ({self.event.title})"


class Consumable(models.Model):
    """A unit claimed against a shoppable.

    ``purchased_at`` is null while the item sits in a cart; ``expires_at``
    is when the cart hold lapses.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shoppable = models.ForeignKey(
        Shoppable, on_delete=models.CASCADE, related_name="consumables"
    )
    member = models.ForeignKey(
        Member,
        on_delete=models.CASCADE,
        related_name="consumables",
        blank=True,
        null=True,
    )
    external_customer_code = models.CharField(max_length=255, blank=True, null=True)
    purchased_at = models.DateTimeField(blank=True, null=True)
    expires_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["shoppable", "purchased_at"]),
            models.Index(fields=["member"]),
            models.Index(fields=["external_customer_code"]),
        ]

    def __str__(self) -> str:
        state = "purchased" if self.purchased_at else "in cart"
        return f"{self.shoppable_id} ({state})"


class ConsumableReservation(models.Model):
    """A place in the queue for a shoppable whose stock may run out.

    ``order`` is assigned once the queue has been drawn.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    shoppable = models.ForeignKey(
        Shoppable, on_delete=models.CASCADE, related_name="reservations"
    )
    member = models.ForeignKey(
        Member,
        on_delete=models.CASCADE,
        related_name="reservations",
        blank=True,
        null=True,
    )
    external_customer_code = models.CharField(max_length=255, blank=True, null=True)
    order = models.PositiveIntegerField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["shoppable", "order"]),
        ]

    def __str__(self) -> str:
        return f"{self.shoppable_id} (#{self.order})"
