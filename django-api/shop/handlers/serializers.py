"""Serializers for transforming shop domain models to API responses."""

from rest_framework import serializers


class EventSummarySerializer(serializers.Serializer):
    """Serializer for the EventSummary domain model."""

    id = serializers.UUIDField()
    title = serializers.CharField()
    description = serializers.CharField()
    start_datetime = serializers.DateTimeField()
    end_datetime = serializers.DateTimeField()
    tags = serializers.ListField(child=serializers.CharField())


class TicketSerializer(serializers.Serializer):
    """Serializer for the TicketView domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    stock = serializers.IntegerField(source="stock.value")
    max_amount_per_user = serializers.IntegerField(source="max_amount_per_user.value")
    available_from = serializers.DateTimeField()
    available_to = serializers.DateTimeField(allow_null=True)
    removed_at = serializers.DateTimeField(allow_null=True)
    event = EventSummarySerializer()
    grace_period_ends_at = serializers.DateTimeField()
    is_in_users_cart = serializers.BooleanField()
    user_already_has_max = serializers.BooleanField()
    tickets_left = serializers.IntegerField()
    has_queue = serializers.BooleanField()


class EventWithTicketsSerializer(serializers.Serializer):
    """Serializer for the EventWithTickets domain model.

    Flattens the event summary and nests the ticket views.
    """

    def to_representation(self, instance):
        data = EventSummarySerializer(instance.event).data
        data["tickets"] = TicketSerializer(instance.tickets, many=True).data
        return data
