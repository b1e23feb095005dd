"""Pytest configuration and shared fixtures."""

import logging
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events.models import Event, Tag
from members.models import Member
from shop.models import Consumable, ConsumableReservation, Shoppable, Ticket


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def now():
    return timezone.now()


@pytest.fixture
def make_member():
    def make(student_id="al1234bc-s", first_name="Adam", last_name="Larsson"):
        return Member.objects.create(
            student_id=student_id, first_name=first_name, last_name=last_name
        )

    return make


@pytest.fixture
def make_event(now):
    def make(title="Sittning", start=None, tags=(), **fields):
        start = start or now + timedelta(days=7)
        event = Event.objects.create(
            title=title,
            description=f"{title} description",
            start_datetime=start,
            end_datetime=start + timedelta(hours=5),
            **fields,
        )
        for name in tags:
            tag, _ = Tag.objects.get_or_create(name=name)
            event.tags.add(tag)
        return event

    return make


@pytest.fixture
def make_ticket(now, make_event):
    def make(
        title="Biljett",
        event=None,
        stock=100,
        max_amount_per_user=1,
        available_from=None,
        available_to=None,
        removed_at=None,
    ):
        shoppable = Shoppable.objects.create(
            title=title,
            description="",
            price=Decimal("120.00"),
            stock=stock,
            available_from=available_from or now - timedelta(days=1),
            available_to=available_to,
            removed_at=removed_at,
        )
        return Ticket.objects.create(
            shoppable=shoppable,
            event=event or make_event(),
            max_amount_per_user=max_amount_per_user,
        )

    return make


@pytest.fixture
def make_consumable():
    def make(ticket, member=None, session=None, purchased_at=None, expires_at=None):
        return Consumable.objects.create(
            shoppable=ticket.shoppable,
            member=member,
            external_customer_code=session,
            purchased_at=purchased_at,
            expires_at=expires_at,
        )

    return make


@pytest.fixture
def make_reservation():
    def make(ticket, member=None, session=None, order=None):
        return ConsumableReservation.objects.create(
            shoppable=ticket.shoppable,
            member=member,
            external_customer_code=session,
            order=order,
        )

    return make


class RecordingMandateDirectory:
    """Mandate directory that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    def add_mandate(self, student_id: str, position_id: str) -> None:
        self.calls.append(("add", student_id, position_id))

    def delete_mandate(self, student_id: str, position_id: str) -> None:
        self.calls.append(("delete", student_id, position_id))


@pytest.fixture
def mandate_directory(monkeypatch) -> RecordingMandateDirectory:
    directory = RecordingMandateDirectory()
    monkeypatch.setattr("positions.signals.get_mandate_directory", lambda: directory)
    return directory


class UnreachableMandateDirectory:
    """Mandate directory whose identity provider never answers."""

    def add_mandate(self, student_id: str, position_id: str) -> None:
        raise ConnectionError("identity provider unreachable")

    def delete_mandate(self, student_id: str, position_id: str) -> None:
        raise ConnectionError("identity provider unreachable")


@pytest.fixture
def unreachable_directory(monkeypatch, caplog) -> UnreachableMandateDirectory:
    directory = UnreachableMandateDirectory()
    monkeypatch.setattr("positions.signals.get_mandate_directory", lambda: directory)
    # The "positions" logger does not propagate to the root handler caplog listens on.
    monkeypatch.setattr(logging.getLogger("positions"), "propagate", True)
    return directory
