"""Unit tests for projecting ticket snapshots into client views.

Run with: pytest tests/test_projection.py -v
"""

from dataclasses import fields, replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from shop.domain import (
    Capacity,
    ConsumableState,
    EventSnapshot,
    EventSummary,
    Money,
    TicketId,
    TicketSnapshot,
    TicketView,
)
from shop.domain.projection import project_event, project_ticket

RELEASE = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
PURCHASED = ConsumableState(purchased_at=RELEASE, expires_at=None)
GRACE = timedelta(seconds=5)
IN_CART = ConsumableState(purchased_at=None, expires_at=RELEASE + timedelta(minutes=10))


@pytest.fixture
def snapshot() -> TicketSnapshot:
    event = EventSummary(
        id=uuid4(),
        title="Vårbal",
        description="",
        start_datetime=RELEASE + timedelta(days=30),
        end_datetime=RELEASE + timedelta(days=30, hours=6),
        tags=("sittning",),
    )
    return TicketSnapshot(
        id=TicketId(value=uuid4()),
        title="Balbiljett",
        description="",
        price=Money(amount=Decimal("450.00")),
        stock=Capacity(value=100),
        max_amount_per_user=Capacity(value=2),
        available_from=RELEASE,
        available_to=None,
        removed_at=None,
        event=event,
        user_consumables=(),
        user_reservation_count=0,
        purchased_count=0,
        queued_reservation_count=0,
    )


class TestTicketsLeft:
    def test_capped_at_ten_when_plenty_left(self, snapshot):
        assert project_ticket(snapshot, GRACE).tickets_left == 10

    def test_exactly_ten_left(self, snapshot):
        view = project_ticket(replace(snapshot, stock=Capacity(value=15), purchased_count=5), GRACE)
        assert view.tickets_left == 10

    def test_exact_when_few_left(self, snapshot):
        view = project_ticket(replace(snapshot, stock=Capacity(value=10), purchased_count=7), GRACE)
        assert view.tickets_left == 3

    def test_oversold_is_not_clamped_below_zero(self, snapshot):
        view = project_ticket(replace(snapshot, stock=Capacity(value=5), purchased_count=7), GRACE)
        assert view.tickets_left == -2


class TestUserAlreadyHasMax:
    def test_true_at_max(self, snapshot):
        view = project_ticket(replace(snapshot, user_consumables=(PURCHASED, PURCHASED)), GRACE)
        assert view.user_already_has_max

    def test_false_below_max(self, snapshot):
        view = project_ticket(replace(snapshot, user_consumables=(PURCHASED,)), GRACE)
        assert not view.user_already_has_max

    def test_cart_items_do_not_count(self, snapshot):
        view = project_ticket(replace(snapshot, user_consumables=(PURCHASED, IN_CART)), GRACE)
        assert not view.user_already_has_max


class TestIsInUsersCart:
    def test_false_without_items(self, snapshot):
        assert not project_ticket(snapshot, GRACE).is_in_users_cart

    def test_true_with_unpurchased_item(self, snapshot):
        assert project_ticket(replace(snapshot, user_consumables=(IN_CART,)), GRACE).is_in_users_cart

    def test_true_with_reservation(self, snapshot):
        assert project_ticket(replace(snapshot, user_reservation_count=1), GRACE).is_in_users_cart

    def test_false_with_only_purchases(self, snapshot):
        view = project_ticket(replace(snapshot, user_consumables=(PURCHASED, PURCHASED)), GRACE)
        assert not view.is_in_users_cart


class TestHasQueue:
    def test_false_without_queued_reservations(self, snapshot):
        assert not project_ticket(snapshot, GRACE).has_queue

    def test_true_with_queued_reservations(self, snapshot):
        assert project_ticket(replace(snapshot, queued_reservation_count=1), GRACE).has_queue


def test_grace_period_ends_after_given_window(snapshot):
    assert project_ticket(snapshot, GRACE).grace_period_ends_at == RELEASE + GRACE
    later = project_ticket(snapshot, timedelta(minutes=2))
    assert later.grace_period_ends_at == RELEASE + timedelta(minutes=2)


def test_view_exposes_no_per_user_data_or_raw_counts():
    names = {field.name for field in fields(TicketView)}
    assert names.isdisjoint(
        {
            "consumables",
            "reservations",
            "_count",
            "user_consumables",
            "user_reservation_count",
            "purchased_count",
            "queued_reservation_count",
            "shoppable",
        }
    )


def test_project_event_keeps_event_and_projects_tickets(snapshot):
    projected = project_event(EventSnapshot(event=snapshot.event, tickets=(snapshot,)), GRACE)
    assert projected.event == snapshot.event
    assert projected.tickets == (project_ticket(snapshot, GRACE),)
    assert projected.tickets[0].event is snapshot.event
