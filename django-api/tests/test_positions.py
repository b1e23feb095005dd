"""Integration tests for positions and mandates.

Run with: pytest tests/test_positions.py -v
"""

from datetime import date
from uuid import uuid4

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from positions.models import EmailAlias, Mandate, Position


@pytest.fixture
def position():
    position = Position.objects.create(id="dsek.ordf", name="Ordförande")
    EmailAlias.objects.create(email="ordf@dsek.se", position=position)
    return position


@pytest.fixture
def editor(api_client: APIClient, django_user_model) -> APIClient:
    api_client.force_authenticate(django_user_model.objects.create_user(username="editor"))
    api_client.defaults["HTTP_ACCEPT_LANGUAGE"] = "en"
    return api_client


def give_mandate(position, member, start=date(2026, 1, 1), end=date(2026, 12, 31)):
    return Mandate.objects.create(
        position=position, member=member, start_date=start, end_date=end
    )


@pytest.mark.django_db
class TestPositionDetail:
    """Tests for GET /api/positions/{id}"""

    def test_returns_mandates_ordered_by_name(self, api_client, position, make_member):
        give_mandate(position, make_member("s1", "Wilma", "Berg"))
        give_mandate(position, make_member("s2", "Adam", "Svensson"))
        give_mandate(position, make_member("s3", "Adam", "Andersson"))

        response = api_client.get("/api/positions/dsek.ordf")
        assert response.status_code == 200
        body = response.json()
        names = [(m["member"]["first_name"], m["member"]["last_name"]) for m in body["mandates"]]
        assert names == [("Adam", "Andersson"), ("Adam", "Svensson"), ("Wilma", "Berg")]
        assert body["email_aliases"] == ["ordf@dsek.se"]

    def test_position_not_found(self, api_client):
        response = api_client.get("/api/positions/dsek.nope")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "POSITION_NOT_FOUND"


@pytest.mark.django_db
class TestUpdatePosition:
    """Tests for PATCH /api/positions/{id}"""

    def test_updates_given_fields(self, editor, position):
        response = editor.patch(
            "/api/positions/dsek.ordf",
            {"description": "Leads the board", "email": "ordf@dsek.se"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Position updated"
        position.refresh_from_db()
        assert position.name == "Ordförande"
        assert position.description == "Leads the board"
        assert position.email == "ordf@dsek.se"

    def test_rejects_invalid_email(self, editor, position):
        response = editor.patch("/api/positions/dsek.ordf", {"email": "nope"}, format="json")
        assert response.status_code == 400
        assert "email" in response.json()

    def test_requires_authentication(self, api_client, position):
        response = api_client.patch("/api/positions/dsek.ordf", {"name": "x"}, format="json")
        assert response.status_code == 403


@pytest.mark.django_db
class TestMandates:
    """Tests for the mandate endpoints."""

    def test_add_mandate_with_defaults(
        self, editor, position, make_member, mandate_directory, django_capture_on_commit_callbacks
    ):
        member = make_member("al1234bc-s", "Adam")
        with django_capture_on_commit_callbacks(execute=True):
            response = editor.post(
                "/api/positions/dsek.ordf/mandates", {"member_id": str(member.id)}, format="json"
            )
        assert response.status_code == 201
        assert response.json()["message"] == "New mandate given to Adam"
        mandate = Mandate.objects.get()
        today = timezone.localdate()
        assert mandate.start_date == today
        assert mandate.end_date == date(today.year, 12, 31)
        assert mandate_directory.calls == [("add", "al1234bc-s", "dsek.ordf")]

    def test_add_mandate_unknown_member(self, editor, position, mandate_directory):
        response = editor.post(
            "/api/positions/dsek.ordf/mandates", {"member_id": str(uuid4())}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"member_id": ["Member not found"]}
        assert mandate_directory.calls == []

    def test_update_mandate(self, editor, position, make_member):
        mandate = give_mandate(position, make_member("al1234bc-s", "Adam"))
        response = editor.patch(
            f"/api/positions/dsek.ordf/mandates/{mandate.id}",
            {"end_date": "2026-06-30"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Adam's mandate updated"
        mandate.refresh_from_db()
        assert mandate.start_date == date(2026, 1, 1)
        assert mandate.end_date == date(2026, 6, 30)

    def test_update_mandate_on_other_position(self, editor, position, make_member):
        other = Position.objects.create(id="dsek.kass", name="Kassör")
        mandate = give_mandate(other, make_member())
        response = editor.patch(
            f"/api/positions/dsek.ordf/mandates/{mandate.id}",
            {"end_date": "2026-06-30"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MANDATE_NOT_FOUND"

    def test_delete_mandate(
        self, editor, position, make_member, mandate_directory, django_capture_on_commit_callbacks
    ):
        mandate = give_mandate(position, make_member("ma5678de-s", "Måns"))
        with django_capture_on_commit_callbacks(execute=True):
            response = editor.delete(f"/api/positions/dsek.ordf/mandates/{mandate.id}")
        assert response.status_code == 200
        assert response.json()["message"] == "Måns' mandate removed"
        assert not Mandate.objects.exists()
        assert mandate_directory.calls == [("delete", "ma5678de-s", "dsek.ordf")]

    def test_update_mandate_ending_before_stored_start(self, editor, position, make_member):
        mandate = give_mandate(position, make_member("al1234bc-s", "Adam"))
        response = editor.patch(
            f"/api/positions/dsek.ordf/mandates/{mandate.id}",
            {"end_date": "2025-12-31"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json() == {"end_date": ["End date is before start date"]}
        mandate.refresh_from_db()
        assert mandate.end_date == date(2026, 12, 31)

    def test_swedish_messages(self, editor, position, make_member):
        mandate = give_mandate(position, make_member("ma5678de-s", "Max"))
        response = editor.delete(
            f"/api/positions/dsek.ordf/mandates/{mandate.id}", HTTP_ACCEPT_LANGUAGE="sv"
        )
        assert response.json()["message"] == "Max mandat borttaget"


@pytest.mark.django_db
class TestUnreachableDirectory:
    """Mandate changes succeed even when the identity provider fails."""

    def test_add_mandate_is_kept_and_failure_logged(
        self, editor, position, make_member, unreachable_directory, caplog,
        django_capture_on_commit_callbacks,
    ):
        member = make_member("al1234bc-s", "Adam")
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            response = editor.post(
                "/api/positions/dsek.ordf/mandates", {"member_id": str(member.id)}, format="json"
            )
        assert len(callbacks) == 1
        assert response.status_code == 201
        assert Mandate.objects.filter(member=member, position=position).count() == 1
        [record] = [r for r in caplog.records if r.name == "positions.signals"]
        assert record.levelname == "ERROR"
        assert "add_mandate" in record.getMessage()

    def test_delete_mandate_is_kept_and_failure_logged(
        self, editor, position, make_member, unreachable_directory, caplog,
        django_capture_on_commit_callbacks,
    ):
        mandate = give_mandate(position, make_member("ma5678de-s", "Måns"))
        with django_capture_on_commit_callbacks(execute=True):
            response = editor.delete(f"/api/positions/dsek.ordf/mandates/{mandate.id}")
        assert response.status_code == 200
        assert not Mandate.objects.exists()
        [record] = [r for r in caplog.records if r.name == "positions.signals"]
        assert record.levelname == "ERROR"
        assert "delete_mandate" in record.getMessage()
