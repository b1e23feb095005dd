"""Django ORM implementation of the PositionStore."""

from datetime import date
from uuid import UUID

from django.db.models import Prefetch

from members.models import Member
from positions.domain import MandateDetail, MemberSummary, PositionChanges, PositionDetail
from positions.models import Mandate, Position
from positions.stores.interfaces import PositionStore


class DjangoPositionStore(PositionStore):
    """Relational position store using Django ORM."""

    def get_position(self, position_id: str) -> PositionDetail | None:
        position = (
            Position.objects.filter(pk=position_id)
            .prefetch_related(
                Prefetch(
                    "mandates",
                    queryset=Mandate.objects.select_related("member").order_by(
                        "member__first_name", "member__last_name"
                    ),
                ),
                "email_aliases",
            )
            .first()
        )
        if position is None:
            return None
        return PositionDetail(
            id=position.id,
            name=position.name,
            description=position.description,
            email=position.email,
            mandates=tuple(_to_mandate_detail(m) for m in position.mandates.all()),
            email_aliases=tuple(alias.email for alias in position.email_aliases.all()),
        )

    def position_exists(self, position_id: str) -> bool:
        return Position.objects.filter(pk=position_id).exists()

    def update_position(self, position_id: str, changes: PositionChanges) -> bool:
        if not changes.fields:
            return self.position_exists(position_id)
        return Position.objects.filter(pk=position_id).update(**changes.fields) > 0

    def get_member(self, member_id: UUID) -> MemberSummary | None:
        member = Member.objects.filter(pk=member_id).first()
        return _to_member_summary(member) if member else None

    def get_mandate(self, mandate_id: UUID, position_id: str) -> MandateDetail | None:
        mandate = (
            Mandate.objects.select_related("member")
            .filter(pk=mandate_id, position_id=position_id)
            .first()
        )
        return _to_mandate_detail(mandate) if mandate else None

    def create_mandate(
        self, position_id: str, member_id: UUID, start_date: date, end_date: date
    ) -> MandateDetail:
        mandate = Mandate.objects.create(
            position_id=position_id,
            member_id=member_id,
            start_date=start_date,
            end_date=end_date,
        )
        return _to_mandate_detail(Mandate.objects.select_related("member").get(pk=mandate.pk))

    def update_mandate(
        self,
        mandate_id: UUID,
        position_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> None:
        changes = {}
        if start_date is not None:
            changes["start_date"] = start_date
        if end_date is not None:
            changes["end_date"] = end_date
        if changes:
            Mandate.objects.filter(pk=mandate_id, position_id=position_id).update(**changes)

    def delete_mandate(self, mandate_id: UUID, position_id: str) -> None:
        # post_delete must fire for every mandate removed
        for mandate in Mandate.objects.select_related("member").filter(
            pk=mandate_id, position_id=position_id
        ):
            mandate.delete()


def _to_member_summary(member: Member) -> MemberSummary:
    return MemberSummary(
        id=member.id,
        student_id=member.student_id,
        first_name=member.first_name,
        last_name=member.last_name,
    )


def _to_mandate_detail(mandate: Mandate) -> MandateDetail:
    return MandateDetail(
        id=mandate.id,
        position_id=mandate.position_id,
        member=_to_member_summary(mandate.member),
        start_date=mandate.start_date,
        end_date=mandate.end_date,
    )
