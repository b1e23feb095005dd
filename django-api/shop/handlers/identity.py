"""Works out who is shopping from an incoming request."""

from rest_framework.request import Request

from members.models import Member
from shop.domain import MemberId, ShopIdentification


def shop_identification(request: Request) -> ShopIdentification:
    """Return the member behind the request, falling back to its session.

    Signed-in users are matched to members by student id. Anyone else is
    identified by their session key; a session is started if needed.
    """
    user = request.user
    if user.is_authenticated:
        member_id = (
            Member.objects.filter(student_id=user.get_username())
            .values_list("id", flat=True)
            .first()
        )
        if member_id is not None:
            return ShopIdentification.for_member(MemberId(value=member_id))
    session = request.session
    if session.session_key is None:
        session.create()
    return ShopIdentification.for_session(session.session_key)
