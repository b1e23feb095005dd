"""Resolves a shop identification to the rows it owns."""

from django.db.models import Q

from shop.domain.value_objects import ShopIdentification


def db_identification(identification: ShopIdentification) -> Q:
    """Return the predicate matching consumables/reservations owned by ``identification``.

    Members own rows through ``member``; anonymous sessions through
    ``external_customer_code``.
    """
    if identification.member_id is not None:
        return Q(member_id=identification.member_id.value)
    return Q(external_customer_code=identification.session_id)
