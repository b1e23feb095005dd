"""User-facing messages for position actions, in Swedish and English.

The language follows the active Django translation; anything that is not
English is answered in Swedish.
"""

from django.utils.translation import get_language

_MESSAGES = {
    "sv": {
        "position_updated": "Posten uppdaterad",
        "new_mandate_given_to": "Nytt mandat givet till {name}",
        "mandate_updated": "{names} mandat uppdaterat",
        "mandate_removed": "{names} mandat borttaget",
        "the_member": "medlemmen",
        "position_not_found": "Posten hittades inte",
        "member_not_found": "Medlemmen hittades inte",
        "mandate_not_found": "Mandatet hittades inte",
        "mandate_period_invalid": "Slutdatum ligger före startdatum",
    },
    "en": {
        "position_updated": "Position updated",
        "new_mandate_given_to": "New mandate given to {name}",
        "mandate_updated": "{names} mandate updated",
        "mandate_removed": "{names} mandate removed",
        "the_member": "the member",
        "position_not_found": "Position not found",
        "member_not_found": "Member not found",
        "mandate_not_found": "Mandate not found",
        "mandate_period_invalid": "End date is before start date",
    },
}


def current_language() -> str:
    language = get_language() or "sv"
    return "en" if language.startswith("en") else "sv"


def genitive_case(base: str, language: str | None = None) -> str:
    """Return the possessive form of a name, e.g. "Adam" -> "Adams"/"Adam's"."""
    if (language or current_language()) == "sv":
        if base.endswith("s") or base.endswith("x"):
            return base  # Måns or Max => Måns and Max
        return base + "s"
    if base.endswith("s"):
        return base + "'"  # Måns => Måns'
    return base + "'s"


def _text(key: str) -> str:
    return _MESSAGES[current_language()][key]


def _name_or_the_member(first_name: str | None) -> str:
    return first_name or _text("the_member")


def position_updated() -> str:
    return _text("position_updated")


def new_mandate_given_to(first_name: str | None) -> str:
    return _text("new_mandate_given_to").format(name=_name_or_the_member(first_name))


def mandate_updated(first_name: str | None) -> str:
    return _text("mandate_updated").format(
        names=genitive_case(_name_or_the_member(first_name))
    )


def mandate_removed(first_name: str | None) -> str:
    return _text("mandate_removed").format(
        names=genitive_case(_name_or_the_member(first_name))
    )


def position_not_found() -> str:
    return _text("position_not_found")


def member_not_found() -> str:
    return _text("member_not_found")


def mandate_not_found() -> str:
    return _text("mandate_not_found")


def mandate_period_invalid() -> str:
    return _text("mandate_period_invalid")
