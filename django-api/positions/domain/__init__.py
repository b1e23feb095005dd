from positions.domain.models import MandateDetail, MemberSummary, PositionChanges, PositionDetail

__all__ = [
    "MandateDetail",
    "MemberSummary",
    "PositionChanges",
    "PositionDetail",
]
