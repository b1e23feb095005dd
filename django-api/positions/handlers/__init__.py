from positions.handlers.views import MandateDetailView, MandateListView, PositionDetailView

__all__ = ["MandateDetailView", "MandateListView", "PositionDetailView"]
