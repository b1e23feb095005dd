from django.urls import path

from positions.handlers import MandateDetailView, MandateListView, PositionDetailView

urlpatterns = [
    path("<str:position_id>", PositionDetailView.as_view(), name="position-detail"),
    path("<str:position_id>/mandates", MandateListView.as_view(), name="mandate-list"),
    path(
        "<str:position_id>/mandates/<uuid:mandate_id>",
        MandateDetailView.as_view(),
        name="mandate-detail",
    ),
]
