from django.urls import path

from shop.handlers import EventTicketListView, TicketDetailView, TicketListView

urlpatterns = [
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path("events", EventTicketListView.as_view(), name="event-ticket-list"),
]
