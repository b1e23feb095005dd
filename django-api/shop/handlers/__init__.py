from shop.handlers.views import EventTicketListView, TicketDetailView, TicketListView

__all__ = ["EventTicketListView", "TicketDetailView", "TicketListView"]
