"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Resolve who is asking
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.db.models import Q
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.errors import DomainError
from shop.domain.errors import ErrorCode
from shop.handlers.identity import shop_identification
from shop.handlers.serializers import EventWithTicketsSerializer, TicketSerializer
from shop.services import TicketService
from shop.stores.django_store import DjangoTicketStore

logger = logging.getLogger(__name__)


def get_ticket_service() -> TicketService:
    return TicketService(DjangoTicketStore())


def error_response(code: ErrorCode, message: str, http_status: int) -> Response:
    return Response(
        {"error": {"code": code.value, "message": message}},
        status=http_status,
    )


class TicketListView(APIView):
    """Handler for GET /api/shop/tickets"""

    def get(self, request: Request) -> Response:
        tickets = get_ticket_service().list_tickets(shop_identification(request))
        return Response(TicketSerializer(tickets, many=True).data)


class TicketDetailView(APIView):
    """Handler for GET /api/shop/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: str) -> Response:
        try:
            ticket = get_ticket_service().get_ticket(
                ticket_id, shop_identification(request)
            )
        except DomainError as error:
            logger.info("Rejected ticket lookup: %s", error)
            return error_response(error.code, error.message, status.HTTP_400_BAD_REQUEST)
        if ticket is None:
            return error_response(
                ErrorCode.TICKET_NOT_FOUND, "Ticket not found", status.HTTP_404_NOT_FOUND
            )
        return Response(TicketSerializer(ticket).data)


class EventTicketListView(APIView):
    """Handler for GET /api/shop/events

    Repeat ``?tag=<name>`` to only list events with any of those tags.
    """

    def get(self, request: Request) -> Response:
        filters = None
        tags = request.query_params.getlist("tag")
        if tags:
            filters = Q(tags__name__in=tags)
        events = get_ticket_service().list_events_with_tickets(
            shop_identification(request), filters
        )
        return Response(EventWithTicketsSerializer(events, many=True).data)
