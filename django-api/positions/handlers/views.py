"""HTTP handlers (views) for positions and mandates.

Handlers validate input with serializers, call the service and map domain
errors to HTTP responses.
"""

import logging
from uuid import UUID

from rest_framework import status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.errors import DomainError
from positions.domain import PositionChanges, messages
from positions.domain.errors import (
    InvalidMandatePeriodError,
    MandateNotFoundError,
    MemberNotFoundError,
    PositionNotFoundError,
)
from positions.handlers.serializers import (
    AddMandateSerializer,
    MandateSerializer,
    PositionSerializer,
    UpdateMandateSerializer,
    UpdatePositionSerializer,
)
from positions.services import PositionService
from positions.stores.django_store import DjangoPositionStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    PositionNotFoundError: status.HTTP_404_NOT_FOUND,
    MandateNotFoundError: status.HTTP_400_BAD_REQUEST,
    MemberNotFoundError: status.HTTP_400_BAD_REQUEST,
}


def get_position_service() -> PositionService:
    return PositionService(DjangoPositionStore())


def error_response(error: DomainError) -> Response:
    logger.info("Position request failed: %s", error)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST),
    )


def field_error_response(field: str, error: DomainError) -> Response:
    """Report a domain error against one input field, like a validation error."""
    return Response({field: [error.message]}, status=status.HTTP_400_BAD_REQUEST)


def success_response(message: str, http_status: int = status.HTTP_200_OK, **data) -> Response:
    return Response({"message": message, "type": "success", **data}, status=http_status)


class PositionDetailView(APIView):
    """Handler for GET/PATCH /api/positions/{position_id}"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request, position_id: str) -> Response:
        try:
            position = get_position_service().get_position(position_id)
        except DomainError as error:
            return error_response(error)
        return Response(PositionSerializer(position).data)

    def patch(self, request: Request, position_id: str) -> Response:
        serializer = UpdatePositionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            get_position_service().update_position(
                position_id, PositionChanges(fields=dict(serializer.validated_data))
            )
        except DomainError as error:
            return error_response(error)
        return success_response(messages.position_updated())


class MandateListView(APIView):
    """Handler for POST /api/positions/{position_id}/mandates"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def post(self, request: Request, position_id: str) -> Response:
        serializer = AddMandateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            mandate = get_position_service().add_mandate(
                position_id, data["member_id"], data["start_date"], data["end_date"]
            )
        except MemberNotFoundError as error:
            return field_error_response("member_id", error)
        except InvalidMandatePeriodError as error:
            return field_error_response("end_date", error)
        except DomainError as error:
            return error_response(error)
        return success_response(
            messages.new_mandate_given_to(mandate.member.first_name),
            status.HTTP_201_CREATED,
            mandate=MandateSerializer(mandate).data,
        )


class MandateDetailView(APIView):
    """Handler for PATCH/DELETE /api/positions/{position_id}/mandates/{mandate_id}"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def patch(self, request: Request, position_id: str, mandate_id: UUID) -> Response:
        serializer = UpdateMandateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            holder = get_position_service().update_mandate(
                position_id, mandate_id, **serializer.validated_data
            )
        except InvalidMandatePeriodError as error:
            return field_error_response("end_date", error)
        except DomainError as error:
            return error_response(error)
        return success_response(messages.mandate_updated(holder.first_name))

    def delete(self, request: Request, position_id: str, mandate_id: UUID) -> Response:
        try:
            holder = get_position_service().delete_mandate(position_id, mandate_id)
        except DomainError as error:
            return error_response(error)
        return success_response(messages.mandate_removed(holder.first_name))
