"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from collections.abc import Mapping

from asgiref.sync import async_to_sync
from django.shortcuts import render
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import deps
from events.constants import FEATURED_EVENTS
from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    DomainErrorSerializer,
    EventSerializer,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REFERENCED_EVENT_MISSING: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SLUG: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def home(request):
    """Landing page listing the featured events."""
    return render(request, "events/home.html", {"events": FEATURED_EVENTS})


def error_response(error: DomainError) -> Response:
    if error.code is ErrorCode.STORE_UNAVAILABLE:
        logger.error("Event store unavailable", exc_info=error)
    return Response(DomainErrorSerializer(error).data, status=ERROR_STATUS[error.code])


def object_body(request: Request) -> Mapping:
    if not isinstance(request.data, Mapping):
        raise ParseError("Expected a JSON object")
    return request.data


class EventListView(APIView):
    """Handler for POST /api/events"""

    def post(self, request: Request) -> Response:
        service = deps.get_event_service()
        try:
            event = async_to_sync(service.create_event)(object_body(request))
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PATCH /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = deps.get_event_service()
        try:
            event = async_to_sync(service.get_event)(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        service = deps.get_event_service()
        try:
            event = async_to_sync(service.update_event)(event_id, object_body(request))
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)


class BookingListView(APIView):
    """Handler for POST /api/events/{event_id}/bookings"""

    def post(self, request: Request, event_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = deps.get_booking_service()
        try:
            booking = async_to_sync(service.create_booking)(
                event_id, serializer.validated_data["email"]
            )
        except DomainError as error:
            return error_response(error)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)
