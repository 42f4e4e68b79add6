"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import DomainError, Event, EventNotFoundError
from events.handlers.serializers import (
    DateRangeQuerySerializer,
    EventSerializer,
    PriceRangeQuerySerializer,
    PriceUpdateSerializer,
    TagQuerySerializer,
)
from events.services import EventService, get_event_service

logger = logging.getLogger(__name__)


def error_response(error: DomainError) -> Response:
    """Map a domain error to a user-safe HTTP response."""
    if isinstance(error, EventNotFoundError):
        http_status = status.HTTP_404_NOT_FOUND
    else:
        http_status = status.HTTP_400_BAD_REQUEST
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=http_status,
    )


def events_response(events: list[Event]) -> Response:
    return Response(EventSerializer(events, many=True).data)


class EventServiceView(APIView):
    """Base view that resolves the configured EventService per request."""

    def get_service(self) -> EventService:
        return get_event_service()

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            logger.info("Request failed: %s", exc)
            return error_response(exc)
        return super().handle_exception(exc)


class EventListView(EventServiceView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        return events_response(self.get_service().list_events())

    def post(self, request: Request) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().create_event(serializer.to_event())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventServiceView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.get_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().update_event(event_id, serializer.to_event())
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().partial_update_event(event_id, serializer.to_event())
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        self.get_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventPriceView(EventServiceView):
    """Handler for PATCH /api/events/{event_id}/price"""

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = PriceUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().update_event_price(
            event_id, serializer.validated_data.get("ticket_price")
        )
        return Response(EventSerializer(event).data)


class UpcomingEventsView(EventServiceView):
    """Handler for GET /api/events/upcoming"""

    def get(self, request: Request) -> Response:
        return events_response(self.get_service().get_upcoming_events())


class EventsByTagView(EventServiceView):
    """Handler for GET /api/events/filter/tag?tag="""

    def get(self, request: Request) -> Response:
        query = TagQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return events_response(self.get_service().get_events_by_tag(query.validated_data.get("tag")))


class EventsByPriceView(EventServiceView):
    """Handler for GET /api/events/filter/price?min_price=&max_price="""

    def get(self, request: Request) -> Response:
        query = PriceRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        events = self.get_service().get_events_by_price_range(
            query.validated_data.get("min_price"), query.validated_data.get("max_price")
        )
        return events_response(events)


class EventsByDateView(EventServiceView):
    """Handler for GET /api/events/filter/date?start=&end="""

    def get(self, request: Request) -> Response:
        query = DateRangeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        events = self.get_service().get_events_by_date_range(
            query.validated_data.get("start"), query.validated_data.get("end")
        )
        return events_response(events)
