"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to recording_exception_handler
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from recording import wiring
from recording.domain.errors import MissingFieldError
from recording.handlers.params import optional_param, parse_page
from recording.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    SessionCreateSerializer,
    SessionSerializer,
    SessionUpdateSerializer,
)
from recording.services import EventService, SessionService


class SessionHandlerMixin:
    """Resolves the session service, unless one was passed to as_view()."""

    session_service: SessionService | None = None

    def get_session_service(self) -> SessionService:
        return self.session_service or wiring.session_service()


class EventHandlerMixin:
    """Resolves the event service, unless one was passed to as_view()."""

    event_service: EventService | None = None

    def get_event_service(self) -> EventService:
        return self.event_service or wiring.event_service()


class SessionListView(SessionHandlerMixin, APIView):
    """Handler for GET and POST /sessions"""

    def get(self, request: Request) -> Response:
        client_id = optional_param(request.query_params, "clientId")
        if client_id is None:
            raise MissingFieldError("Client ID")
        page = parse_page(request.query_params)
        visitor_id = optional_param(request.query_params, "visitorId")

        sessions = self.get_session_service().find_all_by_client_id(client_id, visitor_id, page)
        return Response(SessionSerializer(sessions, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = SessionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = self.get_session_service().store(serializer.to_params())
        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)


class SessionDetailView(SessionHandlerMixin, APIView):
    """Handler for GET, PATCH and DELETE /sessions/{session_id}"""

    def get(self, request: Request, session_id: str) -> Response:
        session = self.get_session_service().find_by_id(session_id)
        return Response(SessionSerializer(session).data)

    def patch(self, request: Request, session_id: str) -> Response:
        serializer = SessionUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = self.get_session_service().apply_update(session_id, serializer.to_params())
        return Response(SessionSerializer(session).data)

    def delete(self, request: Request, session_id: str) -> Response:
        self.get_session_service().delete(session_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventCreateView(EventHandlerMixin, APIView):
    """Handler for POST /sessions/{session_id}/event"""

    def post(self, request: Request, session_id: str) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = self.get_event_service().append(session_id, serializer.validated_data["domEvent"])
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventListView(EventHandlerMixin, APIView):
    """Handler for GET /sessions/{session_id}/events"""

    def get(self, request: Request, session_id: str) -> Response:
        events = self.get_event_service().list_for_session(session_id)
        return Response(EventSerializer(events, many=True).data)
