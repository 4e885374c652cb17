"""Event service - appends DOM events and keeps their session current."""

import logging

from recording.domain import Event, EventCreationParams, SessionId
from recording.domain.errors import MissingFieldError, SessionNotFoundError
from recording.services.identifiers import parse_identifier
from recording.stores.interfaces import EventStore, SessionStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for recording events against sessions.

    With enforce_session_exists off, events for unknown sessions are still
    stored, and no session is touched.
    """

    def __init__(
        self,
        event_store: EventStore,
        session_store: SessionStore,
        enforce_session_exists: bool = True,
    ) -> None:
        self._events = event_store
        self._sessions = session_store
        self._enforce_session_exists = enforce_session_exists

    def append(self, session_id: str, dom_event: str) -> Event:
        """Record a DOM event for a session.

        Raises:
            InvalidIdentifierError: If the session_id is malformed.
            MissingFieldError: If dom_event is empty.
            SessionNotFoundError: If the session does not exist and the
                referential integrity policy is on.
        """
        parsed = parse_identifier(SessionId, session_id, "Session ID")
        if not dom_event:
            raise MissingFieldError("Dom event")

        session = self._sessions.find_by_id(parsed)
        if session is None and self._enforce_session_exists:
            logger.warning("Rejected event for unknown session %s", parsed)
            raise SessionNotFoundError(session_id)

        event = self._events.store(EventCreationParams(session_id=parsed, dom_event=dom_event))

        if session is not None:
            # A concurrent delete makes this a no-op; the event is already stored.
            if self._sessions.record_event(parsed, event.created_at) is None:
                logger.warning("Session %s vanished while recording event %s", parsed, event.id)
        return event

    def list_for_session(self, session_id: str) -> list[Event]:
        """Return a session's events in recording order.

        Raises:
            InvalidIdentifierError: If the session_id is malformed.
            SessionNotFoundError: If the session does not exist and the
                referential integrity policy is on.
        """
        parsed = parse_identifier(SessionId, session_id, "Session ID")
        if self._enforce_session_exists and self._sessions.find_by_id(parsed) is None:
            raise SessionNotFoundError(session_id)
        return self._events.find_all_by_session_id(parsed)
