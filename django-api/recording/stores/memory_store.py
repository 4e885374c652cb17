"""In-memory implementation of the session and event stores.

Used by the ``memory`` backend and by service tests. Records live in
insertion-ordered dicts guarded by a lock, so each operation is atomic.
"""

from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime
from threading import Lock

from recording.domain import (
    ClientId,
    Duration,
    Event,
    EventCreationParams,
    EventId,
    Page,
    Session,
    SessionCreationParams,
    SessionId,
    VisitorId,
)
from recording.stores.interfaces import EventStore, SessionStore

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class MemorySessionStore(SessionStore):
    """Process-local session store."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._lock = Lock()
        self._sessions: dict[str, Session] = {}

    def find_by_id(self, session_id: SessionId) -> Session | None:
        with self._lock:
            return self._sessions.get(session_id.value)

    def find_all_by_client_id(
        self,
        client_id: ClientId,
        visitor_id: VisitorId | None = None,
        page: Page | None = None,
    ) -> list[Session]:
        with self._lock:
            matches = [
                session
                for session in self._sessions.values()
                if session.client_id == client_id
                and (visitor_id is None or session.visitor_id == visitor_id)
            ]
        matches.sort(key=lambda session: (session.created_at, session.id.value))
        if page is not None:
            matches = matches[page.offset : page.end]
        return matches

    def store(self, params: SessionCreationParams) -> Session:
        now = self._clock()
        session = Session(
            id=SessionId.generate(),
            client_id=params.client_id,
            visitor_id=params.visitor_id,
            last_event_time=now,
            duration_in_seconds=Duration(0),
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._sessions[session.id.value] = session
        return session

    def update(self, session: Session) -> Session | None:
        with self._lock:
            current = self._sessions.get(session.id.value)
            if current is None:
                return None
            updated = replace(
                current,
                last_event_time=session.last_event_time,
                duration_in_seconds=session.duration_in_seconds,
                updated_at=self._clock(),
            )
            self._sessions[session.id.value] = updated
        return updated

    def record_event(self, session_id: SessionId, event_time: datetime) -> Session | None:
        with self._lock:
            current = self._sessions.get(session_id.value)
            if current is None or event_time <= current.last_event_time:
                return current
            updated = replace(current.with_event_at(event_time), updated_at=self._clock())
            self._sessions[session_id.value] = updated
        return updated

    def delete(self, session_id: SessionId) -> bool:
        with self._lock:
            return self._sessions.pop(session_id.value, None) is not None


class MemoryEventStore(EventStore):
    """Process-local, append-only event store."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._lock = Lock()
        self._events: list[Event] = []

    def store(self, params: EventCreationParams) -> Event:
        event = Event(
            id=EventId.generate(),
            session_id=params.session_id,
            dom_event=params.dom_event,
            created_at=self._clock(),
        )
        with self._lock:
            self._events.append(event)
        return event

    def find_all_by_session_id(self, session_id: SessionId) -> list[Event]:
        with self._lock:
            events = [event for event in self._events if event.session_id == session_id]
        events.sort(key=lambda event: (event.created_at, event.id.value))
        return events
