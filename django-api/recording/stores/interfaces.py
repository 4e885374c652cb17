"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Every operation touches a single record; none spans a transaction.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from recording.domain import (
    ClientId,
    Event,
    EventCreationParams,
    Page,
    Session,
    SessionCreationParams,
    SessionId,
    VisitorId,
)


class SessionStore(ABC):
    """Interface for session persistence operations."""

    @abstractmethod
    def find_by_id(self, session_id: SessionId) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def find_all_by_client_id(
        self,
        client_id: ClientId,
        visitor_id: VisitorId | None = None,
        page: Page | None = None,
    ) -> list[Session]:
        """Return sessions for a client ordered by created_at then id.

        When visitor_id is given only that visitor's sessions are returned.
        The page window is applied after filtering and ordering.
        """
        ...

    @abstractmethod
    def store(self, params: SessionCreationParams) -> Session:
        """Assign an id and timestamps, persist, and return the new session."""
        ...

    @abstractmethod
    def update(self, session: Session) -> Session | None:
        """Replace the mutable fields of a session and refresh updated_at.

        Returns the stored session, or None if no session has that id.
        """
        ...

    @abstractmethod
    def record_event(self, session_id: SessionId, event_time: datetime) -> Session | None:
        """Advance a session to an event recorded at event_time, atomically.

        last_event_time only moves forward; duration_in_seconds is recomputed
        from created_at whenever it does. Returns the stored session, or None
        if no session has that id.
        """
        ...

    @abstractmethod
    def delete(self, session_id: SessionId) -> bool:
        """Delete a session. Returns False if nothing was deleted."""
        ...


class EventStore(ABC):
    """Interface for event persistence operations. Events are append-only."""

    @abstractmethod
    def store(self, params: EventCreationParams) -> Event:
        """Assign an id and timestamp, persist, and return the new event."""
        ...

    @abstractmethod
    def find_all_by_session_id(self, session_id: SessionId) -> list[Event]:
        """Return a session's events ordered by created_at then id."""
        ...
