"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in recording/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime

from recording.domain.value_objects import ClientId, Duration, EventId, SessionId, VisitorId


@dataclass(frozen=True)
class SessionCreationParams:
    """The only fields a caller may choose when opening a session."""

    client_id: ClientId
    visitor_id: VisitorId


@dataclass(frozen=True)
class SessionUpdateParams:
    """Mutable session fields. ``None`` leaves the stored value untouched."""

    last_event_time: datetime | None = None
    duration_in_seconds: Duration | None = None


@dataclass(frozen=True)
class Session:
    """Domain representation of a recorded visitor Session."""

    id: SessionId
    client_id: ClientId
    visitor_id: VisitorId
    last_event_time: datetime
    duration_in_seconds: Duration
    created_at: datetime
    updated_at: datetime

    def apply(self, params: SessionUpdateParams) -> "Session":
        """Return a copy with the update params applied."""
        changes = {}
        if params.last_event_time is not None:
            changes["last_event_time"] = params.last_event_time
        if params.duration_in_seconds is not None:
            changes["duration_in_seconds"] = params.duration_in_seconds
        return replace(self, **changes)

    def with_event_at(self, event_time: datetime) -> "Session":
        """Return a copy advanced to an event recorded at ``event_time``.

        last_event_time never moves backwards, and the duration is the
        whole number of seconds between creation and the latest event.
        """
        last_event_time = max(self.last_event_time, event_time)
        elapsed = int((last_event_time - self.created_at).total_seconds())
        return replace(
            self,
            last_event_time=last_event_time,
            duration_in_seconds=Duration(max(elapsed, 0)),
        )


@dataclass(frozen=True)
class EventCreationParams:
    """Fields a caller supplies when appending an event."""

    session_id: SessionId
    dom_event: str


@dataclass(frozen=True)
class Event:
    """Domain representation of a single recorded DOM Event."""

    id: EventId
    session_id: SessionId
    dom_event: str
    created_at: datetime
