from recording.domain.models import (
    Event,
    EventCreationParams,
    Session,
    SessionCreationParams,
    SessionUpdateParams,
)
from recording.domain.value_objects import (
    ClientId,
    Duration,
    EventId,
    Page,
    SessionId,
    VisitorId,
)

__all__ = [
    "Event",
    "EventCreationParams",
    "Session",
    "SessionCreationParams",
    "SessionUpdateParams",
    "ClientId",
    "Duration",
    "EventId",
    "Page",
    "SessionId",
    "VisitorId",
]
