from recording.services.event_service import EventService
from recording.services.session_service import SessionService

__all__ = ["EventService", "SessionService"]
