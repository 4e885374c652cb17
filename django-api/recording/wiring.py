"""Builds stores and services from Django settings.

RECORDING_STORE_BACKEND selects the engine:
- "django": relational store via the Django ORM (default)
- "memory": process-local store, shared by every request in the process
"""

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from recording.services import EventService, SessionService
from recording.stores import EventStore, MemoryEventStore, MemorySessionStore, SessionStore


@lru_cache(maxsize=1)
def _memory_stores() -> tuple[MemorySessionStore, MemoryEventStore]:
    return MemorySessionStore(), MemoryEventStore()


def build_stores() -> tuple[SessionStore, EventStore]:
    backend = settings.RECORDING_STORE_BACKEND
    if backend == "django":
        from recording.stores.django_store import DjangoEventStore, DjangoSessionStore

        return DjangoSessionStore(), DjangoEventStore()
    if backend == "memory":
        return _memory_stores()
    raise ImproperlyConfigured(f"Unknown RECORDING_STORE_BACKEND: {backend!r}")


def session_service() -> SessionService:
    session_store, _ = build_stores()
    return SessionService(session_store)


def event_service() -> EventService:
    session_store, event_store = build_stores()
    return EventService(
        event_store,
        session_store,
        enforce_session_exists=settings.RECORDING_ENFORCE_SESSION_EXISTS,
    )
