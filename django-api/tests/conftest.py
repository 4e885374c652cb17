"""Pytest configuration and shared fixtures."""

from datetime import UTC, datetime, timedelta

import pytest
from rest_framework.test import APIClient

from recording.services import EventService, SessionService
from recording.stores import MemoryEventStore, MemorySessionStore


class TickingClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def session_store(clock: TickingClock) -> MemorySessionStore:
    return MemorySessionStore(clock=clock)


@pytest.fixture
def event_store(clock: TickingClock) -> MemoryEventStore:
    return MemoryEventStore(clock=clock)


@pytest.fixture
def session_service(session_store: MemorySessionStore) -> SessionService:
    return SessionService(session_store)


@pytest.fixture
def event_service(event_store: MemoryEventStore, session_store: MemorySessionStore) -> EventService:
    return EventService(event_store, session_store)
