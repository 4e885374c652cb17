"""Django ORM implementation of the session and event stores."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime

from django.db import DatabaseError, OperationalError
from django.utils import timezone

from recording import models
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
from recording.domain.errors import StorageError, StorageTimeoutError
from recording.stores.interfaces import EventStore, SessionStore

logger = logging.getLogger(__name__)

_TIMEOUT_MARKERS = ("statement timeout", "canceling statement", "database is locked", "timeout expired")


def _is_timeout(exc: OperationalError) -> bool:
    message = str(exc).lower()
    return any(marker in message for marker in _TIMEOUT_MARKERS)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Turn driver errors into domain storage errors, logging the details."""
    try:
        yield
    except OperationalError as exc:
        if _is_timeout(exc):
            logger.error("Store timed out during %s: %s", operation, exc)
            raise StorageTimeoutError(operation) from exc
        logger.exception("Store failure during %s", operation)
        raise StorageError(operation) from exc
    except DatabaseError as exc:
        logger.exception("Store failure during %s", operation)
        raise StorageError(operation) from exc


def _session_to_domain(row: models.Session) -> Session:
    return Session(
        id=SessionId(row.id),
        client_id=ClientId(row.client_id),
        visitor_id=VisitorId(row.visitor_id),
        last_event_time=row.last_event_time,
        duration_in_seconds=Duration(row.duration_in_seconds),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _event_to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        session_id=SessionId(row.session_id),
        dom_event=row.dom_event,
        created_at=row.created_at,
    )


class DjangoSessionStore(SessionStore):
    """Relational session store using the Django ORM."""

    def find_by_id(self, session_id: SessionId) -> Session | None:
        with _translate_errors("find session"):
            row = models.Session.objects.filter(pk=session_id.value).first()
        return _session_to_domain(row) if row is not None else None

    def find_all_by_client_id(
        self,
        client_id: ClientId,
        visitor_id: VisitorId | None = None,
        page: Page | None = None,
    ) -> list[Session]:
        if page is not None and page.limit == 0:
            return []
        queryset = models.Session.objects.filter(client_id=client_id.value)
        if visitor_id is not None:
            queryset = queryset.filter(visitor_id=visitor_id.value)
        queryset = queryset.order_by("created_at", "id")
        if page is not None:
            queryset = queryset[page.offset : page.end]
        with _translate_errors("list sessions"):
            return [_session_to_domain(row) for row in queryset]

    def store(self, params: SessionCreationParams) -> Session:
        now = timezone.now()
        session = Session(
            id=SessionId.generate(),
            client_id=params.client_id,
            visitor_id=params.visitor_id,
            last_event_time=now,
            duration_in_seconds=Duration(0),
            created_at=now,
            updated_at=now,
        )
        with _translate_errors("store session"):
            models.Session.objects.create(
                id=session.id.value,
                client_id=session.client_id.value,
                visitor_id=session.visitor_id.value,
                last_event_time=session.last_event_time,
                duration_in_seconds=session.duration_in_seconds.value,
                created_at=session.created_at,
                updated_at=session.updated_at,
            )
        return session

    def update(self, session: Session) -> Session | None:
        now = timezone.now()
        with _translate_errors("update session"):
            matched = models.Session.objects.filter(pk=session.id.value).update(
                last_event_time=session.last_event_time,
                duration_in_seconds=session.duration_in_seconds.value,
                updated_at=now,
            )
        if not matched:
            return None
        return replace(session, updated_at=now)

    def record_event(self, session_id: SessionId, event_time: datetime) -> Session | None:
        with _translate_errors("record event"):
            sessions = models.Session.objects.filter(pk=session_id.value)
            created_at = sessions.values_list("created_at", flat=True).first()
            if created_at is None:
                return None
            elapsed = max(int((event_time - created_at).total_seconds()), 0)
            # created_at never changes, so only the conditional write needs to be atomic
            sessions.filter(last_event_time__lt=event_time).update(
                last_event_time=event_time,
                duration_in_seconds=elapsed,
                updated_at=timezone.now(),
            )
            row = sessions.first()
        return _session_to_domain(row) if row is not None else None

    def delete(self, session_id: SessionId) -> bool:
        with _translate_errors("delete session"):
            deleted, _ = models.Session.objects.filter(pk=session_id.value).delete()
        return deleted > 0


class DjangoEventStore(EventStore):
    """Relational event store using the Django ORM."""

    def store(self, params: EventCreationParams) -> Event:
        event = Event(
            id=EventId.generate(),
            session_id=params.session_id,
            dom_event=params.dom_event,
            created_at=timezone.now(),
        )
        with _translate_errors("store event"):
            models.Event.objects.create(
                id=event.id.value,
                session_id=event.session_id.value,
                dom_event=event.dom_event,
                created_at=event.created_at,
            )
        return event

    def find_all_by_session_id(self, session_id: SessionId) -> list[Event]:
        queryset = models.Event.objects.filter(session_id=session_id.value).order_by("created_at", "id")
        with _translate_errors("list events"):
            return [_event_to_domain(row) for row in queryset]
