"""Session service - orchestration between transport and the session store.

Services:
- Depend only on interfaces (stores)
- Validate identifiers before any store call
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging

from recording.domain import (
    ClientId,
    Page,
    Session,
    SessionCreationParams,
    SessionId,
    SessionUpdateParams,
    VisitorId,
)
from recording.domain.errors import SessionNotFoundError
from recording.services.identifiers import parse_identifier
from recording.stores.interfaces import SessionStore

logger = logging.getLogger(__name__)


class SessionService:
    """Service for session lifecycle operations."""

    def __init__(self, store: SessionStore) -> None:
        self._store = store

    def find_by_id(self, session_id: str) -> Session:
        """Return a session by ID.

        Raises:
            InvalidIdentifierError: If the session_id is malformed.
            SessionNotFoundError: If the session does not exist.
        """
        parsed = parse_identifier(SessionId, session_id, "Session ID")
        session = self._store.find_by_id(parsed)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def find_all_by_client_id(
        self,
        client_id: str,
        visitor_id: str | None = None,
        page: Page | None = None,
    ) -> list[Session]:
        """Return a client's sessions, optionally for one visitor and one page.

        Raises:
            InvalidIdentifierError: If client_id or a given visitor_id is malformed.
        """
        parsed_client = parse_identifier(ClientId, client_id, "Client ID")
        parsed_visitor = None
        if visitor_id is not None:
            parsed_visitor = parse_identifier(VisitorId, visitor_id, "Visitor ID")
        return self._store.find_all_by_client_id(parsed_client, parsed_visitor, page)

    def store(self, params: SessionCreationParams) -> Session:
        """Open a new session."""
        session = self._store.store(params)
        logger.info(
            "Created session %s for client %s visitor %s",
            session.id,
            session.client_id,
            session.visitor_id,
        )
        return session

    def update(self, session: Session) -> Session:
        """Persist the mutable fields of a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        updated = self._store.update(session)
        if updated is None:
            raise SessionNotFoundError(session.id.value)
        return updated

    def apply_update(self, session_id: str, params: SessionUpdateParams) -> Session:
        """Fetch a session, apply update params and persist the result."""
        session = self.find_by_id(session_id)
        return self.update(session.apply(params))

    def delete(self, session_id: str) -> None:
        """Delete a session.

        Raises:
            InvalidIdentifierError: If the session_id is malformed.
            SessionNotFoundError: If there was nothing to delete.
        """
        parsed = parse_identifier(SessionId, session_id, "Session ID")
        if not self._store.delete(parsed):
            raise SessionNotFoundError(session_id)
        logger.info("Deleted session %s", parsed)
