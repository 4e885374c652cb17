"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import UTC, datetime, timedelta

import pytest

from recording.domain import (
    ClientId,
    Duration,
    Page,
    Session,
    SessionId,
    SessionUpdateParams,
    VisitorId,
)
from recording.domain.errors import ErrorCode, InvalidIdentifierError, SessionNotFoundError

CREATED = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def make_session(**overrides) -> Session:
    fields = {
        "id": SessionId("65a0f0c2aa11bb22cc33dd44"),
        "client_id": ClientId("507f1f77bcf86cd799439011"),
        "visitor_id": VisitorId("507f191e810c19729de860ea"),
        "last_event_time": CREATED,
        "duration_in_seconds": Duration(0),
        "created_at": CREATED,
        "updated_at": CREATED,
    }
    fields.update(overrides)
    return Session(**fields)


class TestObjectIds:
    """Tests for the hex identifier value objects."""

    def test_from_string_valid_hex(self):
        assert SessionId.from_string("507f1f77bcf86cd799439011").value == "507f1f77bcf86cd799439011"

    def test_from_string_normalises_case_and_whitespace(self):
        assert ClientId.from_string(" 507F1F77BCF86CD799439011 ").value == "507f1f77bcf86cd799439011"

    @pytest.mark.parametrize(
        "raw",
        ["", "not-an-id", "507f1f77bcf86cd79943901", "507f1f77bcf86cd7994390111", "zzzf1f77bcf86cd799439011"],
    )
    def test_from_string_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            VisitorId.from_string(raw)

    def test_from_string_rejects_non_string(self):
        with pytest.raises(ValueError):
            SessionId.from_string(12345)

    def test_generate_is_valid_and_unique(self):
        ids = {SessionId.generate() for _ in range(200)}
        assert len(ids) == 200
        for generated in ids:
            assert SessionId.from_string(generated.value) == generated

    def test_ids_of_different_kinds_are_not_equal(self):
        assert SessionId("507f1f77bcf86cd799439011") != ClientId("507f1f77bcf86cd799439011")


class TestDuration:
    """Tests for Duration value object."""

    def test_duration_accepts_zero(self):
        assert Duration(0).value == 0

    def test_duration_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Duration(-1)

    def test_duration_rejects_non_integer(self):
        with pytest.raises(ValueError):
            Duration(1.5)


class TestPage:
    """Tests for Page value object."""

    def test_page_end(self):
        assert Page(offset=10, limit=5).end == 15

    def test_page_accepts_zero_limit(self):
        assert Page(offset=0, limit=0).limit == 0

    @pytest.mark.parametrize("offset, limit", [(-1, 10), (0, -1)])
    def test_page_rejects_negative_values(self, offset, limit):
        with pytest.raises(ValueError):
            Page(offset=offset, limit=limit)


class TestSession:
    """Tests for Session update helpers."""

    def test_apply_only_changes_given_fields(self):
        session = make_session()
        later = CREATED + timedelta(minutes=5)

        updated = session.apply(SessionUpdateParams(last_event_time=later))

        assert updated.last_event_time == later
        assert updated.duration_in_seconds == Duration(0)
        assert updated.id == session.id
        assert updated.created_at == session.created_at

    def test_with_event_at_recomputes_duration(self):
        session = make_session()

        updated = session.with_event_at(CREATED + timedelta(seconds=90))

        assert updated.last_event_time == CREATED + timedelta(seconds=90)
        assert updated.duration_in_seconds == Duration(90)

    def test_with_event_at_never_moves_backwards(self):
        session = make_session(last_event_time=CREATED + timedelta(seconds=60))

        updated = session.with_event_at(CREATED + timedelta(seconds=30))

        assert updated.last_event_time == CREATED + timedelta(seconds=60)
        assert updated.duration_in_seconds == Duration(60)


class TestDomainErrors:
    """Tests for domain error codes and messages."""

    def test_invalid_identifier_names_field(self):
        error = InvalidIdentifierError("Client ID")
        assert error.code is ErrorCode.INVALID_IDENTIFIER
        assert error.field == "Client ID"
        assert str(error) == "INVALID_IDENTIFIER: Client ID is malformed, does not conform to hex format."

    def test_session_not_found_keeps_id_out_of_message(self):
        error = SessionNotFoundError("65a0f0c2aa11bb22cc33dd44")
        assert error.session_id == "65a0f0c2aa11bb22cc33dd44"
        assert "65a0f0c2aa11bb22cc33dd44" not in error.message
