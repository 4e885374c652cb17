"""Serializers for request bodies and for rendering domain models.

Input serializers validate format only and produce domain parameter types.
Output serializers read frozen domain dataclasses and emit camelCase JSON.
"""

from rest_framework import serializers

from recording.domain import (
    ClientId,
    Duration,
    SessionCreationParams,
    SessionUpdateParams,
    VisitorId,
)
from recording.services.identifiers import IdT

# Upper bound of the PositiveIntegerField column
MAX_DURATION_SECONDS = 2147483647


def _identifier(id_type: type[IdT], value: str, label: str) -> IdT:
    """Like parse_identifier, but raises a DRF ValidationError tied to the body field."""
    try:
        return id_type.from_string(value)
    except ValueError:
        raise serializers.ValidationError(f"Invalid {label} provided.") from None


class SessionCreateSerializer(serializers.Serializer):
    """Body of POST /sessions."""

    clientId = serializers.CharField(
        error_messages={
            "required": "Invalid Client Id provided.",
            "blank": "Invalid Client Id provided.",
            "null": "Invalid Client Id provided.",
        },
    )
    visitorId = serializers.CharField(
        error_messages={
            "required": "Invalid Visitor Id provided.",
            "blank": "Invalid Visitor Id provided.",
            "null": "Invalid Visitor Id provided.",
        },
    )

    def validate_clientId(self, value: str) -> ClientId:
        return _identifier(ClientId, value, "Client Id")

    def validate_visitorId(self, value: str) -> VisitorId:
        return _identifier(VisitorId, value, "Visitor Id")

    def to_params(self) -> SessionCreationParams:
        return SessionCreationParams(
            client_id=self.validated_data["clientId"],
            visitor_id=self.validated_data["visitorId"],
        )


class SessionUpdateSerializer(serializers.Serializer):
    """Body of PATCH /sessions/{sessionId}."""

    lastEventTime = serializers.DateTimeField(required=False)
    durationInSeconds = serializers.IntegerField(required=False, min_value=0, max_value=MAX_DURATION_SECONDS)

    def to_params(self) -> SessionUpdateParams:
        duration = self.validated_data.get("durationInSeconds")
        return SessionUpdateParams(
            last_event_time=self.validated_data.get("lastEventTime"),
            duration_in_seconds=Duration(duration) if duration is not None else None,
        )


class EventCreateSerializer(serializers.Serializer):
    """Body of POST /sessions/{sessionId}/event."""

    domEvent = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Dom event needs to be provided.",
            "blank": "Dom event needs to be provided.",
            "null": "Dom event needs to be provided.",
        },
    )


class SessionSerializer(serializers.Serializer):
    """Serializer for the Session domain model."""

    id = serializers.CharField(source="id.value")
    clientId = serializers.CharField(source="client_id.value")
    visitorId = serializers.CharField(source="visitor_id.value")
    lastEventTime = serializers.DateTimeField(source="last_event_time")
    durationInSeconds = serializers.IntegerField(source="duration_in_seconds.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class EventSerializer(serializers.Serializer):
    """Serializer for the Event domain model."""

    id = serializers.CharField(source="id.value")
    sessionId = serializers.CharField(source="session_id.value")
    domEvent = serializers.CharField(source="dom_event")
    createdAt = serializers.DateTimeField(source="created_at")
