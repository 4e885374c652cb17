"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
Identifiers are ObjectId-style hex strings assigned by the stores.
"""

from django.db import models


class Session(models.Model):
    """Persistence model for recorded sessions."""

    id = models.CharField(primary_key=True, max_length=24, editable=False)
    client_id = models.CharField(max_length=24)
    visitor_id = models.CharField(max_length=24)
    last_event_time = models.DateTimeField()
    duration_in_seconds = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["client_id", "visitor_id"], name="rec_session_client_visitor"),
        ]

    def __str__(self) -> str:
        return f"{self.id} ({self.client_id}/{self.visitor_id})"


class Event(models.Model):
    """Persistence model for DOM events.

    session_id is a plain column so the referential integrity policy stays
    in the service layer, and events outlive deleted sessions.
    """

    id = models.CharField(primary_key=True, max_length=24, editable=False)
    session_id = models.CharField(max_length=24)
    dom_event = models.TextField()
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["session_id", "created_at"], name="rec_event_session_created"),
        ]

    def __str__(self) -> str:
        return f"{self.id} @ {self.created_at}"
