from recording.handlers.views import (
    EventCreateView,
    EventListView,
    SessionDetailView,
    SessionListView,
)

__all__ = [
    "EventCreateView",
    "EventListView",
    "SessionDetailView",
    "SessionListView",
]
