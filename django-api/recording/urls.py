from django.urls import path

from recording.handlers import EventCreateView, EventListView, SessionDetailView, SessionListView

urlpatterns = [
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("sessions/<str:session_id>", SessionDetailView.as_view(), name="session-detail"),
    path("sessions/<str:session_id>/event", EventCreateView.as_view(), name="event-create"),
    path("sessions/<str:session_id>/events", EventListView.as_view(), name="event-list"),
]
