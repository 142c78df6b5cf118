from django.urls import path

from events.handlers import BookingListView, EventDetailView, EventListView, home

urlpatterns = [
    path("", home, name="home"),
    path("api/events", EventListView.as_view(), name="event-list"),
    path("api/events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "api/events/<str:event_id>/bookings",
        BookingListView.as_view(),
        name="booking-list",
    ),
]
