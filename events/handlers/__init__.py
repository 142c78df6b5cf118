from events.handlers.views import BookingListView, EventDetailView, EventListView, home

__all__ = ["BookingListView", "EventDetailView", "EventListView", "home"]
