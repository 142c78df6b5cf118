"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They persist what they are
given: normalization and validation happen in the services beforehand.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from events.domain import Booking, EmailAddress, Event, EventId


class EventStore(ABC):
    """Interface for event and booking persistence operations."""

    @abstractmethod
    async def insert_event(self, fields: Mapping[str, Any]) -> Event:
        """Insert a new event and return it.

        Raises:
            DuplicateSlugError: If another event already has this slug.
        """
        ...

    @abstractmethod
    async def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    async def update_event(self, event_id: EventId, fields: Mapping[str, Any]) -> Event:
        """Overwrite the given fields of an existing event and return it.

        Raises:
            DuplicateSlugError: If the new slug collides with another event.
        """
        ...

    @abstractmethod
    async def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    async def insert_booking(self, event_id: EventId, email: EmailAddress) -> Booking:
        """Insert a new booking and return it."""
        ...
