"""Booking service: validates and persists event bookings."""

import logging

from events.domain import Booking, EmailAddress, EventId
from events.domain.errors import ReferentialIntegrityError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking attendance to events."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    async def create_booking(self, event_id: str, email: str) -> Booking:
        """Book ``email`` onto the event identified by ``event_id``.

        The email is trimmed and lowercased before it is checked. The event is
        looked up before the write; nothing is written if it does not exist.

        Raises:
            ValidationError: If the email does not look like local@domain.tld.
            ReferentialIntegrityError: If no event has this ID.
        """
        address = EmailAddress.from_raw(email)
        target = await self._resolve_event(event_id)
        booking = await self._store.insert_booking(target, address)
        logger.info("Created booking %s for event %s", booking.id, target)
        return booking

    async def _resolve_event(self, event_id: str) -> EventId:
        try:
            target = EventId.from_string(event_id)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning("Rejected booking for malformed event id %r", event_id)
            raise ReferentialIntegrityError() from exc
        if not await self._store.event_exists(target):
            logger.warning("Rejected booking for missing event %s", target)
            raise ReferentialIntegrityError()
        return target
