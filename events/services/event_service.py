"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import Event, EventId
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.domain.validators import EVENT_FIELDS, prepare_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for creating, reading and updating events."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    async def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Normalize, validate and persist a new event.

        Raises:
            ValidationError: If a required field is empty or an array is invalid.
            InvalidFormatError: If the date or time cannot be normalized.
            DuplicateSlugError: If the derived slug is already taken.
        """
        prepared = prepare_event(fields)
        event = await self._store.insert_event(prepared)
        logger.info("Created event %s (%s)", event.slug, event.id)
        return event

    async def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = await self._store.get_event(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError()
        return event

    async def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Apply ``changes`` to an existing event.

        Only the fields that actually change are re-normalized: a new title
        regenerates the slug, a new date or time is canonicalized again.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            ValidationError: If a changed field is empty or invalid.
            InvalidFormatError: If a changed date or time cannot be normalized.
            DuplicateSlugError: If the regenerated slug is already taken.
        """
        current = await self.get_event(event_id)
        previous = _event_fields(current)
        prepared = prepare_event(changes, previous=previous)
        updates = {name: value for name, value in prepared.items() if previous.get(name) != value}
        if not updates:
            return current
        event = await self._store.update_event(current.id, updates)
        logger.info("Updated event %s: %s", event.id, ", ".join(sorted(updates)))
        return event


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def _event_fields(event: Event) -> dict[str, Any]:
    fields = {name: getattr(event, name) for name in EVENT_FIELDS}
    fields["agenda"] = list(event.agenda)
    fields["tags"] = list(event.tags)
    fields["slug"] = event.slug
    return fields
