"""Django ORM implementation of the EventStore."""

from collections.abc import Mapping
from typing import Any

from asgiref.sync import sync_to_async
from django.db import IntegrityError

from events import models
from events.domain import Booking, BookingId, EmailAddress, Event, EventId
from events.domain.errors import DuplicateSlugError, StoreConnectionError
from events.stores.connection import ConnectionManager, ensure_connection
from events.stores.interfaces import EventStore


class DjangoEventStore(EventStore):
    """Event store backed by the Django ORM.

    Every operation first asks the connection manager for the database alias,
    then opens the calling thread's own connection to it, so an unreachable
    database surfaces as ``StoreConnectionError`` before any query.
    """

    def __init__(self, connections: ConnectionManager[str]) -> None:
        self._connections = connections

    async def _connect(self) -> None:
        alias = await self._connections.get_connection()
        try:
            # thread_sensitive: runs on the same thread as the ORM calls below.
            await sync_to_async(ensure_connection)(alias)
        except StoreConnectionError:
            self._connections.invalidate(alias)
            raise

    async def insert_event(self, fields: Mapping[str, Any]) -> Event:
        await self._connect()
        try:
            record = await models.Event.objects.acreate(**fields)
        except IntegrityError as exc:
            raise DuplicateSlugError(fields["slug"]) from exc
        return _to_event(record)

    async def get_event(self, event_id: EventId) -> Event | None:
        await self._connect()
        record = await models.Event.objects.filter(pk=event_id.value).afirst()
        return _to_event(record) if record is not None else None

    async def update_event(self, event_id: EventId, fields: Mapping[str, Any]) -> Event:
        await self._connect()
        record = await models.Event.objects.aget(pk=event_id.value)
        for name, value in fields.items():
            setattr(record, name, value)
        try:
            await record.asave()
        except IntegrityError as exc:
            raise DuplicateSlugError(record.slug) from exc
        return _to_event(record)

    async def event_exists(self, event_id: EventId) -> bool:
        await self._connect()
        return await models.Event.objects.filter(pk=event_id.value).aexists()

    async def insert_booking(self, event_id: EventId, email: EmailAddress) -> Booking:
        await self._connect()
        record = await models.Booking.objects.acreate(event_id=event_id.value, email=email.value)
        return _to_booking(record)


def _to_event(record: models.Event) -> Event:
    return Event(
        id=EventId(record.id),
        title=record.title,
        slug=record.slug,
        description=record.description,
        overview=record.overview,
        image=record.image,
        venue=record.venue,
        location=record.location,
        date=record.date,
        time=record.time,
        mode=record.mode,
        audience=record.audience,
        agenda=tuple(record.agenda),
        organizer=record.organizer,
        tags=tuple(record.tags),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _to_booking(record: models.Booking) -> Booking:
    return Booking(
        id=BookingId(record.id),
        event_id=EventId(record.event_id),
        email=EmailAddress(record.email),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
