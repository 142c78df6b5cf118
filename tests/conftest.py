"""Pytest configuration and shared fixtures."""

import dataclasses
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from events.domain import Booking, BookingId, EmailAddress, Event, EventId
from events.domain.errors import DuplicateSlugError
from events.stores.interfaces import EventStore

ARRAY_FIELDS = ("agenda", "tags")


class InMemoryEventStore(EventStore):
    """EventStore keeping everything in dicts, for service tests."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.bookings: list[Booking] = []
        self.exists_checks: list[EventId] = []

    async def insert_event(self, fields: Mapping[str, Any]) -> Event:
        self._check_slug(fields["slug"])
        now = datetime.now(timezone.utc)
        event = Event(
            id=EventId(uuid4()),
            created_at=now,
            updated_at=now,
            **_as_stored(fields),
        )
        self.events[event.id] = event
        return event

    async def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    async def update_event(self, event_id: EventId, fields: Mapping[str, Any]) -> Event:
        if "slug" in fields:
            self._check_slug(fields["slug"], exclude=event_id)
        event = dataclasses.replace(
            self.events[event_id],
            updated_at=datetime.now(timezone.utc),
            **_as_stored(fields),
        )
        self.events[event_id] = event
        return event

    async def event_exists(self, event_id: EventId) -> bool:
        self.exists_checks.append(event_id)
        return event_id in self.events

    async def insert_booking(self, event_id: EventId, email: EmailAddress) -> Booking:
        now = datetime.now(timezone.utc)
        booking = Booking(
            id=BookingId(uuid4()),
            event_id=event_id,
            email=email,
            created_at=now,
            updated_at=now,
        )
        self.bookings.append(booking)
        return booking

    def _check_slug(self, slug: str, exclude: EventId | None = None) -> None:
        for event in self.events.values():
            if event.slug == slug and event.id != exclude:
                raise DuplicateSlugError(slug)


def _as_stored(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        name: tuple(value) if name in ARRAY_FIELDS else value
        for name, value in fields.items()
    }


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def event_fields() -> dict[str, Any]:
    return {
        "title": "React Conf 2024!",
        "description": "The official React conference.",
        "overview": "Two days of talks on React and its ecosystem.",
        "image": "/images/event1.png",
        "venue": "Moscone Center",
        "location": "San Francisco, CA",
        "date": "March 15, 2024",
        "time": "9:30 AM",
        "mode": "offline",
        "audience": "Frontend developers",
        "agenda": ["Keynote", "Server Components deep dive"],
        "organizer": "Meta Open Source",
        "tags": ["react", "frontend"],
    }
