"""Wiring of stores and services for the HTTP handlers."""

from django.apps import apps

from events.services import BookingService, EventService
from events.stores.connection import ConnectionManager
from events.stores.django_store import DjangoEventStore


def get_connection_manager() -> ConnectionManager:
    return apps.get_app_config("events").connections


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(get_connection_manager()))


def get_booking_service() -> BookingService:
    return BookingService(DjangoEventStore(get_connection_manager()))
