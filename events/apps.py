from django.apps import AppConfig
from django.conf import settings

from events.stores.connection import ConnectionManager, django_connector


class EventsConfig(AppConfig):
    name = "events"

    connections: ConnectionManager

    def ready(self) -> None:
        # One manager per process, injected into stores by events.deps.
        connect, disconnect = django_connector(settings.EVENTS_DATABASE_ALIAS)
        self.connections = ConnectionManager(connect, disconnect)
