"""Store connection management.

A ``ConnectionManager`` owns at most one established connection, or one
in-flight attempt to establish it. Callers that arrive while an attempt is
running wait on that same attempt instead of opening their own, including
callers running on other threads and other event loops.

    UNCONNECTED --get_connection()--> CONNECTING --ok--> CONNECTED
         ^                                |                  |
         +------------- failure ----------+                  |
         +------------------- close() / invalidate() --------+
"""

import asyncio
import concurrent.futures
import logging
import threading
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Generic, TypeVar

from asgiref.sync import sync_to_async
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

from events.domain.errors import StoreConnectionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectionState(Enum):
    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class ConnectionManager(Generic[T]):
    """Caches one store connection and shares in-flight connection attempts.

    State is guarded by a lock and the in-flight attempt is a
    ``concurrent.futures.Future``, so callers on different threads (each with
    its own event loop under ``async_to_sync``) all wait on the same attempt.
    """

    def __init__(
        self,
        connect: Callable[[], Awaitable[T]],
        disconnect: Callable[[T], Awaitable[None]] | None = None,
    ) -> None:
        self._connect = connect
        self._disconnect = disconnect
        self._lock = threading.Lock()
        self._connection: T | None = None
        self._pending: concurrent.futures.Future[T] | None = None

    @property
    def state(self) -> ConnectionState:
        with self._lock:
            if self._connection is not None:
                return ConnectionState.CONNECTED
            if self._pending is not None:
                return ConnectionState.CONNECTING
            return ConnectionState.UNCONNECTED

    async def get_connection(self) -> T:
        """Return the cached connection, establishing it if needed.

        Raises:
            StoreConnectionError: If the connection attempt fails. Every caller
                waiting on that attempt receives the same error, and the manager
                is left UNCONNECTED so the next call tries again.
        """
        with self._lock:
            if self._connection is not None:
                return self._connection
            pending = self._pending
            if pending is None:
                pending = self._pending = concurrent.futures.Future()
                self._start(pending)
        # Shielded so one cancelled caller does not abort the shared attempt.
        return await asyncio.shield(asyncio.wrap_future(pending))

    async def close(self) -> None:
        """Discard the cached connection and return to UNCONNECTED."""
        with self._lock:
            connection, pending = self._connection, self._pending
            self._connection = None
            self._pending = None
        if pending is not None:
            pending.cancel()
        if connection is not None:
            logger.info("Closing store connection")
            if self._disconnect is not None:
                await self._disconnect(connection)

    def invalidate(self, connection: T) -> None:
        """Forget ``connection`` without disconnecting it, e.g. once it is known dead."""
        with self._lock:
            if self._connection is connection:
                self._connection = None
                logger.warning("Store connection invalidated")

    def _start(self, pending: concurrent.futures.Future) -> None:
        logger.info("Opening store connection")
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._open(pending))

        def _cancel_attempt(future: concurrent.futures.Future) -> None:
            if future.cancelled() and not task.done():
                loop.call_soon_threadsafe(task.cancel)

        pending.add_done_callback(_cancel_attempt)

    async def _open(self, pending: concurrent.futures.Future) -> None:
        try:
            connection = await self._connect()
        except asyncio.CancelledError:
            self._clear_pending(pending)
            pending.cancel()
            raise
        except Exception as exc:
            self._clear_pending(pending)
            logger.warning("Store connection attempt failed: %s", exc)
            if not pending.done():
                pending.set_exception(exc)
            return

        with self._lock:
            current = self._pending is pending
            if current:
                self._connection = connection
                self._pending = None
        if current and not pending.done():
            logger.info("Store connection established")
            pending.set_result(connection)
        elif self._disconnect is not None:
            # Closed while connecting; the new connection has no owner.
            await self._disconnect(connection)

    def _clear_pending(self, pending: concurrent.futures.Future) -> None:
        with self._lock:
            if self._pending is pending:
                self._pending = None


def ensure_connection(alias: str = DEFAULT_DB_ALIAS) -> str:
    """Open the calling thread's connection for ``alias`` if it is not open yet.

    Django keeps one connection per thread, so this must run on the thread
    that is about to query.

    Raises:
        StoreConnectionError: If the database cannot be reached.
    """
    try:
        connections[alias].ensure_connection()
    except DatabaseError as exc:
        raise StoreConnectionError() from exc
    return alias


def django_connector(
    alias: str = DEFAULT_DB_ALIAS,
) -> tuple[Callable[[], Awaitable[str]], Callable[[str], Awaitable[None]]]:
    """Build connect/disconnect callables for a Django database alias.

    The cached connection is the alias itself, checked to be reachable.
    """

    def _connect() -> str:
        return ensure_connection(alias)

    def _close(connected_alias: str) -> None:
        connections[connected_alias].close()

    return sync_to_async(_connect), sync_to_async(_close)
