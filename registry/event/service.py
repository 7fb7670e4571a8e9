"""
Registry Events - Event Service
=================================
Accepts events from the service layer and hands them to the
hook providers on a single background worker.

Rules:
- publish() validates first; an invalid event raises to the caller
  and never reaches the queue
- Events are delivered in publish order
- Provider failures are isolated by dispatch()
- After shutdown() nothing more is accepted

Lifecycle:
    1. EventService(providers)
    2. start()     -> worker running, REGISTRY_START published
    3. publish()   -> any number of times, from any thread
    4. shutdown()  -> queue drained, worker joined, providers closed
                    (closed by the worker after the last delivery)
"""

from __future__ import annotations

import logging
import queue
from threading import Lock, Thread
from typing import Iterable, Optional

from registry.event.dispatcher import dispatch
from registry.event.factory import registry_started
from registry.event.errors import EventServiceError
from registry.hook.errors import EventConstructionError
from registry.hook.event import Event
from registry.hook.provider import EventHookProvider

logger = logging.getLogger("registry.events")

DEFAULT_SHUTDOWN_TIMEOUT = 5.0

_STOP = object()


class EventService:
    """Validates, queues and dispatches registry events."""

    def __init__(
        self,
        providers: Iterable[EventHookProvider],
        shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT,
    ) -> None:
        self._providers: tuple[EventHookProvider, ...] = tuple(providers)
        self._shutdown_timeout = shutdown_timeout
        self._queue: queue.Queue = queue.Queue()
        self._lock = Lock()
        self._worker: Optional[Thread] = None
        self._stopped = False

    @property
    def providers(self) -> tuple[EventHookProvider, ...]:
        return self._providers

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._worker is not None and not self._stopped

    def start(self, announce: bool = True) -> None:
        """
        Start the worker thread. Calling start() twice is a no-op.

        Args:
            announce: publish a REGISTRY_START event once running.
        """
        with self._lock:
            if self._stopped:
                raise EventServiceError("Event service has been shut down.")
            if self._worker is not None:
                return
            self._worker = Thread(
                target=self._run,
                name="registry-event-service",
                daemon=True,
            )
            self._worker.start()

        logger.info(
            f"Event service started with {len(self._providers)} provider(s)."
        )
        if announce:
            self.publish(registry_started())

    def publish(self, event: Event) -> None:
        """
        Validate and enqueue an event.

        Raises:
            EventConstructionError: event is None.
            InvalidEventError:      event is not well-formed for its type.
            EventServiceError:      service already shut down.
        """
        if event is None:
            raise EventConstructionError("Cannot publish a None event.")

        event.validate()

        with self._lock:
            if self._stopped:
                raise EventServiceError(
                    f"Event service has been shut down; "
                    f"{event.event_type.value} event not accepted."
                )
            self._queue.put(event)

        logger.debug(f"Event queued: {event.event_type.value}")

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """
        Drain queued events, stop the worker and close every provider.

        Providers are closed by the worker once the queue is drained.
        If the worker is still delivering when the timeout expires,
        shutdown() returns and the providers are closed when it finishes.
        """
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            worker = self._worker
            self._queue.put(_STOP)

        if worker is None:
            discarded = self._queue.qsize() - 1
            if discarded:
                logger.warning(
                    f"Event service shut down before start; "
                    f"{discarded} queued event(s) discarded."
                )
            self._close_providers()
        else:
            worker.join(self._shutdown_timeout if timeout is None else timeout)
            if worker.is_alive():
                logger.warning(
                    "Event service worker did not finish draining before timeout; "
                    "providers will be closed when it finishes."
                )
                return

        logger.info("Event service shut down.")

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            try:
                dispatch(item, self._providers)
            except Exception as exc:
                logger.error(f"Event dispatch failed for {item}: {exc}", exc_info=True)
        self._close_providers()

    def _close_providers(self) -> None:
        for provider in self._providers:
            try:
                provider.close()
            except Exception as exc:
                logger.error(
                    f"Failed to close event hook provider "
                    f"{type(provider).__qualname__}: {exc}",
                    exc_info=True,
                )


# ══════════════════════════════════════════════════════════════
# PROCESS-WIDE SERVICE (wired by RegistryConfig.ready)
# ══════════════════════════════════════════════════════════════

_SERVICE_LOCK = Lock()
_SERVICE: EventService | None = None


def configure_event_service(
    providers: Iterable[EventHookProvider],
    shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT,
) -> EventService:
    """Replace the process-wide service. A previous one is shut down."""
    global _SERVICE
    service = EventService(providers, shutdown_timeout=shutdown_timeout)
    with _SERVICE_LOCK:
        previous, _SERVICE = _SERVICE, service
    if previous is not None:
        previous.shutdown()
    return service


def get_event_service() -> EventService:
    with _SERVICE_LOCK:
        if _SERVICE is None:
            raise EventServiceError("Event service has not been configured.")
        return _SERVICE
