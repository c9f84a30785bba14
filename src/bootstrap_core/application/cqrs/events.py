"""Application CQRS – EventHandler, InProcessEventBus.

The event bus is the usual publish callback for
:meth:`AggregateRoot.commit <bootstrap_core.kernel.ddd.AggregateRoot.commit>`::

    order.commit(event_bus.publish_all)
"""

from __future__ import annotations

import abc
import threading
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from bootstrap_core.kernel.ddd.domain_event import DomainEvent
from bootstrap_core.observability.logging import get_logger

E = TypeVar("E", bound=DomainEvent)

_log = get_logger(__name__)


class EventHandler(abc.ABC, Generic[E]):
    """Handle a single domain event type."""

    @abc.abstractmethod
    def handle(self, event: E) -> None: ...


class InProcessEventBus:
    """Synchronous fan-out of domain events to handlers keyed by event class.

    Handlers run in registration order on the publishing thread. The first
    handler exception propagates, so a failed publish also aborts the
    aggregate commit that triggered it.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler[Any]]] = {}
        self._lock = threading.Lock()

    def register(self, event_type: type[DomainEvent], handler: EventHandler[Any]) -> None:
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)

    def unregister(self, event_type: type[DomainEvent], handler: EventHandler[Any]) -> None:
        with self._lock:
            handlers = self._handlers.get(event_type)
            if handlers and handler in handlers:
                handlers.remove(handler)
                if not handlers:
                    del self._handlers[event_type]

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            handlers = tuple(self._handlers.get(type(event), ()))
        for handler in handlers:
            handler.handle(event)

    def publish_all(self, events: Iterable[DomainEvent]) -> None:
        count = 0
        for event in events:
            self.publish(event)
            count += 1
        _log.debug("domain_events_published", count=count)


__all__ = ["EventHandler", "InProcessEventBus"]
