"""AggregateRoot – buffers domain events until they are committed."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable

from bootstrap_core.kernel.ddd.domain_event import DomainEvent
from bootstrap_core.kernel.ddd.entity import Entity
from bootstrap_core.kernel.errors.domain import InvariantViolationError
from bootstrap_core.kernel.types.ids import Id

Publisher = Callable[[tuple[DomainEvent, ...]], object]


class AggregateRoot(Entity):
    """Aggregate root – owns an ordered buffer of uncommitted domain events.

    ``next_version`` is always ``version + len(uncommitted_changes)``.
    There are two ways to flush the buffer, and they advance the version
    differently:

    * :meth:`mark_changes_as_committed` – the caller has already persisted
      the events; version jumps to ``next_version``.
    * :meth:`commit` – the events are handed to a publish callback as one
      transaction; version advances by exactly one.

    Example::

        class Order(AggregateRoot):
            def rename(self, name: str) -> None:
                self.name = name
                self.apply(OrderRenamed(aggregate_id=self.id, aggregate_type=Order, name=name))

        order.commit(event_bus.publish_all)
    """

    def __init__(
        self,
        id: Id,  # noqa: A002
        version: int = 0,
        events: Iterable[DomainEvent] = (),
    ) -> None:
        super().__init__(id)
        if version < 0:
            raise InvariantViolationError(f"Aggregate version must be >= 0, got {version}")
        self._version = version
        self._events: list[DomainEvent] = list(events)
        self._lock = threading.RLock()
        self._commit_lock = threading.Lock()

    @property
    def version(self) -> int:
        return self._version

    @property
    def next_version(self) -> int:
        with self._lock:
            return self._version + len(self._events)

    @property
    def has_uncommitted_changes(self) -> bool:
        with self._lock:
            return bool(self._events)

    @property
    def uncommitted_changes(self) -> tuple[DomainEvent, ...]:
        """Snapshot of the buffered events in the order they were applied."""
        with self._lock:
            return tuple(self._events)

    def apply(self, event: DomainEvent) -> None:
        """Append *event* to the uncommitted buffer."""
        with self._lock:
            self._events.append(event)

    def mark_changes_as_committed(self) -> None:
        with self._lock:
            self._version += len(self._events)
            self._events.clear()

    def commit(self, publish: Publisher) -> None:
        """Hand a snapshot of the buffer to *publish*, then bump version by one.

        *publish* runs without the aggregate lock held, so it may wait on
        threads that read or apply to this aggregate. Events applied while it
        runs stay buffered for the next commit. Commits of one aggregate are
        serialised. If *publish* raises, the buffer and version are left
        untouched.
        """
        with self._commit_lock:
            with self._lock:
                snapshot = tuple(self._events)
            publish(snapshot)
            with self._lock:
                self._version += 1
                del self._events[: len(snapshot)]


__all__ = ["AggregateRoot", "Publisher"]
