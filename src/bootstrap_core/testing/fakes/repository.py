"""Testing fakes – in-memory repositories."""
from __future__ import annotations

import threading
from typing import Generic, TypeVar

from bootstrap_core.kernel.ddd import AggregateRoot, ReadModel, ReadRepository, Repository
from bootstrap_core.kernel.types import Id

A = TypeVar("A", bound=AggregateRoot)
M = TypeVar("M", bound=ReadModel)


class InMemoryRepository(Repository[A], Generic[A]):
    """Dict-backed aggregate repository.

    ``save`` marks the aggregate's changes as committed, mimicking a store
    that persisted every buffered event.
    """

    def __init__(self) -> None:
        self._items: dict[Id, A] = {}
        self._lock = threading.Lock()
        self.saved_events: list[object] = []

    def get(self, id: Id) -> A | None:  # noqa: A002
        with self._lock:
            return self._items.get(id)

    def save(self, aggregate: A) -> None:
        with self._lock:
            self.saved_events.extend(aggregate.uncommitted_changes)
            aggregate.mark_changes_as_committed()
            self._items[aggregate.id] = aggregate

    def delete(self, id: Id) -> None:  # noqa: A002
        with self._lock:
            self._items.pop(id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class InMemoryReadRepository(ReadRepository[M], Generic[M]):
    """Dict-backed read-model repository."""

    def __init__(self) -> None:
        self._items: dict[Id, M] = {}

    def get(self, id: Id) -> M | None:  # noqa: A002
        return self._items.get(id)

    def save(self, model: M) -> None:
        self._items[model.id] = model

    def delete(self, id: Id) -> None:  # noqa: A002
        self._items.pop(id, None)

    def all(self) -> list[M]:
        return list(self._items.values())


__all__ = ["InMemoryReadRepository", "InMemoryRepository"]
