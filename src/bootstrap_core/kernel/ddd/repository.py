"""Repository ports – write side for aggregates, read side for projections."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from bootstrap_core.kernel.ddd.aggregate import AggregateRoot
from bootstrap_core.kernel.errors.domain import NotFoundError
from bootstrap_core.kernel.types.ids import Id

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)
TReadModel = TypeVar("TReadModel", bound="ReadModel")


class ReadModel:
    """Denormalised view keyed by the id of the aggregate it mirrors."""

    def __init__(self, id: Id) -> None:  # noqa: A002
        self.id = id


class Repository(abc.ABC, Generic[TAggregate]):
    """Port: load and store aggregate roots.

    Handlers receive a repository through their constructor; concrete
    implementations live outside this package (see
    :mod:`bootstrap_core.testing.fakes` for the in-memory one).
    """

    @abc.abstractmethod
    def get(self, id: Id) -> TAggregate | None: ...  # noqa: A002

    @abc.abstractmethod
    def save(self, aggregate: TAggregate) -> None: ...

    @abc.abstractmethod
    def delete(self, id: Id) -> None: ...  # noqa: A002

    def get_or_raise(self, id: Id) -> TAggregate:  # noqa: A002
        aggregate = self.get(id)
        if aggregate is None:
            raise NotFoundError("Aggregate", id)
        return aggregate


class ReadRepository(abc.ABC, Generic[TReadModel]):
    """Port: store read models maintained by projectors."""

    @abc.abstractmethod
    def get(self, id: Id) -> TReadModel | None: ...  # noqa: A002

    @abc.abstractmethod
    def save(self, model: TReadModel) -> None: ...

    @abc.abstractmethod
    def delete(self, id: Id) -> None: ...  # noqa: A002


__all__ = ["ReadModel", "ReadRepository", "Repository"]
