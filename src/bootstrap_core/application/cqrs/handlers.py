"""Application CQRS – handler base classes wired to repositories.

:class:`RepositoryCommandHandler` gives a command handler the bus it was
registered on (to send follow-up commands or update command status) and the
repository of the aggregate it mutates. :class:`Projector` keeps a read model
up to date from domain events.
"""
from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from bootstrap_core.application.cqrs.commands import C, CommandHandler, InProcessCommandBus
from bootstrap_core.application.cqrs.events import E, EventHandler, InProcessEventBus
from bootstrap_core.kernel.ddd.aggregate import AggregateRoot
from bootstrap_core.kernel.ddd.domain_event import DomainEvent
from bootstrap_core.kernel.ddd.repository import ReadModel, ReadRepository, Repository

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)
TReadModel = TypeVar("TReadModel", bound=ReadModel)


class RepositoryCommandHandler(CommandHandler[C], Generic[C, TAggregate]):
    """Command handler holding a command bus and an aggregate repository."""

    def __init__(
        self,
        command_bus: InProcessCommandBus,
        repository: Repository[TAggregate],
    ) -> None:
        self.command_bus = command_bus
        self.repository = repository


class Projector(EventHandler[E], Generic[E, TReadModel]):
    """Event handler that maintains read models in a :class:`ReadRepository`.

    ``handles`` lists the event classes the projector listens to;
    :meth:`subscribe` registers it for all of them.
    """

    handles: ClassVar[tuple[type[DomainEvent], ...]] = ()

    def __init__(self, repository: ReadRepository[TReadModel]) -> None:
        self.repository = repository

    def subscribe(self, event_bus: InProcessEventBus) -> None:
        for event_type in self.handles:
            event_bus.register(event_type, self)

    def unsubscribe(self, event_bus: InProcessEventBus) -> None:
        for event_type in self.handles:
            event_bus.unregister(event_type, self)


__all__ = ["Projector", "RepositoryCommandHandler"]
