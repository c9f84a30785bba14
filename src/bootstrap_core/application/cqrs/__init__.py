"""Application CQRS – Commands, Queries, Events, Buses."""
from bootstrap_core.application.cqrs.commands import (
    Command,
    CommandBus,
    CommandHandler,
    InProcessCommandBus,
    ResultCommand,
    ResultCommandHandler,
    TrackableCommand,
)
from bootstrap_core.application.cqrs.events import EventHandler, InProcessEventBus
from bootstrap_core.application.cqrs.handlers import Projector, RepositoryCommandHandler
from bootstrap_core.application.cqrs.queries import InProcessQueryBus, Query, QueryBus, QueryHandler
from bootstrap_core.application.cqrs.status import (
    CommandStatus,
    CommandStatusRepository,
    InMemoryCommandStatusStore,
)
from bootstrap_core.application.cqrs.workers import WorkerPool

__all__ = [
    "Command", "CommandBus", "CommandHandler", "InProcessCommandBus",
    "ResultCommand", "ResultCommandHandler", "TrackableCommand",
    "CommandStatus", "CommandStatusRepository", "InMemoryCommandStatusStore",
    "InProcessQueryBus", "Query", "QueryBus", "QueryHandler",
    "EventHandler", "InProcessEventBus",
    "Projector", "RepositoryCommandHandler",
    "WorkerPool",
]
