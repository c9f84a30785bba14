"""Testing fakes – in-memory repositories and recording handlers."""
from bootstrap_core.testing.fakes.handlers import FailingCommandHandler, RecordingCommandHandler
from bootstrap_core.testing.fakes.repository import InMemoryReadRepository, InMemoryRepository

__all__ = [
    "FailingCommandHandler",
    "InMemoryReadRepository",
    "InMemoryRepository",
    "RecordingCommandHandler",
]
