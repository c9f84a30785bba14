"""CQRS – lifecycle status of trackable commands."""
from __future__ import annotations

import abc
import enum
import threading
import uuid

from bootstrap_core.observability.logging import get_logger

_log = get_logger(__name__)


class CommandStatus(enum.Enum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class CommandStatusRepository(abc.ABC):
    """Port: read and write the status of a trackable command by its id.

    The bus records ``PENDING`` when a trackable command is submitted; every
    later transition is written by handlers, since one command may have
    several handlers finishing independently.
    """

    @abc.abstractmethod
    def get_status(self, command_id: uuid.UUID) -> CommandStatus:
        """Return the last recorded status, or ``UNKNOWN``. Never raises."""

    @abc.abstractmethod
    def update_status(self, command_id: uuid.UUID, status: CommandStatus) -> None:
        """Overwrite the status for *command_id*; no history is kept."""


class InMemoryCommandStatusStore(CommandStatusRepository):
    """Thread-safe dict-backed status store."""

    def __init__(self) -> None:
        self._statuses: dict[uuid.UUID, CommandStatus] = {}
        self._lock = threading.Lock()

    def get_status(self, command_id: uuid.UUID) -> CommandStatus:
        with self._lock:
            return self._statuses.get(command_id, CommandStatus.UNKNOWN)

    def update_status(self, command_id: uuid.UUID, status: CommandStatus) -> None:
        with self._lock:
            self._statuses[command_id] = status
        _log.debug("command_status_updated", command_id=str(command_id), status=status.value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._statuses)


__all__ = ["CommandStatus", "CommandStatusRepository", "InMemoryCommandStatusStore"]
