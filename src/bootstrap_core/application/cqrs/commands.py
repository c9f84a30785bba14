"""Application CQRS – Commands, command handlers and the in-process CommandBus.

Two kinds of command share one bus:

* plain :class:`Command` – fire-and-forget, zero or more handlers, the
  caller only learns whether *every* handler succeeded;
* :class:`ResultCommand` – exactly one handler whose return value (or
  exception) is handed back to the caller.

Handlers are looked up by the command's exact runtime class.
"""
from __future__ import annotations

import abc
import asyncio
import dataclasses
import threading
import uuid
from collections.abc import Iterable
from concurrent.futures import Future
from typing import Any, Generic, TypeVar, overload

from bootstrap_core.application.cqrs.status import (
    CommandStatus,
    CommandStatusRepository,
    InMemoryCommandStatusStore,
)
from bootstrap_core.application.cqrs.workers import WorkerPool, completed_future, failed_future
from bootstrap_core.config.settings import DispatchSettings
from bootstrap_core.kernel.errors import (
    HandlerExecutionError,
    NoHandlerRegisteredError,
)
from bootstrap_core.observability.logging import get_logger

C = TypeVar("C", bound="Command")
R = TypeVar("R")

_log = get_logger(__name__)


class Command:
    """Marker base for commands (intent to change state)."""


@dataclasses.dataclass(kw_only=True)
class TrackableCommand(Command):
    """Command whose processing status can be observed by ``id``.

    Subclasses may be plain classes calling ``super().__init__()`` or
    dataclasses; ``id`` is keyword-only and generated when omitted.
    """

    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)


class ResultCommand(Command, Generic[R]):
    """Command handled by exactly one handler that returns an ``R``."""


class CommandHandler(abc.ABC, Generic[C]):
    """Handle one or more fire-and-forget command types."""

    @abc.abstractmethod
    def handle(self, command: C) -> None: ...


class ResultCommandHandler(abc.ABC, Generic[C, R]):
    """Handle a single result command type and return its result."""

    @abc.abstractmethod
    def handle(self, command: C) -> R: ...


CommandTypes = type[Command] | Iterable[type[Command]]


def _as_types(command_types: CommandTypes) -> list[type[Command]]:
    if isinstance(command_types, type):
        return [command_types]
    return list(command_types)


class CommandBus(abc.ABC):
    """Dispatches commands to their registered handlers."""

    @abc.abstractmethod
    def register(self, handler: CommandHandler[Any], command_types: CommandTypes) -> None: ...

    @abc.abstractmethod
    def unregister(self, handler: CommandHandler[Any], command_types: CommandTypes) -> None: ...

    @abc.abstractmethod
    def register_result_handler(
        self, handler: ResultCommandHandler[Any, Any], command_type: type[ResultCommand[Any]]
    ) -> None: ...

    @abc.abstractmethod
    def unregister_result_handler(
        self, handler: ResultCommandHandler[Any, Any], command_type: type[ResultCommand[Any]]
    ) -> None: ...

    @abc.abstractmethod
    def send(self, command: Command) -> Future[Any]: ...

    @abc.abstractmethod
    def send_sync(self, command: Command) -> Any: ...


class InProcessCommandBus(CommandBus, CommandStatusRepository):
    """Thread-safe in-process command bus.

    ``send`` runs handlers on a :class:`WorkerPool` and returns a
    :class:`~concurrent.futures.Future`; ``send_sync`` runs them on the
    calling thread. Both use the same failure policy for plain commands:
    every handler runs, a raising handler is logged and makes the overall
    result ``False``, and nothing is raised to the sender.

    The bus is also the status repository for trackable commands, backed by
    *status_store*.

    Usage::

        bus = InProcessCommandBus()
        bus.register(AuditHandler(), [CreateOrder, CancelOrder])
        bus.register_result_handler(PriceQuoteHandler(), QuotePrice)

        ok = bus.send(CreateOrder(item="widget")).result()
        price = bus.send_sync(QuotePrice(item="widget"))
    """

    def __init__(
        self,
        *,
        pool: WorkerPool | None = None,
        status_store: CommandStatusRepository | None = None,
        settings: DispatchSettings | None = None,
    ) -> None:
        self._owns_pool = pool is None
        if pool is None:
            pool = WorkerPool.from_settings(settings or DispatchSettings())
        self._pool = pool
        self._status = (
            status_store if status_store is not None else InMemoryCommandStatusStore()
        )
        self._handlers: dict[type[Command], list[CommandHandler[Any]]] = {}
        self._result_handlers: dict[type[Command], ResultCommandHandler[Any, Any]] = {}
        self._lock = threading.RLock()

    @property
    def pool(self) -> WorkerPool:
        return self._pool

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, handler: CommandHandler[Any], command_types: CommandTypes) -> None:
        """Append *handler* to the handler list of each command type.

        Registering the same handler twice for a type makes it run twice.
        """
        types = _as_types(command_types)
        for command_type in types:
            if issubclass(command_type, ResultCommand):
                raise TypeError(
                    f"{command_type.__name__} is a ResultCommand; use register_result_handler()"
                )
        with self._lock:
            for command_type in types:
                self._handlers.setdefault(command_type, []).append(handler)
        for command_type in types:
            _log.debug(
                "command_handler_registered",
                handler=type(handler).__name__,
                command_type=command_type.__name__,
            )

    def unregister(self, handler: CommandHandler[Any], command_types: CommandTypes) -> None:
        """Remove one occurrence of *handler* per type; unknown pairs are ignored."""
        with self._lock:
            for command_type in _as_types(command_types):
                handlers = self._handlers.get(command_type)
                if handlers is None or handler not in handlers:
                    continue
                handlers.remove(handler)
                if not handlers:
                    del self._handlers[command_type]

    def register_result_handler(
        self, handler: ResultCommandHandler[Any, Any], command_type: type[ResultCommand[Any]]
    ) -> None:
        """Bind *handler* as the only handler for *command_type*.

        A later registration for the same type replaces the earlier one.
        """
        with self._lock:
            previous = self._result_handlers.get(command_type)
            self._result_handlers[command_type] = handler
        if previous is not None and previous is not handler:
            _log.warning(
                "result_handler_replaced",
                command_type=command_type.__name__,
                previous=type(previous).__name__,
                handler=type(handler).__name__,
            )

    def unregister_result_handler(
        self, handler: ResultCommandHandler[Any, Any], command_type: type[ResultCommand[Any]]
    ) -> None:
        with self._lock:
            if self._result_handlers.get(command_type) is handler:
                del self._result_handlers[command_type]

    def handlers_for(self, command_type: type[Command]) -> tuple[CommandHandler[Any], ...]:
        """Snapshot of the handlers that would run for *command_type*."""
        with self._lock:
            return tuple(self._handlers.get(command_type, ()))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    @overload
    def send(self, command: ResultCommand[R]) -> Future[R]: ...

    @overload
    def send(self, command: Command) -> Future[bool]: ...

    def send(self, command: Command) -> Future[Any]:
        """Dispatch *command* on the worker pool and return immediately.

        Plain commands resolve to ``True`` iff every handler succeeded, or to
        ``False`` right away when no handler is registered. Result commands
        resolve to the handler's value or fail with its exception; a missing
        handler fails the future with :class:`NoHandlerRegisteredError`.

        Raises :class:`DispatchRejectedError` when a bounded pool is full and
        :class:`RuntimeError` after the pool was shut down; a trackable command
        is marked ``FAILED`` in both cases.
        """
        if isinstance(command, ResultCommand):
            return self._send_result(command)

        handlers = self.handlers_for(type(command))
        if not handlers:
            _log.debug("command_unhandled", command_type=type(command).__name__)
            return completed_future(False)
        self._mark_pending(command)
        try:
            return self._pool.submit(self._run_handlers, handlers, command)
        except Exception:
            self._mark_submission_failed(command)
            raise

    @overload
    def send_sync(self, command: ResultCommand[R]) -> R: ...

    @overload
    def send_sync(self, command: Command) -> bool: ...

    def send_sync(self, command: Command) -> Any:
        """Dispatch *command* on the calling thread.

        Plain commands return ``True`` iff every handler succeeded (``False``
        when none is registered). Result commands return the handler's value;
        the handler's exception and :class:`NoHandlerRegisteredError`
        propagate unchanged.
        """
        if isinstance(command, ResultCommand):
            handler = self._result_handler_for(command)
            self._mark_pending(command)
            return handler.handle(command)

        handlers = self.handlers_for(type(command))
        if not handlers:
            _log.debug("command_unhandled", command_type=type(command).__name__)
            return False
        self._mark_pending(command)
        return self._run_handlers(handlers, command)

    async def asend(self, command: Command) -> Any:
        """Await :meth:`send` from a coroutine without blocking the event loop."""
        return await asyncio.wrap_future(self.send(command))

    def _send_result(self, command: ResultCommand[Any]) -> Future[Any]:
        try:
            handler = self._result_handler_for(command)
        except NoHandlerRegisteredError as exc:
            return failed_future(exc)
        self._mark_pending(command)
        try:
            return self._pool.submit(handler.handle, command)
        except Exception:
            self._mark_submission_failed(command)
            raise

    def _result_handler_for(self, command: ResultCommand[Any]) -> ResultCommandHandler[Any, Any]:
        with self._lock:
            handler = self._result_handlers.get(type(command))
        if handler is None:
            raise NoHandlerRegisteredError(type(command))
        return handler

    def _run_handlers(self, handlers: tuple[CommandHandler[Any], ...], command: Command) -> bool:
        succeeded = True
        for handler in handlers:
            try:
                handler.handle(command)
            except Exception as exc:  # noqa: BLE001
                succeeded = False
                error = HandlerExecutionError(handler, type(command), exc)
                _log.error("command_handler_failed", exc_info=exc, **error.to_dict())
        _log.debug(
            "command_dispatched",
            command_type=type(command).__name__,
            handlers=len(handlers),
            succeeded=succeeded,
        )
        return succeeded

    def _mark_pending(self, command: Command) -> None:
        if isinstance(command, TrackableCommand):
            self._status.update_status(command.id, CommandStatus.PENDING)

    def _mark_submission_failed(self, command: Command) -> None:
        if isinstance(command, TrackableCommand):
            self._status.update_status(command.id, CommandStatus.FAILED)

    # ------------------------------------------------------------------
    # CommandStatusRepository
    # ------------------------------------------------------------------

    def get_status(self, command_id: uuid.UUID) -> CommandStatus:
        return self._status.get_status(command_id)

    def update_status(self, command_id: uuid.UUID, status: CommandStatus) -> None:
        self._status.update_status(command_id, status)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker pool if this bus created it."""
        if self._owns_pool:
            self._pool.shutdown(wait=wait)

    def __enter__(self) -> "InProcessCommandBus":
        return self

    def __exit__(self, *_: object) -> None:
        self.shutdown()


__all__ = [
    "Command",
    "CommandBus",
    "CommandHandler",
    "InProcessCommandBus",
    "ResultCommand",
    "ResultCommandHandler",
    "TrackableCommand",
]
