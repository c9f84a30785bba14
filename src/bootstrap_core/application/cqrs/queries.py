"""Application CQRS – Query, QueryHandler, QueryBus, InProcessQueryBus."""
from __future__ import annotations

import abc
import asyncio
import threading
from concurrent.futures import Future
from typing import Any, Generic, TypeVar

from bootstrap_core.application.cqrs.workers import WorkerPool, failed_future
from bootstrap_core.config.settings import DispatchSettings
from bootstrap_core.kernel.errors import NoHandlerRegisteredError
from bootstrap_core.observability.logging import get_logger

Q = TypeVar("Q", bound="Query[Any]")
R = TypeVar("R")

_log = get_logger(__name__)


class Query(Generic[R]):
    """Marker base for queries (read-only intent returning an ``R``)."""


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Handle a single query type and return a result."""

    @abc.abstractmethod
    def handle(self, query: Q) -> R: ...


class QueryBus(abc.ABC):
    """Dispatches queries to their registered handlers."""

    @abc.abstractmethod
    def register(self, handler: QueryHandler[Any, Any], query_type: type[Query[Any]]) -> None: ...

    @abc.abstractmethod
    def remove(self, query_type: type[Query[Any]]) -> None: ...

    @abc.abstractmethod
    def send(self, query: Query[R]) -> Future[R]: ...

    @abc.abstractmethod
    def send_sync(self, query: Query[R]) -> R: ...


class InProcessQueryBus(QueryBus):
    """In-process query bus: one handler per query type, last registration wins."""

    def __init__(
        self,
        *,
        pool: WorkerPool | None = None,
        settings: DispatchSettings | None = None,
    ) -> None:
        self._owns_pool = pool is None
        if pool is None:
            pool = WorkerPool.from_settings(settings or DispatchSettings())
        self._pool = pool
        self._handlers: dict[type[Query[Any]], QueryHandler[Any, Any]] = {}
        self._lock = threading.Lock()

    def register(self, handler: QueryHandler[Any, Any], query_type: type[Query[Any]]) -> None:
        with self._lock:
            previous = self._handlers.get(query_type)
            self._handlers[query_type] = handler
        if previous is not None and previous is not handler:
            _log.info(
                "query_handler_replaced",
                query_type=query_type.__name__,
                previous=type(previous).__name__,
                handler=type(handler).__name__,
            )

    def remove(self, query_type: type[Query[Any]]) -> None:
        with self._lock:
            self._handlers.pop(query_type, None)

    def send(self, query: Query[R]) -> Future[R]:
        """Run the query's handler on the worker pool.

        A missing handler fails the returned future with
        :class:`NoHandlerRegisteredError`; handler exceptions fail it as-is.
        """
        try:
            handler = self._handler_for(query)
        except NoHandlerRegisteredError as exc:
            return failed_future(exc)
        _log.debug("query_dispatched", query_type=type(query).__name__)
        return self._pool.submit(handler.handle, query)

    def send_sync(self, query: Query[R]) -> R:
        handler = self._handler_for(query)
        _log.debug("query_dispatched", query_type=type(query).__name__, inline=True)
        return handler.handle(query)

    async def asend(self, query: Query[R]) -> R:
        """Await :meth:`send` from a coroutine."""
        return await asyncio.wrap_future(self.send(query))

    def _handler_for(self, query: Query[Any]) -> QueryHandler[Any, Any]:
        with self._lock:
            handler = self._handlers.get(type(query))
        if handler is None:
            raise NoHandlerRegisteredError(type(query))
        return handler

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_pool:
            self._pool.shutdown(wait=wait)

    def __enter__(self) -> "InProcessQueryBus":
        return self

    def __exit__(self, *_: object) -> None:
        self.shutdown()


__all__ = ["InProcessQueryBus", "Query", "QueryBus", "QueryHandler"]
