"""CQRS – WorkerPool: the shared thread pool behind ``send``.

``ThreadPoolExecutor`` grows threads on demand up to ``max_workers`` and
queues beyond that, which gives cached-pool behaviour without a queue limit.
Setting ``max_pending`` turns the pool into a bulkhead: once that many
submissions are queued or running, :meth:`WorkerPool.submit` raises
:class:`DispatchRejectedError` instead of queueing.
"""
from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from bootstrap_core.config.settings import DispatchSettings
from bootstrap_core.kernel.errors import DispatchRejectedError

T = TypeVar("T")


def completed_future(value: T) -> Future[T]:
    """A future that is already resolved with *value*."""
    future: Future[T] = Future()
    future.set_result(value)
    return future


def failed_future(exc: BaseException) -> Future[Any]:
    """A future that is already failed with *exc*."""
    future: Future[Any] = Future()
    future.set_exception(exc)
    return future


class WorkerPool:
    """Thread pool shared by the command and query buses."""

    def __init__(
        self,
        max_workers: int = 32,
        max_pending: int = 0,
        thread_name_prefix: str = "dispatch",
    ) -> None:
        self.max_workers = max_workers
        self.max_pending = max_pending
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._lock = threading.Lock()
        self._pending = 0

    @classmethod
    def from_settings(cls, settings: DispatchSettings) -> "WorkerPool":
        return cls(
            max_workers=settings.max_workers,
            max_pending=settings.max_pending,
            thread_name_prefix=settings.thread_name_prefix,
        )

    @property
    def pending(self) -> int:
        """Submissions that are queued or running."""
        with self._lock:
            return self._pending

    def submit(self, fn: Callable[..., T], /, *args: Any) -> Future[T]:
        with self._lock:
            if self.max_pending and self._pending >= self.max_pending:
                raise DispatchRejectedError(self.max_pending)
            self._pending += 1
        try:
            future = self._executor.submit(fn, *args)
        except BaseException:
            self._release()
            raise
        future.add_done_callback(self._on_done)
        return future

    def _on_done(self, _future: Future[Any]) -> None:
        self._release()

    def _release(self) -> None:
        with self._lock:
            self._pending -= 1

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *_: object) -> None:
        self.shutdown()


__all__ = ["WorkerPool", "completed_future", "failed_future"]
