"""Application-layer errors – raised by the command and query buses."""

from __future__ import annotations

from typing import Any

from bootstrap_core.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class NoHandlerRegisteredError(ApplicationError):
    """A result command or query was sent with no handler for its type."""

    default_code = "no_handler_registered"

    def __init__(self, message_type: type, **kwargs: Any) -> None:
        name = f"{message_type.__module__}.{message_type.__qualname__}"
        super().__init__(
            f"No handler registered for {name}",
            detail={"message_type": name},
            **kwargs,
        )
        self.message_type = message_type


class HandlerExecutionError(ApplicationError):
    """Wraps an exception raised inside a handler body.

    Fire-and-forget dispatch records one of these per failing handler and
    logs it; it is never raised to the sender of a plain command.
    """

    default_code = "handler_execution_failed"

    def __init__(
        self,
        handler: Any,
        message_type: type,
        cause: BaseException,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{type(handler).__name__} failed handling {message_type.__name__}: {cause}",
            detail={
                "handler": type(handler).__qualname__,
                "message_type": message_type.__qualname__,
            },
            cause=cause,
            **kwargs,
        )
        self.handler = handler
        self.message_type = message_type


class DispatchRejectedError(ApplicationError):
    """The worker pool is at capacity and refused a new submission."""

    default_code = "dispatch_rejected"

    def __init__(self, max_pending: int, **kwargs: Any) -> None:
        super().__init__(
            f"Worker pool is full ({max_pending} pending dispatches)",
            detail={"max_pending": max_pending},
            **kwargs,
        )
        self.max_pending = max_pending


__all__ = [
    "ApplicationError",
    "DispatchRejectedError",
    "HandlerExecutionError",
    "NoHandlerRegisteredError",
]
