"""Kernel – framework-agnostic building blocks."""

from bootstrap_core.kernel.errors import (
    ApplicationError,
    BaseError,
    DispatchRejectedError,
    DomainError,
    HandlerExecutionError,
    InvariantViolationError,
    NoHandlerRegisteredError,
    NotFoundError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DispatchRejectedError",
    "DomainError",
    "HandlerExecutionError",
    "InvariantViolationError",
    "NoHandlerRegisteredError",
    "NotFoundError",
]
