"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError               (domain.py)
    │   ├── InvariantViolationError
    │   └── NotFoundError
    └── ApplicationError          (application.py)
        ├── NoHandlerRegisteredError
        ├── HandlerExecutionError
        └── DispatchRejectedError
"""

from bootstrap_core.kernel.errors.application import (
    ApplicationError,
    DispatchRejectedError,
    HandlerExecutionError,
    NoHandlerRegisteredError,
)
from bootstrap_core.kernel.errors.base import BaseError
from bootstrap_core.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
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
