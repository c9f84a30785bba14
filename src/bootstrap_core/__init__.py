"""
bootstrap_core – in-process command/query dispatch and DDD building blocks.

Import path convention::

    from bootstrap_core.kernel.ddd import AggregateRoot, DomainEvent
    from bootstrap_core.kernel.types import Id
    from bootstrap_core.application.cqrs import Command, InProcessCommandBus
    from bootstrap_core.config import DispatchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
