"""DDD building blocks – public re-export surface."""

from bootstrap_core.kernel.ddd.aggregate import AggregateRoot, Publisher
from bootstrap_core.kernel.ddd.domain_event import DomainEvent
from bootstrap_core.kernel.ddd.entity import Entity
from bootstrap_core.kernel.ddd.repository import ReadModel, ReadRepository, Repository

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "Publisher",
    "ReadModel",
    "ReadRepository",
    "Repository",
]
