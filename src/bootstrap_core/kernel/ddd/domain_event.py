"""Domain events raised by aggregate roots."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime

from bootstrap_core.kernel.time import utc_now
from bootstrap_core.kernel.types.ids import Id


@dataclasses.dataclass(frozen=True, eq=False, kw_only=True)
class DomainEvent:
    """Base class for domain events.

    Events are immutable and compare by identity: two events are never equal
    by value, even when every field matches. Subclasses add their payload
    fields and must keep ``eq=False``.

    Example::

        @dataclasses.dataclass(frozen=True, eq=False, kw_only=True)
        class OrderPlaced(DomainEvent):
            total: Decimal

        OrderPlaced(aggregate_id=order.id, aggregate_type=Order, total=Decimal("9.90"))
    """

    aggregate_id: Id
    aggregate_type: type
    event_version: int | None = None
    event_id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    timestamp: datetime = dataclasses.field(default_factory=utc_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__


__all__ = ["DomainEvent"]
