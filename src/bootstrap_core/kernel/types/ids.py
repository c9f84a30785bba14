"""UUID-backed identifier value objects."""

from __future__ import annotations

import dataclasses
import uuid


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Id:
    """Opaque identifier wrapping a 128-bit UUID.

    Equality is structural on the UUID only: ids of different subclasses
    built from the same UUID compare equal and hash identically.

    Examples::

        class OrderId(Id): ...

        oid = OrderId.generate()                    # new random id
        oid = OrderId.from_str("9f1c...")            # parse an existing one
        oid = OrderId(uuid.UUID("9f1c..."))          # direct construction
    """

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(f"{type(self).__name__} expects a uuid.UUID, got {type(self.value).__name__}")

    @classmethod
    def generate(cls) -> "Id":
        """Return a new random id."""
        return cls(uuid.uuid4())

    @classmethod
    def from_str(cls, value: str) -> "Id":
        """Parse the canonical UUID string form."""
        return cls(uuid.UUID(value))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Id):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.value)!r})"


__all__ = ["Id"]
