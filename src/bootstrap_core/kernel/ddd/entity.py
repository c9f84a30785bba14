"""Entity base class – identity-based equality."""

from __future__ import annotations

from bootstrap_core.kernel.types.ids import Id


class Entity:
    """Base entity – equality is identity-based (by ``id``).

    Two entities are equal when their ids are equal and one is an instance
    of the other's class, so a ``Customer`` and an ``Order`` that happen to
    share an id are never equal.
    """

    def __init__(self, id: Id) -> None:  # noqa: A002
        self._id = id

    @property
    def id(self) -> Id:
        return self._id

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Entity):
            return NotImplemented
        if not (isinstance(other, type(self)) or isinstance(self, type(other))):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r})"


__all__ = ["Entity"]
