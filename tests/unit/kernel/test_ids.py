"""Unit tests for the Id value object."""

from __future__ import annotations

import uuid

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bootstrap_core.kernel.types import Id


class OrderId(Id):
    pass


class CustomerId(Id):
    pass


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_generate_returns_subclass_instance(self) -> None:
        oid = OrderId.generate()
        assert isinstance(oid, OrderId)
        assert isinstance(oid.value, uuid.UUID)

    def test_generate_is_unique(self) -> None:
        assert len({Id.generate() for _ in range(500)}) == 500

    def test_from_str_round_trips_string_form(self) -> None:
        raw = "9f1c2d3e-4b5a-4c6d-8e7f-0a1b2c3d4e5f"
        oid = OrderId.from_str(raw)
        assert str(oid) == raw
        assert repr(oid) == f"OrderId('{raw}')"

    def test_from_str_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            Id.from_str("not-a-uuid")

    def test_non_uuid_value_rejected(self) -> None:
        with pytest.raises(TypeError, match="uuid.UUID"):
            Id("9f1c2d3e-4b5a-4c6d-8e7f-0a1b2c3d4e5f")  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        oid = Id.generate()
        with pytest.raises(AttributeError):
            oid.value = uuid.uuid4()  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Equality and hashing
# ---------------------------------------------------------------------------


class TestEquality:
    def test_same_uuid_equal(self) -> None:
        value = uuid.uuid4()
        assert Id(value) == Id(value)

    def test_different_uuid_not_equal(self) -> None:
        assert Id.generate() != Id.generate()

    def test_not_equal_to_bare_uuid(self) -> None:
        value = uuid.uuid4()
        assert Id(value) != value

    def test_not_equal_to_string(self) -> None:
        oid = Id.generate()
        assert oid != str(oid)

    @given(st.uuids())
    def test_equality_ignores_subclass(self, value: uuid.UUID) -> None:
        assert OrderId(value) == CustomerId(value)
        assert hash(OrderId(value)) == hash(CustomerId(value))

    @given(st.uuids(), st.uuids())
    def test_equality_matches_uuid_equality(self, a: uuid.UUID, b: uuid.UUID) -> None:
        assert (Id(a) == Id(b)) is (a == b)

    def test_usable_as_dict_key(self) -> None:
        value = uuid.uuid4()
        index = {OrderId(value): "order"}
        assert index[Id(value)] == "order"
