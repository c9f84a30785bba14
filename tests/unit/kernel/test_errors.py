"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

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


class PlaceOrder:
    pass


class PlaceOrderHandler:
    pass


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("x").code == "base_error"

    def test_explicit_code_wins(self) -> None:
        assert BaseError("x", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        err = BaseError("broken", detail={"k": 1})
        assert json.loads(str(err)) == {"code": "base_error", "message": "broken", "detail": {"k": 1}}

    def test_cause_chained(self) -> None:
        cause = KeyError("k")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "parent"),
        [
            (InvariantViolationError("x"), DomainError),
            (NotFoundError("Order"), DomainError),
            (NoHandlerRegisteredError(PlaceOrder), ApplicationError),
            (DispatchRejectedError(4), ApplicationError),
        ],
    )
    def test_parents(self, error: BaseError, parent: type[BaseError]) -> None:
        assert isinstance(error, parent)
        assert isinstance(error, BaseError)


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        assert NotFoundError("Order", 7).message == "Order '7' not found"

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("Order").message == "Order not found"


class TestNoHandlerRegisteredError:
    def test_names_fully_qualified_type(self) -> None:
        err = NoHandlerRegisteredError(PlaceOrder)
        assert err.message == f"No handler registered for {__name__}.PlaceOrder"
        assert err.detail == {"message_type": f"{__name__}.PlaceOrder"}
        assert err.message_type is PlaceOrder


class TestHandlerExecutionError:
    def test_wraps_cause(self) -> None:
        cause = RuntimeError("boom")
        err = HandlerExecutionError(PlaceOrderHandler(), PlaceOrder, cause)
        assert err.__cause__ is cause
        assert err.code == "handler_execution_failed"
        assert err.detail == {"handler": "PlaceOrderHandler", "message_type": "PlaceOrder"}
        assert "boom" in err.message


class TestDispatchRejectedError:
    def test_carries_limit(self) -> None:
        err = DispatchRejectedError(16)
        assert err.max_pending == 16
        assert err.detail == {"max_pending": 16}
