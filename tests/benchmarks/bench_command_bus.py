"""Benchmark: command and query dispatch latency.

Compares inline ``send_sync`` against pooled ``send`` to isolate the cost of
the worker hand-off, for plain commands with one and five handlers, result
commands and queries.
"""

from __future__ import annotations

from bootstrap_core.application.cqrs import (
    Command,
    CommandHandler,
    InProcessCommandBus,
    InProcessQueryBus,
    Query,
    QueryHandler,
    ResultCommand,
    ResultCommandHandler,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class _PlaceOrder(Command):
    """Minimal command used only in benchmarks."""


class _QuotePrice(ResultCommand[int]):
    pass


class _CountOrders(Query[int]):
    pass


class _NoOpHandler(CommandHandler[_PlaceOrder]):
    def handle(self, command: _PlaceOrder) -> None:
        pass


class _QuoteHandler(ResultCommandHandler[_QuotePrice, int]):
    def handle(self, command: _QuotePrice) -> int:
        return 42


class _CountHandler(QueryHandler[_CountOrders, int]):
    def handle(self, query: _CountOrders) -> int:
        return 7


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


def test_send_sync_single_handler(benchmark, command_bus: InProcessCommandBus):
    command_bus.register(_NoOpHandler(), _PlaceOrder)
    cmd = _PlaceOrder()

    result = benchmark(command_bus.send_sync, cmd)
    assert result is True


def test_send_sync_five_handlers(benchmark, command_bus: InProcessCommandBus):
    for _ in range(5):
        command_bus.register(_NoOpHandler(), _PlaceOrder)
    cmd = _PlaceOrder()

    result = benchmark(command_bus.send_sync, cmd)
    assert result is True


def test_send_pooled_round_trip(benchmark, command_bus: InProcessCommandBus):
    """``send(...).result()`` – includes the hand-off to a worker thread."""
    command_bus.register(_NoOpHandler(), _PlaceOrder)
    cmd = _PlaceOrder()

    def run():
        return command_bus.send(cmd).result()

    result = benchmark(run)
    assert result is True


def test_send_unhandled(benchmark, command_bus: InProcessCommandBus):
    cmd = _PlaceOrder()

    def run():
        return command_bus.send(cmd).result()

    result = benchmark(run)
    assert result is False


def test_result_command_send_sync(benchmark, command_bus: InProcessCommandBus):
    command_bus.register_result_handler(_QuoteHandler(), _QuotePrice)
    cmd = _QuotePrice()

    result = benchmark(command_bus.send_sync, cmd)
    assert result == 42


def test_query_send_sync(benchmark, query_bus: InProcessQueryBus):
    query_bus.register(_CountHandler(), _CountOrders)
    query = _CountOrders()

    result = benchmark(query_bus.send_sync, query)
    assert result == 7


def test_query_send_pooled(benchmark, query_bus: InProcessQueryBus):
    query_bus.register(_CountHandler(), _CountOrders)
    query = _CountOrders()

    def run():
        return query_bus.send(query).result()

    result = benchmark(run)
    assert result == 7
