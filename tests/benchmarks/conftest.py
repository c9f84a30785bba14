"""Shared fixtures for dispatch benchmarks.

The buses are session-scoped so thread start-up in the worker pool is paid
once and does not skew per-dispatch timings.
"""

from __future__ import annotations

import pytest

from bootstrap_core.application.cqrs import InProcessCommandBus, InProcessQueryBus, WorkerPool


@pytest.fixture(scope="session")
def pool():
    with WorkerPool(max_workers=4) as pool:
        yield pool


@pytest.fixture()
def command_bus(pool: WorkerPool):
    with InProcessCommandBus(pool=pool) as bus:
        yield bus


@pytest.fixture()
def query_bus(pool: WorkerPool):
    with InProcessQueryBus(pool=pool) as bus:
        yield bus
