"""Config – Settings base class and the dispatch core's settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from bootstrap_core.config.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses are dataclasses; ``_prefix`` names the environment variable
    namespace used by :class:`~bootstrap_core.config.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DispatchSettings(Settings):
    """Tuning for the command/query buses and their worker pool.

    ``max_pending`` of 0 leaves the pool unbounded; any positive value makes
    ``send`` fail fast with :class:`DispatchRejectedError` once that many
    dispatches are in flight.
    """

    _prefix: ClassVar[str] = "DISPATCH"

    max_workers: int = 32
    max_pending: int = 0
    thread_name_prefix: str = "dispatch"
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.max_workers < 1:
            raise InvalidSettingValueError("max_workers", self.max_workers, "must be >= 1")
        if self.max_pending < 0:
            raise InvalidSettingValueError("max_pending", self.max_pending, "must be >= 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["DispatchSettings", "Settings"]
