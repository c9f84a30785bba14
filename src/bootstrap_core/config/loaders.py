"""Config – settings loaders and the SettingsFactory."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from bootstrap_core.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from bootstrap_core.config.settings import Settings
from bootstrap_core.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


class SettingsLoader(abc.ABC):
    """Port: read setting values from an external source."""

    @abc.abstractmethod
    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Return the values this source knows about, keyed by field name."""

    def load(self, settings_class: type[T]) -> T:
        return settings_class(**self.read(settings_class))


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables named ``<PREFIX>_<FIELD>``.

    *environ* defaults to :data:`os.environ`; pass a mapping in tests.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)
            if raw is None:
                if _is_required(field):
                    raise MissingRequiredSettingError(env_key)
                continue
            values[field.name] = self._coerce(env_key, raw, field.type)
        return values

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        if type_hint in (bool, "bool"):
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise InvalidSettingValueError(key, value, "expected a boolean")
        if type_hint in (int, "int"):
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(key, value, "expected an integer") from exc
        return value


class SettingsFactory:
    """Merge loader outputs and explicit overrides into one settings object.

    Loaders apply in order, later ones winning; *overrides* win over all
    loaders. A loader that fails with :class:`ConfigError` is skipped with a
    warning so the remaining sources can still contribute.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                merged.update(loader.read(settings_cls))
            except ConfigError as exc:
                _log.warning(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    code=exc.code,
                    error=exc.message,
                )

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):
            if field.name not in merged and _is_required(field):
                raise MissingRequiredSettingError(field.name)

        return settings_cls(**merged)


__all__ = ["EnvSettingsLoader", "SettingsFactory", "SettingsLoader"]
