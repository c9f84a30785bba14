"""Observability – structured logging helpers."""
from bootstrap_core.observability.logging.factory import (
    configure_from_settings,
    configure_logging,
    get_logger,
)

__all__ = ["configure_from_settings", "configure_logging", "get_logger"]
