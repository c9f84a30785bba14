"""Kernel value-object types – public re-export surface."""

from bootstrap_core.kernel.types.ids import Id

__all__ = ["Id"]
