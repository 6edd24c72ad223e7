"""Shared exception hierarchy for clientbound."""

from __future__ import annotations

from .base import ClientboundError
from .config import ConfigError
from .manifest import ManifestError

__all__ = [
    "ClientboundError",
    "ConfigError",
    "ManifestError",
]
