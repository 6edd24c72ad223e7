"""Configuration loading and normalization for clientbound checks."""

from __future__ import annotations

from clientbound.config.loader import load_config
from clientbound.config.model import ClientboundConfig

__all__ = ["ClientboundConfig", "load_config"]
