"""Configuration-related exceptions."""

from __future__ import annotations

from clientbound.exceptions.base import ClientboundError


class ConfigError(ClientboundError, ValueError):
    """Raised when checker configuration is invalid."""
