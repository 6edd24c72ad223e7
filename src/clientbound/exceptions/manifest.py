"""Manifest-related exceptions."""

from __future__ import annotations

from clientbound.exceptions.base import ClientboundError


class ManifestError(ClientboundError, ValueError):
    """Raised when a type manifest cannot be loaded."""
