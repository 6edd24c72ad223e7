"""Root exception for clientbound."""

from __future__ import annotations


class ClientboundError(Exception):
    """Base class for all errors raised by clientbound."""
