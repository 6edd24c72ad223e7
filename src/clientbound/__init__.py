"""clientbound: serializable-props checker for "use client" entry modules."""

from __future__ import annotations

__version__ = "0.3.0"

from clientbound.classifier import classify, is_allowlisted  # noqa: E402
from clientbound.types import Verdict  # noqa: E402

__all__ = ["Verdict", "__version__", "classify", "is_allowlisted"]
