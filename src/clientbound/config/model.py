"""Config data model for clientbound checks."""

from __future__ import annotations

from dataclasses import dataclass

from clientbound.classifier.builtins import merge_allowlist
from clientbound.constants.config import DEFAULT_MANIFEST_GLOBS, DEFAULT_MAX_FILE_MB


@dataclass(frozen=True)
class ClientboundConfig:
    """Resolved checker config."""

    manifest_globs: tuple[str, ...] = DEFAULT_MANIFEST_GLOBS
    extra_serializable_types: tuple[str, ...] = ()
    skip_test_files: bool = True
    max_file_mb: int = DEFAULT_MAX_FILE_MB

    @property
    def effective_allowlist(self) -> frozenset[str]:
        """Built-in serializable types plus configured extras."""
        return merge_allowlist(self.extra_serializable_types)
