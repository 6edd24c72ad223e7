"""Type manifest discovery under a workspace root."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_manifest_files(root: Path, manifest_globs: tuple[str, ...], max_file_mb: int) -> list[Path]:
    """Discover manifest files by configured glob patterns, in stable path order."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()

    for pattern in manifest_globs:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.warning("Skipping manifest larger than %d MB: %s", max_file_mb, path)
                    continue
            except OSError:
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: _stable_path_key(path, resolved_root))


def _stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
