"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "clientbound.yaml"
DEFAULT_MAX_FILE_MB: int = 2

DEFAULT_MANIFEST_GLOBS: tuple[str, ...] = (
    "**/*.shapes.yaml",
    "**/*.shapes.yml",
    "**/*.shapes.json",
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "manifest_globs",
        "extra_serializable_types",
        "skip_test_files",
        "max_file_mb",
    }
)
