"""Config loading and normalization for clientbound checks."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from clientbound.config.model import ClientboundConfig
from clientbound.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_MANIFEST_GLOBS,
    DEFAULT_MAX_FILE_MB,
)
from clientbound.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> ClientboundConfig:
    """Load and validate checker config from ``clientbound.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ClientboundConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(_describe_unknown(k) for k in unknown)}")

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    skip_test_files = raw.get("skip_test_files", True)
    if not isinstance(skip_test_files, bool):
        raise ConfigError("skip_test_files must be a boolean")

    manifest_globs = tuple(
        pattern
        for pattern in _ensure_string_list(raw.get("manifest_globs", list(DEFAULT_MANIFEST_GLOBS)), "manifest_globs")
        if pattern.strip()
    )
    if not manifest_globs:
        raise ConfigError("manifest_globs must contain at least one pattern")

    return ClientboundConfig(
        manifest_globs=manifest_globs,
        extra_serializable_types=_normalize_type_names(
            _ensure_string_list(raw.get("extra_serializable_types", []), "extra_serializable_types")
        ),
        skip_test_files=skip_test_files,
        max_file_mb=max_file_mb,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _normalize_type_names(names: list[str]) -> tuple[str, ...]:
    """Strip, deduplicate and sort type names; case is preserved."""
    return tuple(sorted({name.strip() for name in names if name.strip()}))


def _describe_unknown(key: str) -> str:
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1)
    if matches:
        return f"{key!r} (did you mean {matches[0]!r}?)"
    return repr(key)
