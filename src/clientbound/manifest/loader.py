"""Load type manifests emitted by the type-resolution step."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from clientbound.exceptions import ManifestError
from clientbound.manifest.schema import validate_manifest
from clientbound.manifest.shapes import build_aliases, build_shape
from clientbound.model import Entity, Field, ModuleDescription
from clientbound.types import Alias

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> tuple[ModuleDescription, ...]:
    """Load a YAML or JSON manifest with safe_load and return its modules."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid manifest file at {path}: {exc}") from exc
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest file at {path}: {exc}") from exc

    modules = parse_manifest(raw, source_path=str(path))
    logger.debug("Loaded %d module(s) from %s", len(modules), path)
    return modules


def parse_manifest(data: Any, *, source_path: str = "<memory>") -> tuple[ModuleDescription, ...]:
    """Validate an already-parsed manifest document and build module descriptions."""
    validate_manifest(data, source_path)
    return tuple(_build_module(module, source_path) for module in data["modules"])


def _build_module(raw: dict[str, Any], source_path: str) -> ModuleDescription:
    aliases = build_aliases(raw.get("aliases"))
    entities = tuple(_build_entity(entity, aliases) for entity in raw.get("entities") or [])
    return ModuleDescription(
        path=raw["path"],
        directive=raw.get("directive"),
        entities=entities,
        manifest_path=source_path,
    )


def _build_entity(raw: dict[str, Any], aliases: Mapping[str, Alias]) -> Entity:
    fields = tuple(
        Field(
            name=field["name"],
            shape=build_shape(field.get("type"), aliases),
            line=field.get("line"),
            column=field.get("column"),
        )
        for field in raw.get("fields") or []
    )
    return Entity(
        name=raw["name"],
        export=raw.get("export", "none"),
        declaration=raw.get("declaration", "function"),
        param=raw.get("param", "identifier"),
        fields=fields,
    )
