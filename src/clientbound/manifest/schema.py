"""Structural validation for type manifest documents.

Only the outer structure (modules, entities, fields) is validated here and
any violation raises ManifestError. Field type payloads are deliberately not
validated: the shape builder degrades malformed payloads to ``Opaque``.
"""

from __future__ import annotations

from typing import Any

from clientbound.constants.manifest import (
    ALLOWED_ENTITY_KEYS,
    ALLOWED_FIELD_KEYS,
    ALLOWED_MODULE_KEYS,
    DECLARATION_KINDS,
    EXPORT_KINDS,
    PARAM_KINDS,
)
from clientbound.exceptions import ManifestError


def validate_manifest(data: Any, source_path: str) -> None:
    """Validate a parsed manifest document, raising ManifestError on violations."""
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest at {source_path} must be a mapping, got {type(data).__name__}")

    modules = data.get("modules")
    if not isinstance(modules, list):
        raise ManifestError(f"Manifest at {source_path}: 'modules' must be a list")

    for index, module in enumerate(modules):
        _validate_module(module, f"{source_path}: modules[{index}]")


def _validate_module(module: Any, where: str) -> None:
    if not isinstance(module, dict):
        raise ManifestError(f"{where} must be a mapping")

    unknown = set(module) - ALLOWED_MODULE_KEYS
    if unknown:
        raise ManifestError(f"{where} has unknown keys: {sorted(unknown)}")

    path = module.get("path")
    if not isinstance(path, str) or not path.strip():
        raise ManifestError(f"{where}: 'path' must be a non-empty string")

    directive = module.get("directive")
    if directive is not None and not isinstance(directive, str):
        raise ManifestError(f"{where}: 'directive' must be a string or null")

    aliases = module.get("aliases", {})
    if aliases is not None and not isinstance(aliases, dict):
        raise ManifestError(f"{where}: 'aliases' must be a mapping")

    entities = module.get("entities", [])
    if entities is None:
        return
    if not isinstance(entities, list):
        raise ManifestError(f"{where}: 'entities' must be a list")
    for index, entity in enumerate(entities):
        _validate_entity(entity, f"{where}.entities[{index}]")


def _validate_entity(entity: Any, where: str) -> None:
    if not isinstance(entity, dict):
        raise ManifestError(f"{where} must be a mapping")

    unknown = set(entity) - ALLOWED_ENTITY_KEYS
    if unknown:
        raise ManifestError(f"{where} has unknown keys: {sorted(unknown)}")

    name = entity.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ManifestError(f"{where}: 'name' must be a non-empty string")

    _validate_choice(entity, "export", EXPORT_KINDS, where)
    _validate_choice(entity, "declaration", DECLARATION_KINDS, where)
    _validate_choice(entity, "param", PARAM_KINDS, where)

    fields = entity.get("fields", [])
    if fields is None:
        return
    if not isinstance(fields, list):
        raise ManifestError(f"{where}: 'fields' must be a list")
    for index, field in enumerate(fields):
        _validate_field(field, f"{where}.fields[{index}]")


def _validate_field(field: Any, where: str) -> None:
    if not isinstance(field, dict):
        raise ManifestError(f"{where} must be a mapping")

    unknown = set(field) - ALLOWED_FIELD_KEYS
    if unknown:
        raise ManifestError(f"{where} has unknown keys: {sorted(unknown)}")

    name = field.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestError(f"{where}: 'name' must be a non-empty string")

    for key in ("line", "column"):
        value = field.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ManifestError(f"{where}: '{key}' must be a positive integer")


def _validate_choice(data: dict[str, Any], key: str, choices: frozenset[str], where: str) -> None:
    if key not in data:
        return
    value = data[key]
    if not isinstance(value, str) or value not in choices:
        raise ManifestError(f"{where}: '{key}' must be one of {sorted(choices)}, got {value!r}")
