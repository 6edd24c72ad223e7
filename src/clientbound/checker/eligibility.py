"""Decide which modules and entities the props rule applies to."""

from __future__ import annotations

from clientbound.constants.manifest import CHECKED_DECLARATIONS_BY_EXPORT, CHECKED_PARAM_KINDS
from clientbound.constants.naming import TEST_FILE_PATTERN, USE_CLIENT_DIRECTIVE
from clientbound.model import Entity, ModuleDescription


def is_test_file(path: str) -> bool:
    """Return True for ``*.test.tsx`` / ``*.spec.ts`` style file names."""
    return TEST_FILE_PATTERN.search(path) is not None


def has_use_client_directive(module: ModuleDescription) -> bool:
    """Return True when the module's first statement is the ``"use client"`` literal."""
    return module.directive == USE_CLIENT_DIRECTIVE


def is_module_checked(module: ModuleDescription, *, skip_test_files: bool = True) -> bool:
    if skip_test_files and is_test_file(module.path):
        return False
    return has_use_client_directive(module)


def is_checked_entity(entity: Entity) -> bool:
    """Return True for exported callables whose first parameter describes props."""
    accepted = CHECKED_DECLARATIONS_BY_EXPORT.get(entity.export, frozenset())
    if entity.declaration not in accepted:
        return False
    return entity.param in CHECKED_PARAM_KINDS
