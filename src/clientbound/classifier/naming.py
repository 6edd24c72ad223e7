"""Naming exceptions that let a function-typed prop cross the boundary."""

from __future__ import annotations

from clientbound.constants.naming import (
    ACTION_PROP_NAME,
    ACTION_PROP_SUFFIX,
    ERROR_BOUNDARY_PATH_PATTERN,
    RESET_PROP_NAME,
)
from clientbound.model import FileContext


def is_action_name(prop_name: str) -> bool:
    """Return True for ``action`` or any name ending in ``Action`` (case-sensitive)."""
    return prop_name == ACTION_PROP_NAME or prop_name.endswith(ACTION_PROP_SUFFIX)


def is_error_boundary_path(path: str) -> bool:
    """Return True for ``error.tsx``/``global-error.ts`` style modules after a path separator."""
    return ERROR_BOUNDARY_PATH_PATTERN.search(path) is not None


def is_excepted_function(prop_name: str, context: FileContext) -> bool:
    """Return True when a function-typed prop is allowed by naming convention."""
    if is_action_name(prop_name):
        return True
    return prop_name == RESET_PROP_NAME and is_error_boundary_path(context.path)
