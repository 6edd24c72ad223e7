"""Membership test for the built-in serializable type allowlist."""

from __future__ import annotations

from collections.abc import Collection

from clientbound.constants.builtins import SERIALIZABLE_BUILT_INS


def is_allowlisted(type_name: str | None, allowlist: Collection[str] = SERIALIZABLE_BUILT_INS) -> bool:
    """Return True when *type_name* exactly matches an allowlisted nominal name."""
    if not type_name:
        return False
    return type_name in allowlist


def merge_allowlist(*extra: tuple[str, ...]) -> frozenset[str]:
    """Return the built-in allowlist extended with configured type names."""
    merged: set[str] = set(SERIALIZABLE_BUILT_INS)
    for names in extra:
        merged.update(name for name in names if name)
    return frozenset(merged)
