"""Build TypeShape trees from manifest payloads."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from clientbound.constants.manifest import (
    SHAPE_KIND_CLASS,
    SHAPE_KIND_CONSTRUCTOR,
    SHAPE_KIND_FUNCTION,
    SHAPE_KIND_INTERSECTION,
    SHAPE_KIND_OPAQUE,
    SHAPE_KIND_PLAIN,
    SHAPE_KIND_PRIMITIVE,
    SHAPE_KIND_REF,
    SHAPE_KIND_UNION,
)
from clientbound.types import (
    Alias,
    ClassInstance,
    Constructor,
    Function,
    Intersection,
    Opaque,
    PlainData,
    Primitive,
    TypeShape,
    Union,
)

logger = logging.getLogger(__name__)


def build_aliases(raw_aliases: Mapping[str, Any] | None) -> dict[str, Alias]:
    """Create alias nodes first, then fill their targets, so aliases may refer to each other."""
    aliases: dict[str, Alias] = {}
    if not raw_aliases:
        return aliases

    for name in raw_aliases:
        aliases[str(name)] = Alias(name=str(name))
    for name, raw in raw_aliases.items():
        aliases[str(name)].target = build_shape(raw, aliases)
    return aliases


def build_shape(raw: Any, aliases: Mapping[str, Alias] | None = None) -> TypeShape:
    """Convert a manifest type payload into a TypeShape.

    A bare string is shorthand for ``{"kind": <string>}``. Payloads that do
    not describe a known shape become ``Opaque``.
    """
    aliases = aliases or {}
    if isinstance(raw, str):
        raw = {"kind": raw}
    if not isinstance(raw, dict):
        logger.debug("Malformed type payload treated as opaque: %r", raw)
        return Opaque(description=repr(raw))

    kind = raw.get("kind")
    if kind == SHAPE_KIND_PRIMITIVE:
        return Primitive(name=str(raw.get("name", "unknown")))
    if kind == SHAPE_KIND_FUNCTION:
        return Function(signature=str(raw.get("signature", "")))
    if kind == SHAPE_KIND_CLASS:
        return ClassInstance(name=_optional_name(raw), callable=raw.get("callable") is True)
    if kind == SHAPE_KIND_CONSTRUCTOR:
        return Constructor(name=_optional_name(raw), callable=raw.get("callable") is True)
    if kind == SHAPE_KIND_UNION:
        return Union(members=_build_members(raw.get("members"), aliases))
    if kind == SHAPE_KIND_INTERSECTION:
        return Intersection(members=_build_members(raw.get("members"), aliases))
    if kind == SHAPE_KIND_PLAIN:
        return PlainData(
            members=_build_members(raw.get("members"), aliases),
            container=str(raw.get("container", "object")),
        )
    if kind == SHAPE_KIND_REF:
        return _resolve_ref(raw.get("name"), aliases)
    if kind != SHAPE_KIND_OPAQUE:
        logger.debug("Unknown shape kind treated as opaque: %r", kind)
    return Opaque(description=str(raw.get("description", kind or "")))


def _build_members(raw_members: Any, aliases: Mapping[str, Alias]) -> tuple[TypeShape, ...]:
    # Plain-data members may be given as a name -> type mapping.
    if isinstance(raw_members, dict):
        raw_members = list(raw_members.values())
    if not isinstance(raw_members, list):
        return ()
    return tuple(build_shape(member, aliases) for member in raw_members)


def _resolve_ref(name: Any, aliases: Mapping[str, Alias]) -> TypeShape:
    if isinstance(name, str) and name in aliases:
        return aliases[name]
    logger.debug("Unresolved type reference: %r", name)
    return Alias(name=str(name))


def _optional_name(raw: dict[str, Any]) -> str | None:
    name = raw.get("name")
    if isinstance(name, str) and name:
        return name
    return None
