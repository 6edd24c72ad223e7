"""Shared type aliases for clientbound."""

from .common import JsonObject, JsonScalar, JsonValue, MessageId, Verdict
from .shapes import (
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

__all__ = [
    "Alias",
    "ClassInstance",
    "Constructor",
    "Function",
    "Intersection",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "MessageId",
    "Opaque",
    "PlainData",
    "Primitive",
    "TypeShape",
    "Union",
    "Verdict",
]
