"""Keys and vocabularies of the type manifest format."""

from __future__ import annotations

ALLOWED_MODULE_KEYS: frozenset[str] = frozenset({"path", "directive", "aliases", "entities"})
ALLOWED_ENTITY_KEYS: frozenset[str] = frozenset({"name", "export", "declaration", "param", "fields"})
ALLOWED_FIELD_KEYS: frozenset[str] = frozenset({"name", "type", "line", "column"})

EXPORT_KINDS: frozenset[str] = frozenset({"default", "default_reference", "named", "specifier", "none"})
DECLARATION_KINDS: frozenset[str] = frozenset({"function", "arrow", "function_expression", "other"})
PARAM_KINDS: frozenset[str] = frozenset({"identifier", "object_pattern", "other", "none"})

# Declarations the resolver follows for each export form.
CHECKED_DECLARATIONS_BY_EXPORT: dict[str, frozenset[str]] = {
    "default": frozenset({"function", "arrow"}),
    "default_reference": frozenset({"arrow"}),
    "named": frozenset({"function", "arrow", "function_expression"}),
    "specifier": frozenset({"arrow", "function_expression"}),
    "none": frozenset(),
}
CHECKED_PARAM_KINDS: frozenset[str] = frozenset({"identifier", "object_pattern"})

SHAPE_KIND_PRIMITIVE: str = "primitive"
SHAPE_KIND_PLAIN: str = "plain"
SHAPE_KIND_FUNCTION: str = "function"
SHAPE_KIND_CLASS: str = "class"
SHAPE_KIND_CONSTRUCTOR: str = "constructor"
SHAPE_KIND_UNION: str = "union"
SHAPE_KIND_INTERSECTION: str = "intersection"
SHAPE_KIND_REF: str = "ref"
SHAPE_KIND_OPAQUE: str = "opaque"
