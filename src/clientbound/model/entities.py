"""Frozen dataclasses describing checked modules and their diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field

from clientbound.types import JsonObject, MessageId, TypeShape


@dataclass(frozen=True)
class Field:
    """A named props member with its resolved shape and declaration site."""

    name: str
    shape: TypeShape
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True)
class FileContext:
    """Source file the checked entity lives in."""

    path: str


@dataclass(frozen=True)
class Entity:
    """A top-level callable declared in a module."""

    name: str
    export: str = "none"
    declaration: str = "function"
    param: str = "identifier"
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True)
class ModuleDescription:
    """One source module as described by a type manifest."""

    path: str
    directive: str | None = None
    entities: tuple[Entity, ...] = ()
    manifest_path: str | None = None


@dataclass(frozen=True)
class Diagnostic:
    """A rendered non-serializable verdict, attributed to the field declaration."""

    rule_id: str
    message_id: MessageId
    prop_name: str
    message: str
    path: str
    entity: str
    line: int | None = None
    column: int | None = None

    def to_dict(self) -> JsonObject:
        return {
            "rule_id": self.rule_id,
            "message_id": self.message_id,
            "prop_name": self.prop_name,
            "message": self.message,
            "path": self.path,
            "entity": self.entity,
            "line": self.line,
            "column": self.column,
        }


@dataclass(frozen=True)
class CheckResult:
    """Aggregate outcome of a workspace check."""

    manifests: int
    checked_modules: int
    skipped_modules: int
    diagnostics: tuple[Diagnostic, ...] = ()
    counts_by_message: dict[str, int] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    duration_seconds: float = 0.0

    @property
    def total_diagnostics(self) -> int:
        return len(self.diagnostics)
