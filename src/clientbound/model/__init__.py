"""Core data models for clientbound."""

from .entities import (
    CheckResult,
    Diagnostic,
    Entity,
    Field,
    FileContext,
    ModuleDescription,
)

__all__ = [
    "CheckResult",
    "Diagnostic",
    "Entity",
    "Field",
    "FileContext",
    "ModuleDescription",
]
