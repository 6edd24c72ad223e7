"""Cross-module type aliases."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, TypeAlias

MessageId: TypeAlias = Literal["functionNotServerAction", "invalidProp"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, "JsonValue"]


class Verdict(StrEnum):
    """Per-field classification outcome."""

    SERIALIZABLE = "serializable"
    FUNCTION_NOT_ACTION = "function_not_action"
    INVALID_CLASS = "invalid_class"

    @property
    def is_serializable(self) -> bool:
        return self is Verdict.SERIALIZABLE
