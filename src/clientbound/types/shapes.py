"""Tagged structural descriptions of field types.

Shapes are produced by a type-resolution step (see ``clientbound.manifest``)
and consumed by the classifier. Every shape except ``Alias`` is immutable.
``Alias`` gets its target assigned after construction so that a type alias
may refer to itself; the classifier breaks such cycles by identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Primitive:
    """string, number, boolean, null, undefined and friends."""

    name: str = "unknown"


@dataclass(frozen=True)
class PlainData:
    """Object literal, array or mapping whose members are shapes themselves."""

    members: tuple[TypeShape, ...] = ()
    container: str = "object"


@dataclass(frozen=True)
class Function:
    """A type with one or more call signatures."""

    signature: str = ""


@dataclass(frozen=True)
class ClassInstance:
    """Nominal instance type backed by a class declaration.

    ``name`` is ``None`` when the declaration could not be resolved.
    """

    name: str | None
    callable: bool = False


@dataclass(frozen=True)
class Constructor:
    """A type with construct signatures, e.g. ``typeof MyClass``."""

    name: str | None = None
    callable: bool = False


@dataclass(frozen=True)
class Union:
    """Ordered alternatives; member order is declaration order."""

    members: tuple[TypeShape, ...] = ()


@dataclass(frozen=True)
class Intersection:
    """Combined shapes; member order is declaration order."""

    members: tuple[TypeShape, ...] = ()


@dataclass(frozen=True)
class Opaque:
    """Anything the resolver could not describe more precisely."""

    description: str = ""


@dataclass(eq=False)
class Alias:
    """Named reference to another shape; ``target`` is ``None`` when unresolved."""

    name: str
    target: TypeShape | None = None


TypeShape: TypeAlias = Primitive | PlainData | Function | ClassInstance | Constructor | Union | Intersection | Opaque | Alias
