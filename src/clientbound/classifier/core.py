"""Recursive serializability classification over type shapes.

Rules, first match wins:

1. A shape with a call signature, directly or on any union/intersection
   branch, is ``FUNCTION_NOT_ACTION`` unless the prop name follows the
   Server Action convention or is ``reset`` inside an error boundary. An
   excepted name clears the whole shape.
2. Class instances and constructors are ``INVALID_CLASS`` unless their
   nominal name is allowlisted.
3. Composite shapes (union, intersection, plain data) report the first
   disqualifying member in declaration order. Plain-data members are
   classified on their own, so a callable member is judged by rule 1 there.
   Everything else is ``SERIALIZABLE``.

The classifier never raises: malformed or unresolved shapes are serializable.
"""

from __future__ import annotations

from collections.abc import Collection

from clientbound.classifier.builtins import is_allowlisted
from clientbound.classifier.naming import is_excepted_function
from clientbound.constants.builtins import SERIALIZABLE_BUILT_INS
from clientbound.model import Field, FileContext
from clientbound.types import (
    Alias,
    ClassInstance,
    Constructor,
    Function,
    Intersection,
    PlainData,
    TypeShape,
    Union,
    Verdict,
)


def classify(
    field: Field,
    context: FileContext,
    *,
    allowlist: Collection[str] = SERIALIZABLE_BUILT_INS,
) -> Verdict:
    """Classify a props field for the client boundary."""
    return classify_shape(field.shape, field.name, context, allowlist=allowlist)


def classify_shape(
    shape: TypeShape,
    prop_name: str,
    context: FileContext,
    *,
    allowlist: Collection[str] = SERIALIZABLE_BUILT_INS,
) -> Verdict:
    """Classify a bare shape as if it were declared under *prop_name*."""
    return _classify(shape, prop_name, context, allowlist, set())


def _classify(
    shape: object,
    prop_name: str,
    context: FileContext,
    allowlist: Collection[str],
    active: set[int],
) -> Verdict:
    key = id(shape)
    if key in active:
        return Verdict.SERIALIZABLE

    active.add(key)
    try:
        return _dispatch(shape, prop_name, context, allowlist, active)
    finally:
        active.discard(key)


def _dispatch(
    shape: object,
    prop_name: str,
    context: FileContext,
    allowlist: Collection[str],
    active: set[int],
) -> Verdict:
    if isinstance(shape, Alias):
        if shape.target is None:
            return Verdict.SERIALIZABLE
        return _classify(shape.target, prop_name, context, allowlist, active)

    # Call signatures anywhere across union/intersection branches take priority.
    if _has_call_signature(shape, set()):
        if is_excepted_function(prop_name, context):
            return Verdict.SERIALIZABLE
        return Verdict.FUNCTION_NOT_ACTION

    if isinstance(shape, ClassInstance):
        # No resolvable declaration behind the instance type.
        if not shape.name:
            return Verdict.SERIALIZABLE
        return Verdict.SERIALIZABLE if is_allowlisted(shape.name, allowlist) else Verdict.INVALID_CLASS

    if isinstance(shape, Constructor):
        return Verdict.SERIALIZABLE if is_allowlisted(shape.name, allowlist) else Verdict.INVALID_CLASS

    if isinstance(shape, (Union, Intersection, PlainData)):
        for member in shape.members:
            verdict = _classify(member, prop_name, context, allowlist, active)
            if not verdict.is_serializable:
                return verdict
        return Verdict.SERIALIZABLE

    return Verdict.SERIALIZABLE


def _has_call_signature(shape: object, path: set[int]) -> bool:
    """Return True when the shape, or any union/intersection branch of it, is callable."""
    key = id(shape)
    if key in path:
        return False
    if isinstance(shape, Function):
        return True
    if isinstance(shape, (ClassInstance, Constructor)):
        return shape.callable

    path.add(key)
    try:
        if isinstance(shape, Alias):
            return shape.target is not None and _has_call_signature(shape.target, path)
        if isinstance(shape, (Union, Intersection)):
            return any(_has_call_signature(member, path) for member in shape.members)
        return False
    finally:
        path.discard(key)
