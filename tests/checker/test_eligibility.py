"""Tests for module and entity eligibility."""

from __future__ import annotations

import pytest

from clientbound.checker.eligibility import (
    has_use_client_directive,
    is_checked_entity,
    is_module_checked,
    is_test_file,
)
from clientbound.model import Entity, ModuleDescription


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("component.test.tsx", True),
        ("component.spec.ts", True),
        ("component.test.js", True),
        ("component.spec.jsx", True),
        ("component.tsx", False),
        ("testing.tsx", False),
        ("component.test.css", False),
        ("spec/component.tsx", False),
    ],
)
def test_is_test_file(path: str, expected: bool) -> None:
    assert is_test_file(path) is expected


def test_use_client_directive_must_match_exactly() -> None:
    assert has_use_client_directive(ModuleDescription(path="a.tsx", directive="use client")) is True
    assert has_use_client_directive(ModuleDescription(path="a.tsx", directive="use  client")) is False
    assert has_use_client_directive(ModuleDescription(path="a.tsx", directive="Use Client")) is False
    assert has_use_client_directive(ModuleDescription(path="a.tsx")) is False


def test_is_module_checked_can_include_test_files() -> None:
    module = ModuleDescription(path="a.test.tsx", directive="use client")

    assert is_module_checked(module) is False
    assert is_module_checked(module, skip_test_files=False) is True


@pytest.mark.parametrize(
    ("export", "declaration", "expected"),
    [
        ("default", "function", True),
        ("default", "arrow", True),
        ("default", "function_expression", False),
        ("default_reference", "arrow", True),
        ("default_reference", "function_expression", False),
        ("default_reference", "function", False),
        ("named", "function", True),
        ("named", "arrow", True),
        ("named", "function_expression", True),
        ("named", "other", False),
        ("specifier", "arrow", True),
        ("specifier", "function_expression", True),
        ("specifier", "function", False),
        ("none", "function", False),
        ("none", "arrow", False),
    ],
)
def test_checked_entity_by_export_and_declaration(export: str, declaration: str, expected: bool) -> None:
    entity = Entity(name="Component", export=export, declaration=declaration, param="identifier")

    assert is_checked_entity(entity) is expected


@pytest.mark.parametrize(
    ("param", "expected"),
    [("identifier", True), ("object_pattern", True), ("other", False), ("none", False)],
)
def test_checked_entity_requires_props_parameter(param: str, expected: bool) -> None:
    entity = Entity(name="Component", export="default", declaration="function", param=param)

    assert is_checked_entity(entity) is expected
