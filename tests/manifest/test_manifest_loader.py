"""Tests for type manifest loading and shape construction."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from clientbound.exceptions import ManifestError
from clientbound.manifest import build_shape, load_manifest, parse_manifest
from clientbound.types import (
    Alias,
    ClassInstance,
    Constructor,
    Function,
    Intersection,
    Opaque,
    PlainData,
    Primitive,
    Union,
)


def _module(**overrides: Any) -> dict[str, Any]:
    module: dict[str, Any] = {"path": "app/page.tsx", "directive": "use client", "entities": []}
    module.update(overrides)
    return module


def test_load_manifest_reads_yaml(tmp_path: Path) -> None:
    manifest = tmp_path / "page.shapes.yaml"
    manifest.write_text(
        "\n".join(
            [
                "modules:",
                "  - path: app/page.tsx",
                "    directive: use client",
                "    entities:",
                "      - name: Page",
                "        export: default",
                "        declaration: function",
                "        fields:",
                "          - {name: title, line: 2, column: 3, type: {kind: primitive, name: string}}",
                "          - {name: onClick, type: function}",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    (module,) = load_manifest(manifest)

    assert module.path == "app/page.tsx"
    assert module.directive == "use client"
    assert module.manifest_path == str(manifest)
    (entity,) = module.entities
    assert entity.name == "Page"
    assert entity.param == "identifier"
    assert [field.name for field in entity.fields] == ["title", "onClick"]
    assert entity.fields[0].shape == Primitive("string")
    assert (entity.fields[0].line, entity.fields[0].column) == (2, 3)
    assert isinstance(entity.fields[1].shape, Function)
    assert entity.fields[1].line is None


def test_load_manifest_reads_json(tmp_path: Path) -> None:
    manifest = tmp_path / "page.shapes.json"
    manifest.write_text('{"modules": [{"path": "a.tsx", "directive": null}]}', encoding="utf-8")

    (module,) = load_manifest(manifest)

    assert module.directive is None
    assert module.entities == ()


def test_load_manifest_rejects_invalid_yaml(tmp_path: Path) -> None:
    manifest = tmp_path / "bad.shapes.yaml"
    manifest.write_text("modules: [unclosed\n", encoding="utf-8")

    with pytest.raises(ManifestError, match="Invalid manifest"):
        load_manifest(manifest)


def test_load_manifest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Cannot read"):
        load_manifest(tmp_path / "missing.shapes.yaml")


@pytest.mark.parametrize(
    ("document", "expected_match"),
    [
        (["not", "a", "mapping"], "must be a mapping"),
        ({}, "'modules' must be a list"),
        ({"modules": ["x"]}, r"modules\[0\] must be a mapping"),
        ({"modules": [{"directive": "use client"}]}, "'path'"),
        ({"modules": [_module(extra=1)]}, "unknown keys"),
        ({"modules": [_module(entities=[{"export": "default"}])]}, "'name'"),
        ({"modules": [_module(entities=[{"name": "A", "export": "sideways"}])]}, "'export'"),
        ({"modules": [_module(entities=[{"name": "A", "param": 3}])]}, "'param'"),
        ({"modules": [_module(entities=[{"name": "A", "fields": [{"type": "function"}]}])]}, "'name'"),
        ({"modules": [_module(entities=[{"name": "A", "fields": [{"name": "x", "line": 0}]}])]}, "'line'"),
        ({"modules": [_module(entities=[{"name": "A", "fields": [{"name": "x", "line": True}]}])]}, "'line'"),
        ({"modules": [_module(aliases=["Tree"])]}, "'aliases'"),
    ],
    ids=[
        "not-mapping",
        "missing-modules",
        "module-not-mapping",
        "missing-path",
        "unknown-module-key",
        "entity-without-name",
        "bad-export",
        "bad-param",
        "field-without-name",
        "zero-line",
        "bool-line",
        "aliases-not-mapping",
    ],
)
def test_parse_manifest_rejects_structural_errors(document: Any, expected_match: str) -> None:
    with pytest.raises(ManifestError, match=expected_match):
        parse_manifest(document, source_path="test.shapes.yaml")


def test_build_shape_kinds() -> None:
    assert build_shape({"kind": "primitive", "name": "number"}) == Primitive("number")
    assert build_shape("function") == Function()
    assert build_shape({"kind": "class", "name": "Date"}) == ClassInstance("Date")
    assert build_shape({"kind": "class"}) == ClassInstance(None)
    assert build_shape({"kind": "constructor", "name": "Foo", "callable": True}) == Constructor("Foo", callable=True)
    assert build_shape({"kind": "union", "members": ["function", "primitive"]}) == Union(
        members=(Function(), Primitive())
    )
    assert build_shape({"kind": "intersection", "members": []}) == Intersection()


def test_build_shape_plain_members_from_mapping() -> None:
    shape = build_shape({"kind": "plain", "members": {"name": "primitive", "onClick": "function"}})

    assert shape == PlainData(members=(Primitive(), Function()))


@pytest.mark.parametrize(
    "raw",
    [None, 42, ["function"], {"kind": "wormhole"}, {"no_kind": True}, {"kind": "opaque", "description": "any"}],
    ids=["none", "int", "list", "unknown-kind", "missing-kind", "explicit-opaque"],
)
def test_build_shape_falls_back_to_opaque(raw: Any) -> None:
    assert isinstance(build_shape(raw), Opaque)


def test_callable_flag_must_be_boolean_true() -> None:
    assert build_shape({"kind": "class", "name": "X", "callable": "yes"}) == ClassInstance("X")


def test_ref_without_name_stays_unresolved() -> None:
    (module,) = parse_manifest(
        {
            "modules": [
                _module(
                    aliases={
                        "Tree": {
                            "kind": "union",
                            "members": ["primitive", {"kind": "plain", "members": [{"kind": "ref", "name": "Tree"}]}],
                        }
                    },
                    entities=[{"name": "A", "export": "default", "fields": [{"name": "t", "type": "ref"}]}],
                )
            ]
        }
    )
    # A bare "ref" without a name cannot resolve.
    unresolved = module.entities[0].fields[0].shape
    assert isinstance(unresolved, Alias)
    assert unresolved.target is None


def test_alias_self_reference_builds_cycle() -> None:
    (module,) = parse_manifest(
        {
            "modules": [
                _module(
                    aliases={"Loop": {"kind": "union", "members": [{"kind": "ref", "name": "Loop"}]}},
                    entities=[
                        {"name": "A", "export": "default", "fields": [{"name": "l", "type": {"kind": "ref", "name": "Loop"}}]}
                    ],
                )
            ]
        }
    )

    loop = module.entities[0].fields[0].shape
    assert isinstance(loop, Alias)
    assert isinstance(loop.target, Union)
    assert loop.target.members[0] is loop
