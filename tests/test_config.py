"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from clientbound.config import ClientboundConfig, load_config
from clientbound.constants.builtins import SERIALIZABLE_BUILT_INS
from clientbound.constants.config import DEFAULT_MANIFEST_GLOBS
from clientbound.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == ClientboundConfig()
    assert loaded.manifest_globs == DEFAULT_MANIFEST_GLOBS
    assert loaded.skip_test_files is True
    assert loaded.max_file_mb > 0


def test_load_config_explicit_missing_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "clientbound.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == ClientboundConfig()


def test_load_config_reads_values(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text(
        "\n".join(
            [
                "manifest_globs:",
                "  - 'build/**/*.shapes.json'",
                "extra_serializable_types:",
                "  - ' Decimal '",
                "  - Decimal",
                "  - Temporal.Instant",
                "skip_test_files: false",
                "max_file_mb: 5",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path, config_path)

    assert loaded.manifest_globs == ("build/**/*.shapes.json",)
    assert loaded.extra_serializable_types == ("Decimal", "Temporal.Instant")
    assert loaded.skip_test_files is False
    assert loaded.max_file_mb == 5


def test_effective_allowlist_merges_extras() -> None:
    config = ClientboundConfig(extra_serializable_types=("Decimal",))

    assert "Decimal" in config.effective_allowlist
    assert SERIALIZABLE_BUILT_INS <= config.effective_allowlist
    assert ClientboundConfig().effective_allowlist == SERIALIZABLE_BUILT_INS


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- a\n- b\n", "must be a YAML mapping"),
        ("max_file_mb: true\n", "max_file_mb"),
        ("max_file_mb: 0\n", "max_file_mb"),
        ("skip_test_files: 1\n", "skip_test_files"),
        ("manifest_globs: '**/*.json'\n", "manifest_globs"),
        ("manifest_globs: []\n", "at least one pattern"),
        ("extra_serializable_types: [1, 2]\n", "extra_serializable_types"),
        ("mainfest_globs: []\n", "did you mean 'manifest_globs'"),
        ("colour: red\n", "'colour'"),
        ("key: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "not-mapping",
        "bool-max-file",
        "zero-max-file",
        "int-skip-tests",
        "string-globs",
        "empty-globs",
        "non-string-types",
        "typo-suggestion",
        "unknown-key",
        "invalid-yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "clientbound.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)
