"""SARIF 2.1.0 export writer for diagnostics."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from clientbound import __version__
from clientbound.constants.reporting import (
    RULE_DESCRIPTION,
    RULE_ID,
    SARIF_DIAGNOSTICS_FILENAME,
    SARIF_LEVEL,
    SARIF_SCHEMA_URI,
    SARIF_TOOL_NAME,
    SARIF_VERSION,
)
from clientbound.io import write_text_atomic
from clientbound.model import Diagnostic


def _build_sarif_result(diagnostic: Diagnostic) -> dict[str, Any]:
    """Map a single Diagnostic to a SARIF result object."""
    result: dict[str, Any] = {
        "ruleId": diagnostic.rule_id,
        "level": SARIF_LEVEL,
        "message": {"text": diagnostic.message},
        "locations": [
            {
                "physicalLocation": {
                    "artifactLocation": {"uri": diagnostic.path},
                },
            },
        ],
        "properties": {
            "messageId": diagnostic.message_id,
            "propName": diagnostic.prop_name,
            "entity": diagnostic.entity,
        },
    }

    if diagnostic.line is not None:
        region: dict[str, int] = {"startLine": diagnostic.line}
        if diagnostic.column is not None:
            region["startColumn"] = diagnostic.column
        result["locations"][0]["physicalLocation"]["region"] = region

    return result


def build_sarif_envelope(diagnostics: list[Diagnostic]) -> dict[str, Any]:
    """Build a complete SARIF 2.1.0 document from diagnostics."""
    return {
        "$schema": SARIF_SCHEMA_URI,
        "version": SARIF_VERSION,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": SARIF_TOOL_NAME,
                        "version": __version__,
                        "rules": [
                            {
                                "id": RULE_ID,
                                "shortDescription": {"text": RULE_DESCRIPTION},
                            }
                        ],
                    },
                },
                "results": [_build_sarif_result(d) for d in diagnostics],
            }
        ],
    }


def write_sarif_diagnostics(out_root: Path, diagnostics: list[Diagnostic]) -> Path:
    """Write diagnostics.sarif under the output root and return the path."""
    sarif_path = out_root / SARIF_DIAGNOSTICS_FILENAME
    write_text_atomic(
        path=sarif_path,
        content=json.dumps(build_sarif_envelope(diagnostics), indent=2) + "\n",
        temp_prefix=".sarif_tmp_",
        temp_suffix=".sarif",
    )
    return sarif_path
