"""Output writers for diagnostics and summary JSON artifacts."""

from __future__ import annotations

from pathlib import Path

from clientbound.constants.reporting import (
    DIAGNOSTICS_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
    SUMMARY_FILENAME,
)
from clientbound.io import write_json_atomic
from clientbound.model import CheckResult
from clientbound.types import JsonObject


def write_reports(out_root: Path, result: CheckResult) -> tuple[Path, Path]:
    """Write diagnostics and summary JSON under *out_root* and return both paths."""
    diagnostics_path = out_root / DIAGNOSTICS_FILENAME
    summary_path = out_root / SUMMARY_FILENAME

    write_json_atomic(
        path=diagnostics_path,
        payload=[diagnostic.to_dict() for diagnostic in result.diagnostics],
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    write_json_atomic(
        path=summary_path,
        payload=build_summary(result),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return diagnostics_path, summary_path


def build_summary(result: CheckResult) -> JsonObject:
    """Build the summary payload for a check result."""
    files_with_diagnostics = sorted({diagnostic.path for diagnostic in result.diagnostics})
    return {
        "schema_version": SCHEMA_VERSION,
        "manifests": result.manifests,
        "checked_modules": result.checked_modules,
        "skipped_modules": result.skipped_modules,
        "total_diagnostics": result.total_diagnostics,
        "counts_by_message": dict(result.counts_by_message),
        "files_with_diagnostics": list(files_with_diagnostics),
        "warnings": list(result.warnings),
    }
