"""Workspace check orchestration: discover, load, classify, report."""

from __future__ import annotations

import logging
import time
from collections import Counter
from pathlib import Path

from clientbound.checker.discovery import discover_manifest_files
from clientbound.checker.eligibility import is_module_checked
from clientbound.checker.rule import check_module
from clientbound.config import ClientboundConfig, load_config
from clientbound.constants.reporting import DEFAULT_OUTPUT_FORMAT
from clientbound.exceptions import ManifestError
from clientbound.manifest import load_manifest
from clientbound.model import CheckResult, Diagnostic
from clientbound.reporting.sarif_writer import write_sarif_diagnostics
from clientbound.reporting.writer import write_reports

logger = logging.getLogger(__name__)


def check_workspace(
    root: Path,
    *,
    out: Path | None = None,
    config_path: Path | None = None,
    config: ClientboundConfig | None = None,
    output_formats: tuple[str, ...] = (DEFAULT_OUTPUT_FORMAT,),
) -> CheckResult:
    """Check every module described by manifests under *root*."""
    started_at = time.perf_counter()
    root = root.resolve()
    resolved_config = config if config is not None else load_config(root, config_path)
    allowlist = resolved_config.effective_allowlist

    manifest_files = discover_manifest_files(root, resolved_config.manifest_globs, resolved_config.max_file_mb)
    logger.info("Discovered %d manifest file(s) under %s", len(manifest_files), root)

    diagnostics: list[Diagnostic] = []
    warnings: list[str] = []
    checked_modules = 0
    skipped_modules = 0

    for manifest_path in manifest_files:
        try:
            modules = load_manifest(manifest_path)
        except ManifestError as exc:
            warning = f"Skipping manifest {manifest_path}: {exc}"
            logger.warning(warning)
            warnings.append(warning)
            continue

        for module in modules:
            if not is_module_checked(module, skip_test_files=resolved_config.skip_test_files):
                skipped_modules += 1
                continue
            checked_modules += 1
            diagnostics.extend(
                check_module(module, allowlist=allowlist, skip_test_files=resolved_config.skip_test_files)
            )

    result = CheckResult(
        manifests=len(manifest_files),
        checked_modules=checked_modules,
        skipped_modules=skipped_modules,
        diagnostics=tuple(diagnostics),
        counts_by_message=dict(sorted(Counter(d.message_id for d in diagnostics).items())),
        warnings=tuple(warnings),
        duration_seconds=time.perf_counter() - started_at,
    )

    if out is not None:
        if "json" in output_formats:
            write_reports(out, result)
        if "sarif" in output_formats:
            write_sarif_diagnostics(out, list(result.diagnostics))

    logger.info(
        "Checked %d module(s), skipped %d, %d diagnostic(s)",
        checked_modules,
        skipped_modules,
        result.total_diagnostics,
    )
    return result
