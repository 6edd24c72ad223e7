"""Human-readable stdout reporter for check results."""

from __future__ import annotations

from clientbound.constants.branding import ASCII_LOGO_LINES, CHECK_SUMMARY_TITLE
from clientbound.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET, MESSAGE_COLORS
from clientbound.model import CheckResult, Diagnostic


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _location(diagnostic: Diagnostic) -> str:
    location = diagnostic.path
    if diagnostic.line is not None:
        location = f"{location}:{diagnostic.line}"
        if diagnostic.column is not None:
            location = f"{location}:{diagnostic.column}"
    return location


class StdoutReporter:
    """Formats check results as human-readable stdout output."""

    def __init__(self, result: CheckResult, *, color: bool = True, verbose: bool = False) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_diagnostics()]
        if self._verbose:
            sections.append(self._render_verbose())
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38

        total = str(r.total_diagnostics)
        if self._color:
            total = _colorize(total, ANSI_RED if r.total_diagnostics else ANSI_GREEN)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {CHECK_SUMMARY_TITLE}",
            sep,
            "",
            f"  Modules      {r.checked_modules} checked / {r.skipped_modules} skipped",
            f"  Diagnostics  {total}",
        ]
        if r.counts_by_message:
            breakdown = ", ".join(f"{message_id}={count}" for message_id, count in sorted(r.counts_by_message.items()))
            lines.append(f"  By message   {breakdown}")
        if r.warnings:
            lines.append(f"  Warnings     {len(r.warnings)}")
        lines.append("")
        return "\n".join(lines)

    def _render_diagnostics(self) -> str:
        lines: list[str] = []
        for diagnostic in self._result.diagnostics:
            message_id = diagnostic.message_id
            if self._color:
                message_id = _colorize(message_id, MESSAGE_COLORS.get(message_id, ""))
            lines.append(f"  {_location(diagnostic)}  {message_id}  {diagnostic.entity}.{diagnostic.prop_name}")
            for message_line in diagnostic.message.splitlines():
                lines.append(f"      {message_line}")
        return "\n".join(lines)

    def _render_verbose(self) -> str:
        r = self._result
        lines = [f"  Manifests    {r.manifests}", f"  Duration     {r.duration_seconds:.3f}s"]
        lines.extend(f"  warning: {warning}" for warning in r.warnings)
        text = "\n".join(lines)
        return _colorize(text, ANSI_DIM) if self._color else text
