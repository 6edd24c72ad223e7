"""Report writers and terminal output."""

from .sarif_writer import build_sarif_envelope, write_sarif_diagnostics
from .stdout import StdoutReporter
from .writer import build_summary, write_reports

__all__ = [
    "StdoutReporter",
    "build_sarif_envelope",
    "build_summary",
    "write_reports",
    "write_sarif_diagnostics",
]
