"""CLI entrypoint for the clientbound checker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from clientbound import __version__
from clientbound.checker import check_workspace
from clientbound.config import load_config
from clientbound.constants.branding import CLI_DESCRIPTION
from clientbound.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from clientbound.exceptions import ClientboundError, ConfigError
from clientbound.reporting.stdout import StdoutReporter


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="clientbound",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check type manifests for non-serializable props")
    check.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    check.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory root (no files written if omitted)",
    )
    check.add_argument("-c", "--config", type=Path, help="Explicit config file")
    check.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Comma-separated output formats: json, sarif (default: json)",
    )
    check.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    check.add_argument("--no-color", action="store_true", help="Disable colored output")
    check.add_argument("-v", "--verbose", action="store_true", help="Show diagnostics about the run itself")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without checking")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "check":
        parser.error(f"Unsupported command: {args.command}")

    output_formats = _parse_output_formats(args.output_format)
    if output_formats is None:
        return 2

    try:
        result = check_workspace(
            args.root,
            out=args.output_dir,
            config_path=args.config,
            output_formats=output_formats,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ClientboundError as exc:
        print(f"Checker error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(result, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return 1 if result.total_diagnostics else 0


def _parse_output_formats(raw: str) -> tuple[str, ...] | None:
    """Split and validate ``--output-format``; report problems on stderr."""
    raw_tokens = raw.split(",")
    output_formats = tuple(fmt for fmt in (t.strip() for t in raw_tokens) if fmt)
    if not output_formats or len(output_formats) != len(raw_tokens):
        print(
            "Configuration error: --output-format contains empty or malformed tokens",
            file=sys.stderr,
        )
        return None
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        print(
            f"Configuration error: unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
            file=sys.stderr,
        )
        return None
    return output_formats


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Load the config and report whether it is valid."""
    try:
        load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
