"""Constants for rule messages, report file names and stdout formatting."""

from __future__ import annotations

RULE_ID: str = "props-must-be-serializable"
RULE_DESCRIPTION: str = 'Enforce serializable props in Next.js "use client" components'

MESSAGE_FUNCTION_NOT_ACTION: str = "functionNotServerAction"
MESSAGE_INVALID_PROP: str = "invalidProp"

MESSAGE_TEMPLATES: dict[str, str] = {
    MESSAGE_FUNCTION_NOT_ACTION: (
        'Props must be serializable for components in the "use client" entry file. '
        '"{prop_name}" is a function that\'s not a Server Action.\n'
        'Rename "{prop_name}" either to "action" or have its name end with "Action" '
        'e.g. "{prop_name}Action" to indicate it is a Server Action.'
    ),
    MESSAGE_INVALID_PROP: (
        'Props must be serializable for components in the "use client" entry file, "{prop_name}" is invalid.'
    ),
}

DIAGNOSTICS_FILENAME: str = "diagnostics.json"
SUMMARY_FILENAME: str = "summary.json"
SARIF_DIAGNOSTICS_FILENAME: str = "diagnostics.sarif"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "sarif"})
DEFAULT_OUTPUT_FORMAT: str = "json"

SARIF_VERSION: str = "2.1.0"
SARIF_SCHEMA_URI: str = "https://docs.oasis-open.org/sarif/sarif/v2.1.0/cos02/schemas/sarif-schema-2.1.0.json"
SARIF_TOOL_NAME: str = "CLIENTBOUND"
SARIF_LEVEL: str = "error"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

MESSAGE_COLORS: dict[str, str] = {
    MESSAGE_FUNCTION_NOT_ACTION: ANSI_RED,
    MESSAGE_INVALID_PROP: ANSI_YELLOW,
}
