"""Naming conventions recognized at the client boundary."""

from __future__ import annotations

import re

ACTION_PROP_NAME: str = "action"
ACTION_PROP_SUFFIX: str = "Action"

RESET_PROP_NAME: str = "reset"
ERROR_BOUNDARY_PATH_PATTERN: re.Pattern[str] = re.compile(r"[\\/](global-)?error\.tsx?$")

TEST_FILE_PATTERN: re.Pattern[str] = re.compile(r"\.(test|spec)\.[jt]sx?$")

USE_CLIENT_DIRECTIVE: str = "use client"
