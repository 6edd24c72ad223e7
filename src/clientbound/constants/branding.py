"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "CLIENTBOUND"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ CLIENTBOUND",
    "     // serializable props at the \"use client\" boundary",
)
CHECK_SUMMARY_TITLE: str = "Check summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} props checker"))
