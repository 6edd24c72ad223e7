"""Resolver and workspace checker for "use client" modules."""

from .orchestrator import check_workspace
from .rule import check_entity, check_module, render_message

__all__ = ["check_entity", "check_module", "check_workspace", "render_message"]
