"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from clientbound.model import FileContext


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture workspace path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def component_context() -> FileContext:
    """Context for an ordinary component module."""
    return FileContext(path="app/components/component.tsx")


@pytest.fixture()
def error_context() -> FileContext:
    """Context for an error-boundary module."""
    return FileContext(path="app/error.tsx")
