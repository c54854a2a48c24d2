"""Shared test fixtures for colspec-cli tests.

Provides CliRunner fixtures and views.yaml helpers for testing
CLI commands.
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

VIEWS_YAML_FILENAME = "views.yaml"


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Reset structlog so a previous `--log-level` run cannot leak a handler."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def valid_views_yaml(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy the valid views.yaml fixture to tmp_path.

    Returns:
        Path to views.yaml in tmp_path.
    """
    dst = tmp_path / VIEWS_YAML_FILENAME
    dst.write_text((fixtures_dir / VIEWS_YAML_FILENAME).read_text())
    return dst


@pytest.fixture
def broken_column_yaml(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy a views.yaml whose pods view has an invalid path column.

    Returns:
        Path to the copied file.
    """
    dst = tmp_path / VIEWS_YAML_FILENAME
    dst.write_text((fixtures_dir / "views_broken_column.yaml").read_text())
    return dst
