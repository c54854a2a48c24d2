"""Shared pytest fixtures for colspec-core tests.

This module provides common fixtures used across unit and integration tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    This fixture ensures structlog outputs to stdout so that capsys
    can capture the output in tests, whatever configuration a previous
    test left behind.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def pod() -> dict[str, Any]:
    """Return a trimmed pod resource.

    Returns:
        Dictionary shaped like a Kubernetes pod object.
    """
    return {
        "metadata": {
            "name": "nginx-7c5ddbdf54-x2x7q",
            "namespace": "default",
            "creationTimestamp": "2024-05-01T10:00:00Z",
            "labels": {"app": "nginx"},
        },
        "spec": {
            "nodeName": "worker-1",
            "containers": [
                {"name": "nginx", "image": "nginx:1.25"},
                {"name": "sidecar", "image": "busybox:1.36"},
            ],
        },
        "status": {
            "phase": "Running",
            "podIP": "10.0.0.12",
        },
    }


@pytest.fixture
def sample_views_yaml() -> dict[str, Any]:
    """Return a valid views.yaml configuration.

    Returns:
        Dictionary representing a valid views.yaml structure.
    """
    return {
        "views": {
            "v1/pods": {
                "sortColumn": "AGE:desc",
                "columns": [
                    "NAME",
                    "NODE:.spec.nodeName|W",
                    "AGE:.metadata.creationTimestamp|T",
                ],
            },
            "v1/services": {
                "columns": [
                    "NAME:.metadata.name",
                    "TYPE:.spec.type|S",
                ],
            },
        },
    }


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def tmp_views_file(tmp_path: Path, sample_views_yaml: dict[str, Any]) -> Path:
    """Write sample_views_yaml to a temporary views.yaml.

    Returns:
        Path to the written file.
    """
    import yaml

    views_file = tmp_path / "views.yaml"
    views_file.write_text(yaml.dump(sample_views_yaml))
    return views_file
