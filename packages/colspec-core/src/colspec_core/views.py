"""Custom resource view configuration.

This module defines the views.yaml models and their compilation:
- ViewSetting: Column specifications (and optional sort column) of one view
- ViewsConfig: Root model mapping resource names to view settings
- compile_views: Compile every view, aggregating failures per entry

Example views.yaml:

    views:
      v1/pods:
        sortColumn: AGE:desc
        columns:
          - NAME
          - AGE:.metadata.creationTimestamp|T
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field

from colspec_core.compiler import ColumnCompiler, CompilationReport
from colspec_core.errors import ConfigurationError
from colspec_core.observability import span

logger = structlog.get_logger(__name__)

# <column>[:asc|desc]
SORT_COLUMN_PATTERN = r"^[\w\s%/-]+(:(asc|desc))?$"


class ViewSetting(BaseModel):
    """Column layout of one resource view.

    Attributes:
        columns: Column specifications, in display order.
        sort_column: Optional default sort, ``<column>[:asc|desc]``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    columns: list[str] = Field(
        ...,
        min_length=1,
        description="Column specifications in display order",
    )
    sort_column: str | None = Field(
        default=None,
        alias="sortColumn",
        pattern=SORT_COLUMN_PATTERN,
        description="Default sort column, optionally suffixed with :asc or :desc",
    )


class ViewsConfig(BaseModel):
    """Root model for views.yaml.

    Attributes:
        views: Mapping of resource name (e.g. ``v1/pods``) to its view setting.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    views: dict[str, ViewSetting] = Field(
        default_factory=dict,
        description="Resource name to view setting",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ViewsConfig:
        """Load and validate ViewsConfig from a YAML file.

        Args:
            path: Path to views.yaml.

        Returns:
            Validated ViewsConfig instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            ConfigurationError: If the document is not a mapping.
            pydantic.ValidationError: If schema validation fails.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data: Any = yaml.safe_load(f)

        # An empty file declares no views
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Expected a mapping at the top level",
                file_path=str(path),
                internal_details=f"got {type(data).__name__}",
            )

        return cls.model_validate(data)


def compile_views(
    config: ViewsConfig,
    compiler: ColumnCompiler | None = None,
) -> dict[str, CompilationReport]:
    """Compile the columns of every view in a configuration.

    Each view, and each column within it, is compiled independently so one
    bad entry never hides the others.

    Args:
        config: Loaded views configuration.
        compiler: Column compiler to use. Defaults to a new ColumnCompiler.

    Returns:
        Mapping of view name to its CompilationReport, in configuration order.
    """
    compiler = compiler or ColumnCompiler()
    reports: dict[str, CompilationReport] = {}

    for name, setting in config.views.items():
        with span("compile_view", attributes={"view": name, "columns": len(setting.columns)}):
            reports[name] = compiler.compile_all(setting.columns, view=name)

    failed = [name for name, report in reports.items() if not report.ok]
    logger.info("views_compiled", views=len(reports), failed_views=failed)
    return reports
