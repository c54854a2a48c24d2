"""colspec validate command - Validate a views.yaml configuration.

Loads the views file and compiles every column of every view.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from colspec_cli.errors import (
    EXIT_USER_ERROR,
    format_column_failures,
    handle_file_not_found,
    handle_validation_error,
    handle_yaml_error,
)
from colspec_cli.output import error, print_columns, success, warning


@click.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./views.yaml",
    help="Path to views.yaml [default: ./views.yaml]",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Print the compiled columns of every view.",
)
def validate(file_path: str, verbose: bool) -> None:
    """Validate a views.yaml configuration.

    Every column of every view is compiled; each failing entry is
    reported with its view and position.

    Examples:

        colspec validate

        colspec validate --file ~/.config/k9s/views.yaml --verbose
    """
    path = Path(file_path)

    if not path.exists():
        handle_file_not_found(file_path)

    # Import here to avoid heavy imports at CLI startup
    import yaml
    from pydantic import ValidationError as PydanticValidationError

    from colspec_core import ConfigurationError, ViewsConfig, compile_views

    try:
        config = ViewsConfig.from_yaml(path)
    except yaml.YAMLError as e:
        handle_yaml_error(e, file_path)
    except PydanticValidationError as e:
        handle_validation_error(e, file_path)
    except ConfigurationError as e:
        error(escape(e.user_message))
        raise SystemExit(EXIT_USER_ERROR) from None

    if not config.views:
        warning(f"No views defined in {escape(file_path)}")
        return

    reports = compile_views(config)

    failed = False
    for name, report in reports.items():
        if verbose and report.columns:
            print_columns(report.columns, title=name)
        if not report.ok:
            failed = True
            error(f"View '{escape(name)}':\n{format_column_failures(report.failures)}")

    if failed:
        raise SystemExit(EXIT_USER_ERROR)

    total = sum(len(report.columns) for report in reports.values())
    success(f"Configuration valid ({len(reports)} views, {total} columns)")
