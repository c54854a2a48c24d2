"""colspec compile command - Compile column specifications.

Each SPEC is compiled independently; failures are reported per entry.
"""

from __future__ import annotations

import click

from colspec_cli.errors import EXIT_USER_ERROR, format_column_failures
from colspec_cli.output import error, print_columns, print_json


@click.command("compile")
@click.argument("specs", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print descriptors as JSON instead of a table.",
)
def compile_cmd(specs: tuple[str, ...], as_json: bool) -> None:
    """Compile one or more column specifications.

    Examples:

        colspec compile NAME:.metadata.name

        colspec compile "AGE:.metadata.creationTimestamp|T" "CPU:.status.cpu|N"

        colspec compile --json "NAME|W"
    """
    # Import here to avoid heavy imports at CLI startup
    from colspec_core import ColumnCompiler

    report = ColumnCompiler().compile_all(specs)

    if as_json:
        print_json(
            {
                "columns": [column.model_dump(mode="json") for column in report.columns],
                "failures": [failure.model_dump(mode="json") for failure in report.failures],
            }
        )
    elif report.columns:
        print_columns(report.columns)

    if not report.ok:
        error(f"Compilation failed:\n{format_column_failures(report.failures)}")
        raise SystemExit(EXIT_USER_ERROR)
