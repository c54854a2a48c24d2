"""CLI entry point for colspec.

This module defines the main CLI group using the LazyGroup pattern
so `colspec --help` does not import the compiler stack.
"""

from __future__ import annotations

import importlib

import click
import rich_click as rclick

from colspec_cli import __version__
from colspec_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


# Command name -> "module.attribute", imported on first use
LAZY_COMMANDS = {
    "compile": "colspec_cli.commands.compile.compile_cmd",
    "validate": "colspec_cli.commands.validate.validate",
}


class LazyGroup(rclick.RichGroup):
    """Rich-click group resolving LAZY_COMMANDS on demand."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(LAZY_COMMANDS)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        target = LAZY_COMMANDS.get(cmd_name)
        if target is None:
            return None
        module_name, attr_name = target.rsplit(".", 1)
        return getattr(importlib.import_module(module_name), attr_name)  # type: ignore[no-any-return]


def _configure_logging(ctx: click.Context, param: click.Parameter, value: str) -> str:
    from colspec_core.observability import configure_logging

    configure_logging(log_level=value, json_format=False, add_timestamp=False)
    return value


@click.command(cls=LazyGroup)
@click.version_option(version=__version__, prog_name="colspec")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Minimum level of diagnostics written to stderr.",
    expose_value=False,
    callback=_configure_logging,
)
def cli() -> None:
    """colspec - Column specification compiler.

    Compile `NAME:.path|FLAGS` column definitions into column descriptors.

    **Getting Started:**

    - `colspec compile "AGE:.metadata.creationTimestamp|T"` - Compile columns
    - `colspec validate -f views.yaml` - Check every column of a views file
    """


if __name__ == "__main__":
    cli()
