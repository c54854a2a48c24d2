"""Column specification compiler.

This module turns column specification strings into ColumnDescriptors:
- compile_column: Compile one specification
- ColumnCompiler: Compiler with an injectable path engine and batch support
- CompilationReport: Per-entry outcome of compiling a list of specifications

Compilation runs four phases: grammar decomposition, path compilation,
flag interpretation and descriptor assembly. It keeps no state between
calls and is safe to use from several threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict, Field

from colspec_core.descriptor import ColumnDescriptor, ColumnSource
from colspec_core.errors import (
    InvalidPathError,
    MalformedSpecError,
    PathExpressionError,
    ViewCompilationError,
)
from colspec_core.flags import interpret_flags
from colspec_core.grammar import decompose
from colspec_core.paths import PathHandle, compile_path

logger = structlog.get_logger(__name__)

PathCompiler = Callable[[str], PathHandle]


def compile_column(spec: str, *, path_compiler: PathCompiler = compile_path) -> ColumnDescriptor:
    """Compile one column specification.

    Args:
        spec: Column specification, e.g. ``"AGE:.metadata.creationTimestamp|T"``.
        path_compiler: Field-path engine. Must raise PathExpressionError
            for paths it rejects.

    Returns:
        A new, immutable ColumnDescriptor.

    Raises:
        MalformedSpecError: If the specification does not match the grammar.
        InvalidPathError: If the path engine rejects the path expression.

    Example:
        >>> column = compile_column("NAME:.metadata.name")
        >>> column.name, column.path.expression
        ('NAME', '{.metadata.name}')
    """
    parts = decompose(spec)

    try:
        path = path_compiler(parts.path)
    except PathExpressionError as e:
        raise InvalidPathError(spec, parts.path, e) from e

    return ColumnDescriptor(
        name=parts.name,
        source=ColumnSource.PATH,
        path=path,
        attrs=interpret_flags(parts.flags, spec=spec),
    )


class FailureKind(str, Enum):
    """Why a column specification failed to compile."""

    MALFORMED_SPEC = "malformed_spec"
    INVALID_PATH = "invalid_path"


class ColumnFailure(BaseModel):
    """One column specification that failed to compile.

    Attributes:
        position: Zero-based position of the entry in the input list.
        spec: The specification text.
        kind: Failure category.
        message: User-facing error message.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    position: int = Field(..., ge=0, description="Position in the input list")
    spec: str = Field(..., description="Column specification text")
    kind: FailureKind = Field(..., description="Failure category")
    message: str = Field(..., description="User-facing error message")


class CompilationReport(BaseModel):
    """Outcome of compiling a list of column specifications.

    Attributes:
        view: Name of the view the columns belong to, if any.
        columns: Successfully compiled columns, in input order.
        failures: Failed entries, in input order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    view: str | None = Field(default=None, description="View name")
    columns: list[ColumnDescriptor] = Field(default_factory=list)
    failures: list[ColumnFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every entry compiled."""
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise ViewCompilationError if any entry failed."""
        if self.failures:
            raise ViewCompilationError(self.view, list(self.failures))


class ColumnCompiler:
    """Compile column specifications into ColumnDescriptors.

    Attributes:
        path_compiler: Field-path engine used for the path slot.

    Example:
        >>> compiler = ColumnCompiler()
        >>> report = compiler.compile_all(["NAME", "AGE:.metadata.creationTimestamp|T"])
        >>> [c.name for c in report.columns]
        ['NAME', 'AGE']
    """

    def __init__(self, path_compiler: PathCompiler = compile_path) -> None:
        """Initialize the ColumnCompiler.

        Args:
            path_compiler: Field-path engine. Defaults to the relaxed
                JSONPath engine.
        """
        self.path_compiler = path_compiler

    def compile(self, spec: str) -> ColumnDescriptor:
        """Compile one column specification.

        Raises:
            MalformedSpecError: If the specification does not match the grammar.
            InvalidPathError: If the path engine rejects the path expression.
        """
        return compile_column(spec, path_compiler=self.path_compiler)

    def compile_all(self, specs: Iterable[str], *, view: str | None = None) -> CompilationReport:
        """Compile each specification independently.

        A bad entry is recorded and skipped; it never aborts the others.

        Args:
            specs: Column specifications, in display order.
            view: Optional view name for reporting.

        Returns:
            CompilationReport with compiled columns and per-entry failures.
        """
        columns: list[ColumnDescriptor] = []
        failures: list[ColumnFailure] = []

        for position, spec in enumerate(specs):
            try:
                columns.append(self.compile(spec))
            except MalformedSpecError as e:
                failures.append(
                    ColumnFailure(
                        position=position,
                        spec=spec,
                        kind=FailureKind.MALFORMED_SPEC,
                        message=e.user_message,
                    )
                )
            except InvalidPathError as e:
                failures.append(
                    ColumnFailure(
                        position=position,
                        spec=spec,
                        kind=FailureKind.INVALID_PATH,
                        message=e.user_message,
                    )
                )

        if failures:
            logger.warning(
                "column_compilation_failed",
                view=view,
                failed=len(failures),
                compiled=len(columns),
            )

        return CompilationReport(view=view, columns=columns, failures=failures)
