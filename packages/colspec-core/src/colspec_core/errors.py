"""Custom exception hierarchy for colspec-core.

This module defines the exception classes used throughout colspec-runtime:
- ColspecError: Base exception for all colspec-related errors
- MalformedSpecError: Raised when a column specification cannot be decomposed
- PathExpressionError: Raised by the field-path engine for a rejected path
- InvalidPathError: Raised when compilation aborts on a rejected path
- ConfigurationError: Raised when a views configuration file is invalid
- ViewCompilationError: Raised when one or more columns of a view failed

User-facing messages are safe to display. Technical details are logged
internally via structlog and never attached to the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from colspec_core.compiler import ColumnFailure

logger = structlog.get_logger(__name__)


class ColspecError(Exception):
    """Base exception for colspec-runtime.

    All colspec exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed to the user.

    Example:
        >>> raise ColspecError(
        ...     "Column definition invalid",
        ...     internal_details="regex failed on 'AGE:|T' at offset 4"
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ColspecError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "colspec_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class MalformedSpecError(ColspecError):
    """Raised when a column specification does not match the column grammar.

    The offending string is kept verbatim so callers can surface it.

    Attributes:
        spec: The column specification that failed to decompose.

    Example:
        >>> raise MalformedSpecError("***not-a-spec***")
        # User sees: "invalid column definition '***not-a-spec***'"
    """

    def __init__(self, spec: str) -> None:
        """Initialize MalformedSpecError.

        Args:
            spec: The column specification text.
        """
        super().__init__(f"invalid column definition {spec!r}")
        self.spec = spec


class PathExpressionError(ColspecError):
    """Raised by the field-path engine when a path expression is rejected.

    Attributes:
        path: The raw path expression.
        reason: Engine explanation of the rejection.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize PathExpressionError.

        Args:
            path: The raw path expression.
            reason: Engine explanation of the rejection.
        """
        super().__init__(f"invalid path expression {path!r}: {reason}")
        self.path = path
        self.reason = reason


class InvalidPathError(ColspecError):
    """Raised when the path of a column specification is rejected.

    Wraps the path engine error without rewording it.

    Attributes:
        spec: The column specification being compiled.
        path: The decomposed path expression.
        cause: The underlying path engine error.

    Example:
        >>> try:
        ...     compile_column("NAME:$invalid[[path")
        ... except InvalidPathError as e:
        ...     print(e.cause)
    """

    def __init__(self, spec: str, path: str, cause: Exception) -> None:
        """Initialize InvalidPathError.

        Args:
            spec: The column specification being compiled.
            path: The decomposed path expression.
            cause: The underlying path engine error.
        """
        super().__init__(
            f"column {spec!r}: {cause}",
            internal_details=f"path={path!r} engine_error={cause.__class__.__name__}",
        )
        self.spec = spec
        self.path = path
        self.cause = cause


class ConfigurationError(ColspecError):
    """Raised when a views configuration file cannot be loaded.

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the invalid field (e.g., "views.v1/pods").

    Example:
        >>> raise ConfigurationError(
        ...     "Expected a mapping at the top level",
        ...     file_path="views.yaml",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ConfigurationError with context.

        Args:
            user_message: Safe message to display to the user.
            file_path: Path to the configuration file (optional).
            field_path: Dot-separated path to the field (optional).
            internal_details: Technical details for internal logging only.
        """
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path


class ViewCompilationError(ColspecError):
    """Raised when one or more column specifications of a view failed.

    Attributes:
        view: Name of the view (may be None for an anonymous column list).
        failures: Per-entry failures, in input order.
    """

    def __init__(self, view: str | None, failures: list[ColumnFailure]) -> None:
        """Initialize ViewCompilationError.

        Args:
            view: Name of the view.
            failures: Per-entry failures, in input order.
        """
        target = f"view '{view}'" if view else "column list"
        count = len(failures)
        noun = "column" if count == 1 else "columns"
        super().__init__(f"{count} {noun} failed to compile in {target}")
        self.view = view
        self.failures = failures
