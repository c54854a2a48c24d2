"""Field-path resolution for column specifications.

Accepts the relaxed shorthand users write in column definitions
(``name1.name2``, ``.name1.name2``, ``{name1.name2}`` or ``{.name1.name2}``),
normalizes it to ``{.name1.name2}`` and compiles the body with jsonpath-ng
(extended parser, so filters such as ``[?(@.type=="Ready")]`` work).

An empty path is passed through: the handle is valid and matches nothing.
"""

from __future__ import annotations

import re
from typing import Any

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse as parse_jsonpath

from colspec_core.errors import PathExpressionError

RELAXED_PATH_PATTERN = re.compile(r"\{\.?([^{}]+)\}|\.?([^{}]+)")

RELAXED_PATH_HINT = (
    "unexpected path string, expected a 'name1.name2' or '.name1.name2' "
    "or '{name1.name2}' or '{.name1.name2}'"
)


class PathHandle:
    """Compiled accessor for one field-path expression.

    Handles are immutable and compare equal by normalized expression.

    Attributes:
        raw: Path expression as written in the column specification.
        expression: Normalized expression (``"{.metadata.name}"``), or ``""``.

    Example:
        >>> handle = compile_path(".metadata.name")
        >>> handle.first({"metadata": {"name": "nginx"}})
        'nginx'
    """

    __slots__ = ("_raw", "_expression", "_matcher")

    def __init__(self, raw: str, expression: str, matcher: Any = None) -> None:
        self._raw = raw
        self._expression = expression
        self._matcher = matcher

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def is_empty(self) -> bool:
        """True when the column has no path expression."""
        return self._matcher is None

    def find(self, data: Any) -> list[Any]:
        """Return every value the expression selects from ``data``."""
        if self._matcher is None:
            return []
        return [match.value for match in self._matcher.find(data)]

    def first(self, data: Any, default: Any = None) -> Any:
        """Return the first selected value, or ``default`` when nothing matches."""
        values = self.find(data)
        return values[0] if values else default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathHandle):
            return NotImplemented
        return self._expression == other._expression

    def __hash__(self) -> int:
        return hash(self._expression)

    def __repr__(self) -> str:
        return f"PathHandle({self._expression!r})"


def relaxed_path_expression(raw: str) -> str:
    """Normalize relaxed path shorthand to the ``{.name1.name2}`` form.

    Args:
        raw: Path as written by the user. Empty input is returned unchanged.

    Returns:
        Normalized expression.

    Raises:
        PathExpressionError: If the shorthand is not recognized.
    """
    if not raw:
        return raw

    match = RELAXED_PATH_PATTERN.fullmatch(raw)
    if match is None:
        raise PathExpressionError(raw, RELAXED_PATH_HINT)

    body = match.group(1) or match.group(2)
    return f"{{.{body}}}"


def compile_path(raw: str) -> PathHandle:
    """Compile a relaxed field-path expression into a PathHandle.

    Args:
        raw: Path as written by the user.

    Returns:
        Compiled PathHandle.

    Raises:
        PathExpressionError: If the expression is not a valid relaxed JSONPath.

    Example:
        >>> compile_path("{.status.cpu}").expression
        '{.status.cpu}'
    """
    expression = relaxed_path_expression(raw)
    if not expression:
        return PathHandle(raw, expression)

    # "{.a.b}" -> "$.a.b"
    try:
        matcher = parse_jsonpath("$" + expression[1:-1])
    except JSONPathError as e:
        raise PathExpressionError(raw, str(e)) from e

    return PathHandle(raw, expression, matcher)
