"""Structural decomposition of column specifications.

A column specification reads ``<name>[:<path>][|<flags>]``:

- ``name``: word characters, whitespace, ``%``, ``/`` and ``-``.
- ``path``: any text, possibly empty, after an optional ``:``.
- ``flags``: up to three uppercase letters after the last ``|``.

The path group is lazy so it absorbs as little as possible, leaving a
trailing ``|<flags>`` to the flag slot even when the path itself contains
flag letters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from colspec_core.errors import MalformedSpecError

NAME_SEPARATOR = ":"
FLAGS_SEPARATOR = "|"
MAX_FLAGS = 3

SPEC_PATTERN = re.compile(
    r"(?P<name>[\w\s%/-]+)"
    r":?"
    r"(?P<path>.*?)"
    rf"(?:\|(?P<flags>[A-Z]{{0,{MAX_FLAGS}}}))?",
    re.ASCII | re.DOTALL,
)


@dataclass(frozen=True)
class SpecParts:
    """The three text slots of a column specification.

    Attributes:
        name: Column display name.
        path: Raw field-path expression (may be empty).
        flags: Raw flag characters (0-3, may be empty).
    """

    name: str
    path: str = ""
    flags: str = ""

    def to_spec(self) -> str:
        """Re-join the slots into a specification string.

        Separators are optional in the grammar, so the result is not
        necessarily the original text, but it decomposes into the same slots.
        """
        spec = self.name
        if self.path:
            spec += NAME_SEPARATOR + self.path
        # A path holding a separator needs an explicit, possibly empty, flag slot.
        if self.flags or FLAGS_SEPARATOR in self.path:
            spec += FLAGS_SEPARATOR + self.flags
        return spec


def decompose(spec: str) -> SpecParts:
    """Split a column specification into name, path and flags.

    Args:
        spec: Column specification text, e.g. ``"AGE:.metadata.creationTimestamp|T"``.

    Returns:
        The decomposed SpecParts.

    Raises:
        MalformedSpecError: If the text does not match the column grammar.

    Example:
        >>> decompose("CPU:.status.cpu|N")
        SpecParts(name='CPU', path='.status.cpu', flags='N')
    """
    match = SPEC_PATTERN.fullmatch(spec)
    if match is None:
        raise MalformedSpecError(spec)

    return SpecParts(
        name=match.group("name"),
        path=match.group("path"),
        flags=match.group("flags") or "",
    )
