"""Column attribute flags.

Flag characters are applied left to right as an ordered fold. Each rule
assigns its fields outright, so a later flag overrides whatever an earlier
one set on the same field:

- ``H``: hide the column.
- ``W``: wide column only (clears ``show``).
- ``S``: always shown (clears ``wide``).
- ``L`` / ``R``: left / right alignment.
- ``T``: the column holds a timestamp.
- ``N``: the column holds a capacity/number, right aligned.

Unknown characters are reported as a warning and otherwise ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = structlog.get_logger(__name__)


class Align(str, Enum):
    """Horizontal alignment of a column."""

    LEFT = "left"
    RIGHT = "right"


class ColumnFlag(str, Enum):
    """Known flag characters."""

    NUMBER = "N"
    AGE = "T"
    WIDE = "W"
    SHOW = "S"
    ALIGN_LEFT = "L"
    ALIGN_RIGHT = "R"
    HIDE = "H"


FLAG_RULES: dict[str, dict[str, Any]] = {
    ColumnFlag.HIDE.value: {"hide": True},
    ColumnFlag.WIDE.value: {"wide": True, "show": False},
    ColumnFlag.SHOW.value: {"show": True, "wide": False},
    ColumnFlag.ALIGN_LEFT.value: {"align": Align.LEFT},
    ColumnFlag.ALIGN_RIGHT.value: {"align": Align.RIGHT},
    ColumnFlag.AGE.value: {"time": True},
    ColumnFlag.NUMBER.value: {"capacity": True, "align": Align.RIGHT},
}


class ColumnAttrs(BaseModel):
    """Display attributes of a column.

    Attributes:
        align: Horizontal alignment.
        wide: Only shown in wide mode.
        show: Always shown.
        hide: Hidden.
        time: Holds a timestamp.
        capacity: Holds a capacity or number.
        mx: Reserved for the metrics subsystem. Never set from flags.
        mxc: Reserved for the metrics subsystem (CPU). Never set from flags.
        mxm: Reserved for the metrics subsystem (memory). Never set from flags.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    align: Align = Field(default=Align.LEFT, description="Horizontal alignment")
    wide: bool = Field(default=False, description="Only shown in wide mode")
    show: bool = Field(default=False, description="Always shown")
    hide: bool = Field(default=False, description="Hidden column")
    time: bool = Field(default=False, description="Timestamp column")
    capacity: bool = Field(default=False, description="Capacity/number column")
    mx: bool = Field(default=False, description="Metrics column (reserved)")
    mxc: bool = Field(default=False, description="CPU metrics column (reserved)")
    mxm: bool = Field(default=False, description="Memory metrics column (reserved)")

    @model_validator(mode="after")
    def wide_and_show_are_exclusive(self) -> ColumnAttrs:
        """Reject attribute sets that are both wide and always shown."""
        if self.wide and self.show:
            msg = "a column cannot be both wide and always shown"
            raise ValueError(msg)
        return self


def interpret_flags(flags: str, *, spec: str | None = None) -> ColumnAttrs:
    """Fold flag characters into a ColumnAttrs.

    Args:
        flags: Flag characters, applied left to right.
        spec: Full column specification, used as warning context.

    Returns:
        The resulting ColumnAttrs.

    Example:
        >>> interpret_flags("NL").align
        <Align.LEFT: 'left'>
    """
    state: dict[str, Any] = {}
    for char in flags:
        rule = FLAG_RULES.get(char)
        if rule is None:
            logger.warning("unknown_column_attribute", attribute=char, spec=spec)
            continue
        state.update(rule)

    return ColumnAttrs(**state)
