"""Compiled column descriptors.

This module defines the immutable output of the column compiler:
- ColumnSource: How a renderer locates the column value
- ColumnDescriptor: One compiled column specification
- HeaderColumn: The header-rendering projection of a descriptor
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from colspec_core.flags import ColumnAttrs
from colspec_core.paths import PathHandle

# Positional index reported for columns resolved by path expression
UNRESOLVED_INDEX = -1


class ColumnSource(str, Enum):
    """Where a renderer reads a column value from."""

    PATH = "path"
    POSITIONAL = "positional"


class HeaderColumn(BaseModel):
    """Header entry handed to a header-rendering component.

    Attributes:
        name: Column display name.
        attrs: Column display attributes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Column display name")
    attrs: ColumnAttrs = Field(default_factory=ColumnAttrs, description="Display attributes")


class ColumnDescriptor(BaseModel):
    """One compiled column specification.

    Descriptors produced by the compiler are always resolved by path.
    Positional descriptors exist for renderers that mix compiled columns
    with fixed ones.

    Attributes:
        name: Column display name.
        source: PATH (resolve by path expression) or POSITIONAL (fixed slot).
        index: Fixed slot for POSITIONAL columns, None otherwise.
        path: Compiled field-path accessor.
        attrs: Display attributes.

    Example:
        >>> column = compile_column("CPU:.status.cpu|N")
        >>> column.positional_index
        -1
        >>> column.attrs.capacity
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Column display name")
    source: ColumnSource = Field(
        default=ColumnSource.PATH,
        description="How the column value is located",
    )
    index: int | None = Field(
        default=None,
        ge=0,
        description="Fixed slot for positional columns",
    )
    path: PathHandle = Field(..., description="Compiled field-path accessor")
    attrs: ColumnAttrs = Field(default_factory=ColumnAttrs, description="Display attributes")

    @model_validator(mode="after")
    def index_matches_source(self) -> ColumnDescriptor:
        """Require an index for positional columns and none otherwise."""
        if self.source is ColumnSource.POSITIONAL and self.index is None:
            msg = "positional columns require an index"
            raise ValueError(msg)
        if self.source is ColumnSource.PATH and self.index is not None:
            msg = "path columns cannot carry an index"
            raise ValueError(msg)
        return self

    @field_serializer("path")
    def serialize_path(self, path: PathHandle) -> str:
        return path.expression

    @property
    def positional_index(self) -> int:
        """Fixed slot, or -1 when the column is resolved by path."""
        if self.index is None:
            return UNRESOLVED_INDEX
        return self.index

    def with_metrics(self, *, mx: bool, mxc: bool = False, mxm: bool = False) -> ColumnDescriptor:
        """Return a copy carrying metrics markers.

        The compiler never sets these; a metrics-aware caller does once it
        knows whether resource metrics are available.
        """
        attrs = self.attrs.model_copy(update={"mx": mx, "mxc": mxc, "mxm": mxm})
        return self.model_copy(update={"attrs": attrs})

    def to_header_column(self) -> HeaderColumn:
        """Project this descriptor onto a header column."""
        return HeaderColumn(name=self.name, attrs=self.attrs)
