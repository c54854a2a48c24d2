"""colspec-core: Column specification compiler.

This package provides:
- compile_column / ColumnCompiler: Turn "NAME:.path|FLAGS" into ColumnDescriptors
- ColumnDescriptor, ColumnAttrs: Immutable compiled column models
- compile_path / PathHandle: Relaxed JSONPath field accessors
- ViewsConfig: Pydantic schema for views.yaml
- FavoriteNamespaces: Bounded favorite namespace tracking
"""

from __future__ import annotations

__version__ = "0.1.0"

# Compiler
from colspec_core.compiler import (
    ColumnCompiler,
    ColumnFailure,
    CompilationReport,
    FailureKind,
    compile_column,
)

# Descriptor models
from colspec_core.descriptor import ColumnDescriptor, ColumnSource, HeaderColumn

# Error types
from colspec_core.errors import (
    ColspecError,
    ConfigurationError,
    InvalidPathError,
    MalformedSpecError,
    PathExpressionError,
    ViewCompilationError,
)

# Favorites
from colspec_core.favorites import MAX_FAVORITES, FavoriteNamespaces

# Flags
from colspec_core.flags import Align, ColumnAttrs, ColumnFlag, interpret_flags

# Grammar
from colspec_core.grammar import SpecParts, decompose

# Logging
from colspec_core.observability import configure_logging

# Path engine
from colspec_core.paths import PathHandle, compile_path, relaxed_path_expression

# Views configuration
from colspec_core.views import ViewsConfig, ViewSetting, compile_views

__all__ = [
    "__version__",
    # Compiler
    "compile_column",
    "ColumnCompiler",
    "CompilationReport",
    "ColumnFailure",
    "FailureKind",
    # Descriptors
    "ColumnDescriptor",
    "ColumnSource",
    "HeaderColumn",
    # Errors
    "ColspecError",
    "MalformedSpecError",
    "PathExpressionError",
    "InvalidPathError",
    "ConfigurationError",
    "ViewCompilationError",
    # Favorites
    "FavoriteNamespaces",
    "MAX_FAVORITES",
    # Flags
    "Align",
    "ColumnAttrs",
    "ColumnFlag",
    "interpret_flags",
    # Grammar
    "SpecParts",
    "decompose",
    # Logging
    "configure_logging",
    # Paths
    "PathHandle",
    "compile_path",
    "relaxed_path_expression",
    # Views
    "ViewsConfig",
    "ViewSetting",
    "compile_views",
]
