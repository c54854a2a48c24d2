"""colspec-cli: Command-line interface for the column specification compiler."""

from __future__ import annotations

__version__ = "0.1.0"
