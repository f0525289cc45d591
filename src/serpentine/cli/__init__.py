"""Command-line interface for serpentine.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Segment tables with lengths and bounds
- SVG path data and JSON output
- Constraint axis listing and drag snapping
- Detailed error reporting
"""

from serpentine.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
