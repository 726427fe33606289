"""Command-line interface for edgebeam.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Build a beam path from cutout geometry given as options
- Resolve known device models through the device table
- Classify raw cutout rectangles reported in pixels
- JSON output and SVG previews
"""

from edgebeam.cli.app import cli, main

__all__ = ["cli", "main"]
