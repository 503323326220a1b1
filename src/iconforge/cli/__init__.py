"""Command-line interface for iconforge.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Repeatable --format selection with dependency resolution
- Artifact table with file sizes
- Quiet output mode and file logging
"""

from iconforge.cli.app import cli, main

__all__ = ["cli", "main"]
