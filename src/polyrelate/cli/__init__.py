"""Command-line interface for polyrelate.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Classify a single pair from files or inline vertex lists
- Batch classification from a JSON cases file
- JSON output for scripting
"""

from polyrelate.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
