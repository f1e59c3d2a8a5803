"""CLI application setup using Typer.

Provides the ``schemavalidator`` command-line interface.
"""

from schemavalidator.cli.main import app

__all__ = ["app"]
