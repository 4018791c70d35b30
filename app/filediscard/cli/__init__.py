"""CLI package for filediscard.

This package contains the Typer application and all subcommands.
"""

from filediscard.cli.main import app

__all__ = ["app"]
