"""CLI commands for filediscard.

This package contains all subcommand implementations.
"""

from filediscard.cli.commands import config, rm, where

__all__ = ["config", "rm", "where"]
