"""Shared helpers for CLI commands.

This module builds the Discarder used by commands so that platform and
settings errors are reported the same way everywhere.
"""

import typer

from filediscard import get_discarder
from filediscard.core.config import SettingsError
from filediscard.core.discarder import Discarder
from filediscard.errors import UnsupportedPlatformError
from filediscard.utils.formatting import print_error


def get_cli_discarder(create_trash: bool = False) -> Discarder:
    """Get the Discarder for a CLI invocation.

    Args:
        create_trash: Enable trash creation on demand for this run.

    Returns:
        Configured Discarder.

    Raises:
        typer.Exit: If the platform is unsupported or settings are invalid.
    """
    try:
        discarder = get_discarder()
    except (UnsupportedPlatformError, SettingsError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if create_trash and not discarder.settings.create_trash_when_missing:
        discarder.settings = discarder.settings.model_copy(
            update={"create_trash_when_missing": True}
        )
    return discarder
