"""macOS trash layout: a flat ``.Trash`` in home, ``.Trashes/<uid>`` elsewhere."""

from filediscard.platforms.base import PlatformVariant

MACOS_HOME_TRASH = ".Trash"
MACOS_MOUNTPOINT_TRASH = ".Trashes/%s"


def macos_variant() -> PlatformVariant:
    """Create the macOS trash variant."""
    return PlatformVariant(
        name="macos",
        home_trash=MACOS_HOME_TRASH,
        mountpoint_trash_format=MACOS_MOUNTPOINT_TRASH,
    )
