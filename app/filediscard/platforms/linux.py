"""Freedesktop.org trash layout with ``.trashinfo`` sidecars.

Each trash directory is split into ``files/`` (the trashed entries) and
``info/`` (one ``<name>.trashinfo`` per entry) so a restore tool can find
where an entry came from:

    [Trash Info]
    Path=/home/user/notes/todo.txt
    DeletionDate=2024-01-15T10:00:00

Home trash: ``$XDG_DATA_HOME/Trash`` (default ``~/.local/share/Trash``).
Other volumes: ``<mountpoint>/.Trash-<uid>``.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

from filediscard.platforms.base import PlatformVariant

logger = logging.getLogger(__name__)

FILES_DIR = "files"
INFO_DIR = "info"
INFO_SUFFIX = ".trashinfo"

FREEDESKTOP_HOME_TRASH = ".local/share/Trash/files"
FREEDESKTOP_MOUNTPOINT_TRASH = ".Trash-%s/files"

DELETION_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_trash_info(source: Path, deleted_at: datetime) -> str:
    """Render the body of a ``.trashinfo`` file.

    Args:
        source: Original absolute path of the trashed entry.
        deleted_at: Local deletion time.

    Returns:
        Sidecar file content.
    """
    return (
        "[Trash Info]\n"
        f"Path={quote(str(source), safe='/')}\n"
        f"DeletionDate={deleted_at.strftime(DELETION_DATE_FORMAT)}\n"
    )


class TrashInfoWriter:
    """Post-move hook writing freedesktop ``.trashinfo`` sidecars."""

    def __init__(self, now: Callable[[], datetime] | None = None) -> None:
        """Initialize the TrashInfoWriter.

        Args:
            now: Source of the local deletion time.
        """
        self._now = now or datetime.now

    def after_move(self, source: Path, destination: Path) -> Path | None:
        """Write the sidecar for an entry that now lives in ``files/``.

        The trashed name is already unique inside ``files/``, so an
        existing sidecar with the same name is stale and gets overwritten.

        Args:
            source: Original absolute path.
            destination: Path of the entry inside the trash ``files/`` dir.

        Returns:
            Path of the written sidecar.

        Raises:
            OSError: If the info directory or file cannot be written.
        """
        info_dir = destination.parent.parent / INFO_DIR
        info_dir.mkdir(mode=0o700, parents=True, exist_ok=True)

        info_path = info_dir / f"{destination.name}{INFO_SUFFIX}"
        info_path.write_text(format_trash_info(source, self._now()), encoding="utf-8")
        logger.debug("Wrote trash info %s", info_path)
        return info_path


def freedesktop_variant(xdg_data_home: Path | None = None) -> PlatformVariant:
    """Create the freedesktop.org trash variant.

    Args:
        xdg_data_home: Absolute data home overriding ``~/.local/share``.

    Returns:
        PlatformVariant writing ``.trashinfo`` sidecars.
    """
    home_trash = FREEDESKTOP_HOME_TRASH
    if xdg_data_home is not None:
        home_trash = str(xdg_data_home / "Trash" / FILES_DIR)

    return PlatformVariant(
        name="freedesktop",
        home_trash=home_trash,
        mountpoint_trash_format=FREEDESKTOP_MOUNTPOINT_TRASH,
        hook_factory=TrashInfoWriter,
    )
