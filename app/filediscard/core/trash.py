"""Trash directory resolution and creation policy.

Decides which trash directory receives a discarded entry: the home trash
for entries on the home volume, or a per-user trash at the root of any
other mountpoint.
"""

import logging
import os
from pathlib import Path

from filediscard.core.mountpoint import MountpointLocator
from filediscard.errors import TrashMissingError

logger = logging.getLogger(__name__)


class TrashLocator:
    """Maps discard targets to the trash directory on their volume.

    Attributes:
        home_trash: Trash directory used for the home volume.
        home_mountpoint: Mountpoint containing the home trash.
        mountpoint_trash_format: Template with one ``%s`` slot for the uid.
        uid: Numeric user id substituted into the template.
    """

    def __init__(
        self,
        home_trash: Path,
        home_mountpoint: Path,
        mountpoint_trash_format: str,
        mountpoint_locator: MountpointLocator,
        uid: int,
    ) -> None:
        """Initialize the TrashLocator.

        Args:
            home_trash: Absolute path of the home trash directory.
            home_mountpoint: Mountpoint computed once for the home trash.
            mountpoint_trash_format: Template for non-home trash names.
            mountpoint_locator: Capability used to find mountpoints.
            uid: User id for the per-mountpoint trash name.
        """
        self.home_trash = home_trash
        self.home_mountpoint = home_mountpoint
        self.mountpoint_trash_format = mountpoint_trash_format
        self.uid = uid
        self._locator = mountpoint_locator

    def locate(self, path: Path) -> Path:
        """Determine the trash directory for a target.

        The lookup starts from the real path of the containing directory.
        The final component is never resolved, so a symlink target is not
        touched even when the link is dangling.

        Args:
            path: Absolute path of the discard target.

        Returns:
            Trash directory for the target (not guaranteed to exist).
        """
        basis = Path(os.path.realpath(path.parent))
        mountpoint = self._locator.locate(basis)

        if mountpoint == self.home_mountpoint:
            trash = self.home_trash
        else:
            trash = mountpoint / (self.mountpoint_trash_format % self.uid)

        logger.debug("Trash for %s (mountpoint %s) is %s", path, mountpoint, trash)
        return trash


def ensure_trash(trash: Path, create_when_missing: bool) -> Path:
    """Apply the trash existence policy.

    Args:
        trash: Trash directory produced by the TrashLocator.
        create_when_missing: Create the directory (and ancestors) instead
            of failing when it does not exist.

    Returns:
        The existing trash directory.

    Raises:
        TrashMissingError: If the trash is missing and may not be created.
        OSError: If the trash directory cannot be created.
    """
    if trash.is_dir():
        return trash

    if not create_when_missing:
        raise TrashMissingError(trash)

    trash.mkdir(mode=0o700, parents=True, exist_ok=True)
    logger.info("Created trash directory %s", trash)
    return trash
