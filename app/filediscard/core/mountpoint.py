"""Mountpoint lookup for trash resolution.

A trash directory must live on the same volume as the entry being
discarded so the move is a cheap rename. This module finds the volume
boundary (mountpoint) that contains a given path.
"""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class MountpointLocator(Protocol):
    """Capability that maps a path to the mountpoint containing it."""

    def locate(self, path: Path) -> Path:
        """Return the filesystem boundary containing path."""
        ...


class DeviceMountpointLocator:
    """Locate mountpoints by walking parents until the device changes.

    ``Path.is_mount`` reports a boundary when the device id differs from
    the parent's, or when the path is the root.
    """

    def locate(self, path: Path) -> Path:
        """Walk up from path to the nearest mountpoint.

        Args:
            path: Canonical absolute path.

        Returns:
            Mountpoint path containing path.
        """
        current = path
        while not current.is_mount():
            parent = current.parent
            if parent == current:
                break
            current = parent
        logger.debug("Mountpoint of %s is %s", path, current)
        return current


class DirectoryMountpointLocator:
    """Treat every directory as its own mountpoint.

    Useful to exercise per-volume trash behaviour without real volumes.
    """

    def locate(self, path: Path) -> Path:
        """Return path unchanged."""
        return path
