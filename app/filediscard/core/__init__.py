"""Core discard machinery.

This module exports the Discarder and the capabilities it is built from.
"""

from filediscard.core.discarder import Discarder
from filediscard.core.mountpoint import (
    DeviceMountpointLocator,
    DirectoryMountpointLocator,
    MountpointLocator,
)
from filediscard.core.mover import Mover, NullPostMoveHook, PostMoveHook
from filediscard.core.trash import TrashLocator, ensure_trash
from filediscard.core.uniquify import MAX_ATTEMPTS, Uniquifier

__all__ = [
    "MAX_ATTEMPTS",
    "DeviceMountpointLocator",
    "DirectoryMountpointLocator",
    "Discarder",
    "MountpointLocator",
    "Mover",
    "NullPostMoveHook",
    "PostMoveHook",
    "TrashLocator",
    "Uniquifier",
    "ensure_trash",
]
