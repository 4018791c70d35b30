"""Platform trash variants.

A variant describes the trash naming scheme for one platform family: where
the home trash lives, how per-mountpoint trash directories are named, and
which post-move bookkeeping applies.
"""

from collections.abc import Callable
from dataclasses import dataclass

from filediscard.core.mover import NullPostMoveHook, PostMoveHook


@dataclass(frozen=True, slots=True)
class PlatformVariant:
    """Trash naming scheme for a platform family.

    Attributes:
        name: Variant identifier (e.g., "macos", "freedesktop").
        home_trash: Trash location relative to the home directory. An
            absolute value is used as-is.
        mountpoint_trash_format: Trash location relative to a mountpoint,
            with exactly one ``%s`` slot for the numeric user id.
        hook_factory: Builds the post-move hook for this variant.
    """

    name: str
    home_trash: str
    mountpoint_trash_format: str
    hook_factory: Callable[[], PostMoveHook] = NullPostMoveHook

    def __post_init__(self) -> None:
        """Validate variant data after initialization."""
        if not self.home_trash:
            msg = "Home trash location cannot be empty"
            raise ValueError(msg)
        if self.mountpoint_trash_format.count("%s") != 1:
            msg = (
                "Mountpoint trash format must contain exactly one %s slot, "
                f"got {self.mountpoint_trash_format!r}"
            )
            raise ValueError(msg)

    def create_hook(self) -> PostMoveHook:
        """Create the post-move hook for this variant."""
        return self.hook_factory()
