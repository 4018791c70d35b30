"""Entry and result models for discard operations.

An Entry captures what is known about a discard target at the moment it is
validated; a DiscardResult describes what the operation did with it.
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Entry:
    """A discard target as seen on the filesystem.

    Attributes:
        path: Absolute path of the target. The final component is never
            resolved, so a symlink stays a symlink.
        name: Final path component as given by the caller.
        exists: Whether anything (including a dangling symlink) is present.
        is_dir: Whether the target is a real directory (not a symlink to one).
        is_symlink: Whether the target itself is a symbolic link.
    """

    path: Path
    name: str
    exists: bool
    is_dir: bool
    is_symlink: bool

    @property
    def is_special(self) -> bool:
        """Check if the name refers to the root, "." or ".."."""
        return self.name in ("", ".", "..")

    def has_children(self) -> bool:
        """Check if a directory entry has anything inside it.

        The directory is read on each call. Anything that is not a real
        directory has no children.

        Raises:
            OSError: If the directory cannot be read.
        """
        if not self.is_dir:
            return False
        with os.scandir(self.path) as it:
            return any(True for _ in it)

    @classmethod
    def from_path(cls, path: Path, raw: str | None = None) -> "Entry":
        """Inspect a path and build an Entry for it.

        Args:
            path: Target path, relative or absolute.
            raw: Text the name is read from. Defaults to ``os.fspath(path)``;
                pass the caller's own string so that ``proj/.`` keeps its
                final ``.`` component.

        Returns:
            Entry describing the target.
        """
        if raw is None:
            raw = os.fspath(path)
        name = os.path.basename(raw.rstrip(os.sep)) if raw.strip(os.sep) else ""
        absolute = Path(os.path.abspath(raw))

        is_symlink = absolute.is_symlink()
        is_dir = not is_symlink and absolute.is_dir()

        return cls(
            path=absolute,
            name=name,
            exists=os.path.lexists(absolute),
            is_dir=is_dir,
            is_symlink=is_symlink,
        )


@dataclass(frozen=True, slots=True)
class DiscardResult:
    """Result of a single discard operation.

    Attributes:
        source: Absolute path the entry was taken from.
        destination: Path the entry now lives at inside the trash, or None
            when the entry was deleted permanently.
        trashed: Whether the entry was moved into a trash directory.
        info_path: Metadata sidecar written for the entry, if any.
    """

    source: Path
    destination: Path | None
    trashed: bool
    info_path: Path | None = None
