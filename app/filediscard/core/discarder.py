"""Discarder: moves filesystem entries into the trash.

The Discarder composes path resolution, validation, trash lookup, the
creation policy and the move into a single ``discard`` operation.

Example:
    >>> discarder = Discarder(select_variant())
    >>> discarder.discard("notes.txt")
    >>> discarder.discard("build", recursive=True, verbose=True)
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Any

from filediscard.core.config import DiscardSettings
from filediscard.core.mountpoint import DeviceMountpointLocator, MountpointLocator
from filediscard.core.mover import Mover, Reporter
from filediscard.core.paths import get_home_dir, resolve_target
from filediscard.core.trash import TrashLocator, ensure_trash
from filediscard.core.uniquify import Clock, Uniquifier
from filediscard.core.validation import check_special, validate
from filediscard.models.entry import DiscardResult, Entry
from filediscard.models.options import DiscardOptions
from filediscard.platforms.base import PlatformVariant
from filediscard.utils.formatting import report_operation

logger = logging.getLogger(__name__)


class Discarder:
    """Moves entries into the trash of the volume they live on.

    The home trash, home mountpoint and mountpoint trash format are fixed
    at construction. Only ``settings`` may be replaced afterwards; it is
    read once per discard call.

    Attributes:
        variant: Trash naming scheme in use.
        home_trash: Absolute trash directory for the home volume.
        home_mountpoint: Mountpoint containing the home trash.
        mountpoint_trash_format: Template for per-mountpoint trash names.
        settings: Policy settings (creation on demand).
    """

    def __init__(
        self,
        variant: PlatformVariant,
        *,
        home: str | os.PathLike[str] | None = None,
        settings: DiscardSettings | None = None,
        mountpoint_locator: MountpointLocator | None = None,
        uid: int | None = None,
        clock: Clock | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        """Initialize the Discarder.

        Args:
            variant: Platform trash variant.
            home: Home directory override. Defaults to the user's home.
            settings: Policy settings. Defaults to DiscardSettings().
            mountpoint_locator: Mountpoint capability. Defaults to device
                boundary detection.
            uid: User id for per-mountpoint trash names. Defaults to the
                current process uid.
            clock: Time stamp source for collision avoidance.
            reporter: Sink for verbose output. Defaults to stderr.
        """
        self.variant = variant
        self.settings = settings if settings is not None else DiscardSettings()
        self._locator = mountpoint_locator or DeviceMountpointLocator()
        self._reporter = reporter or report_operation

        self.home_trash = get_home_dir(home) / variant.home_trash
        self.home_mountpoint = self._locator.locate(self.home_trash.parent)
        self.mountpoint_trash_format = variant.mountpoint_trash_format

        self._trash_locator = TrashLocator(
            home_trash=self.home_trash,
            home_mountpoint=self.home_mountpoint,
            mountpoint_trash_format=self.mountpoint_trash_format,
            mountpoint_locator=self._locator,
            uid=os.getuid() if uid is None else uid,
        )
        self._mover = Mover(
            Uniquifier(clock),
            hook=variant.create_hook(),
            reporter=self._reporter,
        )

    def discard(
        self,
        target: str | os.PathLike[str],
        options: DiscardOptions | None = None,
        **option_overrides: Any,
    ) -> DiscardResult:
        """Move a file, directory or symlink into the trash.

        Args:
            target: Path, path-like object, or string naming the entry.
            options: Discard flags. Keyword overrides (directory,
                recursive, verbose, force) are applied on top.
            **option_overrides: Individual DiscardOptions fields.

        Returns:
            DiscardResult describing where the entry went.

        Raises:
            InvalidArgumentError: For "." and "..".
            IsADirectoryDiscardError: For a directory without directory/recursive.
            DirectoryNotEmptyError: For a non-empty directory without recursive.
            TargetNotFoundError: If the target does not exist.
            TrashMissingError: If the trash is missing and creation is off.
            UniquifyExhaustedError: If no free name exists in the trash.
        """
        opts = self._merge_options(options, option_overrides)
        entry = Entry.from_path(resolve_target(target), raw=os.fspath(target))

        if opts.bypasses_trash:
            check_special(entry)
            return self._force_delete(entry, opts.verbose)

        validate(entry, opts)

        trash = ensure_trash(
            self._trash_locator.locate(entry.path),
            self.settings.create_trash_when_missing,
        )
        return self._mover.move(entry.path, trash, verbose=opts.verbose)

    def trash_for(self, target: str | os.PathLike[str]) -> Path:
        """Return the trash directory that would receive target.

        Args:
            target: Path, path-like object, or string.

        Returns:
            Trash directory (not guaranteed to exist).
        """
        path = Path(os.path.abspath(resolve_target(target)))
        return self._trash_locator.locate(path)

    def _force_delete(self, entry: Entry, verbose: bool) -> DiscardResult:
        """Permanently remove an entry, bypassing the trash."""
        if entry.is_dir:
            shutil.rmtree(entry.path)
        elif entry.exists:
            entry.path.unlink()

        logger.info("Permanently removed %s", entry.path)
        if verbose:
            self._reporter(f"rm -rf {entry.path}")
        return DiscardResult(source=entry.path, destination=None, trashed=False)

    @staticmethod
    def _merge_options(
        options: DiscardOptions | None,
        overrides: dict[str, Any],
    ) -> DiscardOptions:
        """Combine an options object with keyword overrides."""
        if options is None:
            return DiscardOptions.from_mapping(overrides)
        if not overrides:
            return options
        merged = {
            "directory": options.directory,
            "recursive": options.recursive,
            "verbose": options.verbose,
            "force": options.force,
        }
        merged.update(overrides)
        return DiscardOptions.from_mapping(merged)
