"""Relocation of discarded entries into a trash directory.

The move is always a rename on one device: the trash is resolved on the
same mountpoint as the source, so no data is ever copied.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from filediscard.core.uniquify import Uniquifier
from filediscard.models.entry import DiscardResult

logger = logging.getLogger(__name__)

# Receives a one-line description of each filesystem operation
Reporter = Callable[[str], None]


class PostMoveHook(Protocol):
    """Capability invoked after an entry has been moved into the trash."""

    def after_move(self, source: Path, destination: Path) -> Path | None:
        """Record bookkeeping for a completed move.

        Returns:
            Path of any metadata written, or None.
        """
        ...


class NullPostMoveHook:
    """Post-move hook that does nothing."""

    def after_move(self, source: Path, destination: Path) -> Path | None:
        return None


class Mover:
    """Moves entries into a trash directory without overwriting anything.

    Attributes:
        uniquifier: Computes collision-free destination names.
        hook: Post-move bookkeeping for the active platform.
    """

    def __init__(
        self,
        uniquifier: Uniquifier,
        hook: PostMoveHook | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        """Initialize the Mover.

        Args:
            uniquifier: Destination name generator.
            hook: Post-move hook. Defaults to a no-op.
            reporter: Sink for verbose output.
        """
        self.uniquifier = uniquifier
        self.hook: PostMoveHook = hook or NullPostMoveHook()
        self._reporter = reporter

    def move(self, source: Path, trash: Path, verbose: bool = False) -> DiscardResult:
        """Move source into trash.

        Args:
            source: Entry to move. Made absolute, final component unresolved.
            trash: Existing trash directory on the same device as source.
            verbose: Report the move through the reporter.

        Returns:
            DiscardResult describing the move.

        Raises:
            UniquifyExhaustedError: If no free destination name exists.
            OSError: If the rename fails.
        """
        src = Path(os.path.abspath(source))
        dst = self.uniquifier.uniquify(trash / src.name)

        os.rename(src, dst)
        logger.info("Moved %s to %s", src, dst)
        if verbose and self._reporter is not None:
            self._reporter(f"mv {src} {dst}")

        info_path: Path | None = None
        try:
            info_path = self.hook.after_move(src, dst)
        except OSError as e:
            # The move already happened; bookkeeping failures are not fatal
            logger.warning("Could not record trash metadata for %s: %s", dst, e)

        return DiscardResult(source=src, destination=dst, trashed=True, info_path=info_path)
