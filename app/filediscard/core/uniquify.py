"""Collision-free naming inside a trash directory.

When the proposed destination is taken, a time stamp is inserted before the
extension (``file 14.03.27.txt``). Further collisions add fractional seconds
with one more digit per attempt (``file 14.03.27.4.txt``,
``file 14.03.27.41.txt``, ...). The number of attempts is bounded.

The existence check and the later rename are not atomic: another process
may claim the computed name in between.
"""

import logging
import os
import time
from collections.abc import Callable
from pathlib import Path

from filediscard.errors import UniquifyExhaustedError

logger = logging.getLogger(__name__)

# Clock signature: precision (fractional second digits) -> time stamp text
Clock = Callable[[int], str]

MAX_ATTEMPTS = 10

# Nanosecond source gives at most nine fractional digits
MAX_PRECISION = 9


def timestamp(precision: int = 0) -> str:
    """Format the current local time as ``HH.MM.SS[.fraction]``.

    Args:
        precision: Number of fractional second digits (0-9).

    Returns:
        Time stamp text.
    """
    now_ns = time.time_ns()
    seconds, nanos = divmod(now_ns, 1_000_000_000)
    stamp = time.strftime("%H.%M.%S", time.localtime(seconds))
    if precision <= 0:
        return stamp
    digits = min(precision, MAX_PRECISION)
    return f"{stamp}.{nanos:09d}"[: len(stamp) + 1 + digits]


class Uniquifier:
    """Computes a destination path that does not collide with trash content.

    Attributes:
        max_attempts: Upper bound on generated names.
    """

    def __init__(self, clock: Clock | None = None, max_attempts: int = MAX_ATTEMPTS) -> None:
        """Initialize the Uniquifier.

        Args:
            clock: Time stamp source taking the fractional precision.
            max_attempts: Upper bound on generated names.
        """
        self._clock = clock or timestamp
        self.max_attempts = max_attempts

    def uniquify(self, path: Path) -> Path:
        """Return path, or a time-stamped variant of it that is free.

        Args:
            path: Proposed destination (trash directory / base name).

        Returns:
            A destination path where nothing exists yet.

        Raises:
            UniquifyExhaustedError: If every attempt collides.
        """
        if not os.path.lexists(path):
            return path

        ext = path.suffix
        base = path.name[: len(path.name) - len(ext)] if ext else path.name
        candidate = path

        for attempt in range(self.max_attempts):
            stamp = self._clock(attempt)
            candidate = path.with_name(f"{base} {stamp}{ext}")
            if not os.path.lexists(candidate):
                logger.debug("Renamed %s to %s to avoid a collision", path.name, candidate.name)
                return candidate

        raise UniquifyExhaustedError(path.name, candidate)
