"""Error kinds raised while discarding filesystem entries.

Every discard error is an ``OSError`` carrying ``errno``, ``strerror`` and
``filename``, so callers can catch either the builtin family (for example
``FileNotFoundError``) or the library-wide ``DiscardError`` base.
"""

import errno
import os


class DiscardError(OSError):
    """Base exception for discard failures.

    Attributes:
        code: errno value reported by instances of this class.
        reason: Default human-readable message.
    """

    code: int = errno.EIO
    reason: str = "Discard failed"

    def __init__(self, path: str | os.PathLike[str], reason: str | None = None) -> None:
        super().__init__(self.code, reason or self.reason, os.fspath(path))


class InvalidArgumentError(DiscardError):
    """Raised for targets that may never be discarded ("." and "..")."""

    code = errno.EINVAL
    reason = "Invalid argument"


class IsADirectoryDiscardError(DiscardError, IsADirectoryError):
    """Raised when a directory is discarded without directory/recursive."""

    code = errno.EISDIR
    reason = "Is a directory"


class DirectoryNotEmptyError(DiscardError):
    """Raised when a non-empty directory is discarded without recursive."""

    code = errno.ENOTEMPTY
    reason = "Directory not empty"


class TargetNotFoundError(DiscardError, FileNotFoundError):
    """Raised when the discard target does not exist."""

    code = errno.ENOENT
    reason = "No such file or directory"


class TrashMissingError(DiscardError, FileNotFoundError):
    """Raised when the trash directory is missing and may not be created.

    The ``filename`` attribute names the expected trash directory.
    """

    code = errno.ENOENT
    reason = "Trash directory does not exist"


class UniquifyExhaustedError(DiscardError, FileExistsError):
    """Raised when no free name could be found inside the trash.

    Attributes:
        base_name: Name of the entry that was being placed.
        last_attempt: Last destination path that was tried.
    """

    code = errno.EEXIST

    def __init__(self, base_name: str, last_attempt: str | os.PathLike[str]) -> None:
        self.base_name = base_name
        self.last_attempt = os.fspath(last_attempt)
        super().__init__(
            last_attempt,
            f"Unable to find a unique trash name for {base_name!r}",
        )


class UnsupportedPlatformError(NotImplementedError):
    """Raised when no trash variant exists for the running platform."""
