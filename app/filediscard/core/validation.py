"""Discard eligibility rules."""

from filediscard.errors import (
    DirectoryNotEmptyError,
    InvalidArgumentError,
    IsADirectoryDiscardError,
    TargetNotFoundError,
)
from filediscard.models.entry import Entry
from filediscard.models.options import DiscardOptions


def check_special(entry: Entry) -> None:
    """Reject the root, "." and "..".

    Raises:
        InvalidArgumentError: If the entry name is special.
    """
    if entry.is_special:
        raise InvalidArgumentError(entry.name or entry.path)


def validate(entry: Entry, options: DiscardOptions) -> None:
    """Check that an entry may be discarded with the given options.

    Rules are applied in order: special names, directory flags, existence.
    With ``recursive`` set a directory is eligible along with everything
    inside it and no emptiness check is made.

    Args:
        entry: Inspected discard target.
        options: Discard flags for this call.

    Raises:
        InvalidArgumentError: For "." and "..".
        IsADirectoryDiscardError: For a directory without directory/recursive.
        DirectoryNotEmptyError: For a non-empty directory without recursive.
        TargetNotFoundError: If the entry does not exist.
    """
    check_special(entry)

    if entry.is_dir and not options.recursive:
        if not options.directory:
            raise IsADirectoryDiscardError(entry.path)
        if entry.has_children():
            raise DirectoryNotEmptyError(entry.path)

    if not entry.exists:
        raise TargetNotFoundError(entry.path)
