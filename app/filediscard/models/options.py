"""Discard option model.

This module defines the immutable set of flags that control how a single
discard call treats its target.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class DiscardOptions:
    """Flags controlling a single discard operation.

    Attributes:
        directory: Permit discarding an empty directory.
        recursive: Permit discarding a non-empty directory and skip the
            emptiness check entirely.
        verbose: Report each move or removal.
        force: Force level. Levels above 1 bypass the trash and delete
            the target permanently.
    """

    directory: bool = False
    recursive: bool = False
    verbose: bool = False
    force: int | None = None

    def __post_init__(self) -> None:
        """Validate option data after initialization."""
        if self.force is not None and self.force < 0:
            msg = f"Force level cannot be negative, got {self.force}"
            raise ValueError(msg)

    @property
    def bypasses_trash(self) -> bool:
        """Check if these options request permanent deletion."""
        return self.force is not None and self.force > 1

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DiscardOptions":
        """Build options from a plain mapping of option keys.

        Args:
            data: Mapping using the keys directory, recursive, verbose, force.

        Returns:
            DiscardOptions instance.

        Raises:
            ValueError: If the mapping contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown discard option(s): {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**dict(data))
