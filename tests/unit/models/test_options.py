"""Unit tests for discard options.

Tests for DiscardOptions validation and mapping conversion.
"""

import dataclasses

import pytest
from filediscard.models.options import DiscardOptions


class TestDiscardOptions:
    """Tests for DiscardOptions dataclass."""

    def test_defaults(self) -> None:
        """All flags are off by default."""
        opts = DiscardOptions()

        assert opts.directory is False
        assert opts.recursive is False
        assert opts.verbose is False
        assert opts.force is None

    def test_frozen(self) -> None:
        """Options cannot be modified after creation."""
        opts = DiscardOptions()

        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.recursive = True  # type: ignore[misc]

    def test_negative_force_rejected(self) -> None:
        """Force levels cannot be negative."""
        with pytest.raises(ValueError, match="cannot be negative"):
            DiscardOptions(force=-1)

    @pytest.mark.parametrize(
        ("force", "expected"),
        [(None, False), (0, False), (1, False), (2, True), (5, True)],
    )
    def test_bypasses_trash(self, force: int | None, expected: bool) -> None:
        """Only force levels above 1 bypass the trash."""
        assert DiscardOptions(force=force).bypasses_trash is expected


class TestFromMapping:
    """Tests for DiscardOptions.from_mapping."""

    def test_known_keys(self) -> None:
        """Known keys map onto fields."""
        opts = DiscardOptions.from_mapping({"recursive": True, "verbose": True, "force": 2})

        assert opts == DiscardOptions(recursive=True, verbose=True, force=2)

    def test_empty_mapping(self) -> None:
        """An empty mapping gives the defaults."""
        assert DiscardOptions.from_mapping({}) == DiscardOptions()

    def test_unknown_keys_rejected(self) -> None:
        """Unknown keys are listed in the error."""
        with pytest.raises(ValueError, match="interactive, preserve_root"):
            DiscardOptions.from_mapping({"preserve_root": True, "interactive": True})
