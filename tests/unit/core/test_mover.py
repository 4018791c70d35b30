"""Unit tests for the Mover."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from filediscard.core.mover import Mover, NullPostMoveHook
from filediscard.core.uniquify import Uniquifier


def _clock(precision: int) -> str:
    return "9.8.1"


@pytest.fixture
def trash(tmp_path: Path) -> Path:
    path = tmp_path / "trash"
    path.mkdir()
    return path


class TestMover:
    """Tests for Mover.move."""

    def test_moves_file(self, tmp_path: Path, trash: Path) -> None:
        """The file is renamed into the trash with identical content."""
        source = tmp_path / "file.txt"
        source.write_text("content")

        result = Mover(Uniquifier(_clock)).move(source, trash)

        assert not source.exists()
        assert (trash / "file.txt").read_text() == "content"
        assert result.source == source
        assert result.destination == trash / "file.txt"
        assert result.trashed is True
        assert result.info_path is None

    def test_relative_source_made_absolute(
        self, tmp_path: Path, trash: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative sources are reported as absolute paths."""
        (tmp_path / "file.txt").write_text("content")
        monkeypatch.chdir(tmp_path)

        result = Mover(Uniquifier(_clock)).move(Path("file.txt"), trash)

        assert result.source == Path.cwd() / "file.txt"

    def test_collision_uniquified(self, tmp_path: Path, trash: Path) -> None:
        """Existing trash content is never overwritten."""
        (trash / "file.txt").write_text("old")
        source = tmp_path / "file.txt"
        source.write_text("new")

        result = Mover(Uniquifier(_clock)).move(source, trash)

        assert result.destination == trash / "file 9.8.1.txt"
        assert (trash / "file.txt").read_text() == "old"
        assert (trash / "file 9.8.1.txt").read_text() == "new"

    def test_symlink_moved_not_target(self, tmp_path: Path, trash: Path) -> None:
        """The link itself is moved; its target stays in place."""
        target = tmp_path / "target.txt"
        target.write_text("content")
        link = tmp_path / "link.txt"
        link.symlink_to(target)

        Mover(Uniquifier(_clock)).move(link, trash)

        assert (trash / "link.txt").is_symlink()
        assert target.read_text() == "content"

    def test_uses_rename(self, tmp_path: Path, trash: Path) -> None:
        """The move is a rename, never a copy."""
        source = tmp_path / "file.txt"
        source.write_text("content")

        with patch("filediscard.core.mover.os.rename") as mock_rename:
            Mover(Uniquifier(_clock)).move(source, trash)

        mock_rename.assert_called_once_with(source, trash / "file.txt")

    def test_verbose_reports(self, tmp_path: Path, trash: Path) -> None:
        """Verbose moves are reported as mv lines."""
        source = tmp_path / "file.txt"
        source.write_text("content")
        reports: list[str] = []

        Mover(Uniquifier(_clock), reporter=reports.append).move(source, trash, verbose=True)

        assert reports == [f"mv {source} {trash / 'file.txt'}"]

    def test_quiet_does_not_report(self, tmp_path: Path, trash: Path) -> None:
        """Without verbose nothing is reported."""
        source = tmp_path / "file.txt"
        source.write_text("content")
        reports: list[str] = []

        Mover(Uniquifier(_clock), reporter=reports.append).move(source, trash)

        assert reports == []

    def test_hook_called_after_move(self, tmp_path: Path, trash: Path) -> None:
        """The post-move hook receives source and destination."""
        source = tmp_path / "file.txt"
        source.write_text("content")
        hook = MagicMock()
        hook.after_move.return_value = tmp_path / "info"

        result = Mover(Uniquifier(_clock), hook=hook).move(source, trash)

        hook.after_move.assert_called_once_with(source, trash / "file.txt")
        assert result.info_path == tmp_path / "info"

    def test_hook_failure_is_not_fatal(
        self, tmp_path: Path, trash: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A failing hook is logged and the move still counts."""
        source = tmp_path / "file.txt"
        source.write_text("content")
        hook = MagicMock()
        hook.after_move.side_effect = OSError("read-only")

        result = Mover(Uniquifier(_clock), hook=hook).move(source, trash)

        assert result.trashed is True
        assert result.info_path is None
        assert (trash / "file.txt").exists()
        assert "Could not record trash metadata" in caplog.text

    def test_rename_failure_propagates(self, tmp_path: Path, trash: Path) -> None:
        """Rename errors propagate and the hook is not called."""
        source = tmp_path / "file.txt"
        source.write_text("content")
        hook = MagicMock()

        with (
            patch("filediscard.core.mover.os.rename", side_effect=OSError("EXDEV")),
            pytest.raises(OSError, match="EXDEV"),
        ):
            Mover(Uniquifier(_clock), hook=hook).move(source, trash)

        hook.after_move.assert_not_called()
        assert source.exists()

    def test_default_hook_is_noop(self) -> None:
        """The default hook writes nothing."""
        assert NullPostMoveHook().after_move(Path("/a"), Path("/b")) is None
