"""Unit tests for discard settings persistence."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from filediscard.core.config import (
    DiscardSettings,
    SettingsError,
    SettingsNotFoundError,
    SettingsParseError,
    load_settings,
    load_settings_or_default,
    save_settings,
)
from pydantic import ValidationError


class TestDiscardSettings:
    """Tests for the DiscardSettings model."""

    def test_defaults(self) -> None:
        """Trash creation is off and the variant is chosen by platform."""
        settings = DiscardSettings()

        assert settings.create_trash_when_missing is False
        assert settings.variant == "auto"

    def test_rejects_unknown_variant(self) -> None:
        """Only known variants are accepted."""
        with pytest.raises(ValidationError):
            DiscardSettings(variant="windows")  # type: ignore[arg-type]

    def test_rejects_unknown_fields(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            DiscardSettings(trash_dir="/tmp")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Settings are replaced, not mutated."""
        settings = DiscardSettings()

        with pytest.raises(ValidationError):
            settings.create_trash_when_missing = True  # type: ignore[misc]


class TestLoadSettings:
    """Tests for load_settings."""

    def test_loads_valid_file(self, tmp_path: Path) -> None:
        """A valid file is parsed into settings."""
        path = tmp_path / "config.toml"
        path.write_text('create_trash_when_missing = true\nvariant = "freedesktop"\n')

        settings = load_settings(path)

        assert settings.create_trash_when_missing is True
        assert settings.variant == "freedesktop"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises SettingsNotFoundError."""
        with pytest.raises(SettingsNotFoundError, match="Settings not found"):
            load_settings(tmp_path / "config.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises SettingsParseError."""
        path = tmp_path / "config.toml"
        path.write_text("create_trash_when_missing = [")

        with pytest.raises(SettingsParseError, match="Invalid TOML syntax"):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text('variant = "amiga"\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_default_path(self, tmp_path: Path) -> None:
        """Without a path the XDG config location is used."""
        config_dir = tmp_path / "filediscard"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("create_trash_when_missing = true\n")

        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            settings = load_settings()

        assert settings.create_trash_when_missing is True


class TestLoadSettingsOrDefault:
    """Tests for load_settings_or_default."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing file gives default settings."""
        assert load_settings_or_default(tmp_path / "config.toml") == DiscardSettings()

    def test_parse_errors_propagate(self, tmp_path: Path) -> None:
        """Broken files are still reported."""
        path = tmp_path / "config.toml"
        path.write_text("= nope")

        with pytest.raises(SettingsParseError):
            load_settings_or_default(path)


class TestSaveSettings:
    """Tests for save_settings."""

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Saved settings load back identically."""
        path = tmp_path / "nested" / "config.toml"
        settings = DiscardSettings(create_trash_when_missing=True, variant="macos")

        assert save_settings(settings, path) == path
        assert load_settings(path) == settings

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """The atomic write leaves only the target file."""
        path = tmp_path / "config.toml"

        save_settings(DiscardSettings(), path)

        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_unwritable_directory(self, tmp_path: Path) -> None:
        """Directory creation failures become SettingsError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(SettingsError, match="Cannot create config directory"):
            save_settings(DiscardSettings(), blocker / "config.toml")
