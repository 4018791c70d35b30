"""Path resolution and XDG-compliant locations for filediscard.

This module normalizes discard targets into ``Path`` values and provides
the standard locations used by the library:

- Home directory: resolved ``~`` (symlinks followed)
- Config: ~/.config/filediscard/ (or $XDG_CONFIG_HOME/filediscard/)
- Data home: ~/.local/share (or $XDG_DATA_HOME)
"""

import os
from collections.abc import Mapping
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "filediscard"


def resolve_target(obj: str | os.PathLike[str]) -> Path:
    """Normalize a discard target into a Path.

    Path instances are returned unchanged; path-like objects and strings
    are converted through ``os.fspath``.

    Args:
        obj: A Path, any os.PathLike, or a string.

    Returns:
        Path for the target.

    Raises:
        TypeError: If obj is not a string or path-like object.
    """
    if isinstance(obj, Path):
        return obj
    path = os.fspath(obj)
    if not isinstance(path, str):
        msg = f"str or PathLike expected, not {type(path).__name__}"
        raise TypeError(msg)
    return Path(path)


def get_home_dir(home: str | os.PathLike[str] | None = None) -> Path:
    """Get the real path of the user's home directory.

    Args:
        home: Optional override for the home directory.

    Returns:
        Absolute home directory path with symlinks resolved.
    """
    base = Path(home) if home is not None else Path.home()
    return Path(os.path.realpath(base.expanduser()))


def get_data_home(environ: Mapping[str, str] | None = None) -> Path | None:
    """Get the XDG data home when it is explicitly configured.

    Args:
        environ: Environment mapping to consult. Defaults to os.environ.

    Returns:
        Absolute $XDG_DATA_HOME path, or None when unset or relative
        (relative values are ignored per the XDG base directory rules).
    """
    env = os.environ if environ is None else environ
    value = env.get("XDG_DATA_HOME")
    if value and os.path.isabs(value):
        return Path(value)
    return None


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/filediscard/ (or XDG_CONFIG_HOME/filediscard/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/filediscard/config.toml.
    """
    return get_config_dir() / "config.toml"


def ensure_dir(path: Path, name: str, mode: int = 0o700) -> Path:
    """Create a directory and its missing ancestors.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.
        mode: Permission bits for newly created directories.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    try:
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path
