"""filediscard - move files into the trash instead of deleting them.

The module-level ``discard`` function uses a process default Discarder that
is built on first use from the running platform and the user's settings.
Hosts that need a different configuration build their own Discarder and
install it with ``set_discarder``.
"""

import os
from typing import Any

from filediscard.core.config import load_settings_or_default
from filediscard.core.discarder import Discarder
from filediscard.models.entry import DiscardResult
from filediscard.models.options import DiscardOptions
from filediscard.platforms import select_variant, variant_by_name

__version__ = "0.1.0"

_discarder: Discarder | None = None


def get_discarder() -> Discarder:
    """Get the process default Discarder, creating it on first use.

    Returns:
        The shared Discarder instance.

    Raises:
        UnsupportedPlatformError: If the platform has no trash variant.
        SettingsError: If the settings file is invalid.
    """
    global _discarder
    if _discarder is None:
        settings = load_settings_or_default()
        if settings.variant == "auto":
            variant = select_variant()
        else:
            variant = variant_by_name(settings.variant)
        _discarder = Discarder(variant, settings=settings)
    return _discarder


def set_discarder(discarder: Discarder | None) -> None:
    """Install the process default Discarder.

    Args:
        discarder: Discarder to use, or None to rebuild on next use.
    """
    global _discarder
    _discarder = discarder


def discard(
    target: str | os.PathLike[str],
    options: DiscardOptions | None = None,
    **option_overrides: Any,
) -> DiscardResult:
    """Discard target using the process default Discarder.

    See ``Discarder.discard`` for arguments and errors.
    """
    return get_discarder().discard(target, options, **option_overrides)


__all__ = [
    "DiscardOptions",
    "DiscardResult",
    "Discarder",
    "__version__",
    "discard",
    "get_discarder",
    "set_discarder",
]
