"""Platform trash variants and variant selection.

The host picks a variant once at startup (usually via ``select_variant``)
and hands it to a Discarder.
"""

import sys
from collections.abc import Mapping

from filediscard.core.paths import get_data_home
from filediscard.errors import UnsupportedPlatformError
from filediscard.platforms.base import PlatformVariant
from filediscard.platforms.linux import TrashInfoWriter, freedesktop_variant
from filediscard.platforms.macos import macos_variant

VARIANT_NAMES = ("macos", "freedesktop")


def variant_by_name(name: str, environ: Mapping[str, str] | None = None) -> PlatformVariant:
    """Create a variant from its identifier.

    Args:
        name: "macos" or "freedesktop".
        environ: Environment used for XDG lookups. Defaults to os.environ.

    Returns:
        The requested PlatformVariant.

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "macos":
        return macos_variant()
    if name == "freedesktop":
        return freedesktop_variant(get_data_home(environ))
    msg = f"Unknown trash variant: {name!r} (expected one of {', '.join(VARIANT_NAMES)})"
    raise ValueError(msg)


def select_variant(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> PlatformVariant:
    """Select the trash variant for a platform identifier.

    Args:
        platform: Platform string as in ``sys.platform``. Defaults to the
            running platform.
        environ: Environment used for XDG lookups. Defaults to os.environ.

    Returns:
        PlatformVariant for the platform.

    Raises:
        UnsupportedPlatformError: If the platform has no trash variant.
    """
    platform = (platform or sys.platform).lower()
    if platform.startswith("darwin"):
        return variant_by_name("macos", environ)
    if platform.startswith("linux") or "bsd" in platform:
        return variant_by_name("freedesktop", environ)
    msg = f"Unsupported platform: {platform}"
    raise UnsupportedPlatformError(msg)


__all__ = [
    "VARIANT_NAMES",
    "PlatformVariant",
    "TrashInfoWriter",
    "freedesktop_variant",
    "macos_variant",
    "select_variant",
    "variant_by_name",
]
