"""Console styles for the filediscard CLI.

Each style the CLI prints with is named here: table chrome, the four
message kinds, and the source/destination columns of trash tables.
"""

from functools import cache
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from rich.theme import Theme

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class ThemeColors(BaseModel):
    """Colors for CLI output, as #RGB or #RRGGBB hex codes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Table chrome
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"

    # Messages
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # Trash table paths
    source: HexColor = "#f5b332"
    destination: HexColor = "#c1ff62"

    def styles(self) -> dict[str, str]:
        """Map style names used in markup and tables to Rich style strings."""
        return {
            "bold_header": f"bold {self.header}",
            "border": self.border,
            "muted": self.muted,
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "info": self.info,
            "source": self.source,
            "destination": self.destination,
        }


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich theme from colors (defaults when None)."""
    return Theme((colors or ThemeColors()).styles())


@cache
def get_theme() -> Theme:
    """Get the shared Rich theme used by the CLI consoles."""
    return get_rich_theme()
