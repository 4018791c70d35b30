"""Data models for filediscard.

This module exports the core data structures used throughout the library.
"""

from filediscard.models.entry import DiscardResult, Entry
from filediscard.models.options import DiscardOptions

__all__ = [
    "DiscardOptions",
    "DiscardResult",
    "Entry",
]
