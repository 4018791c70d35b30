"""Utility modules for filediscard.

This module exports commonly used utility functions.
"""

from filediscard.utils.formatting import (
    console,
    create_trash_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
    report_operation,
)

__all__ = [
    "console",
    "create_trash_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "report_operation",
]
