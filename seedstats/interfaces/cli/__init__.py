"""
Cli package.
"""

from .ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_SUCCESS,
    InfoPanel,
    TableDisplay,
    build_report_table,
    configure_logging,
    print_error,
    print_info,
    print_success,
    show_spinner,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_SUCCESS",
    "InfoPanel",
    "TableDisplay",
    "build_report_table",
    "configure_logging",
    "print_error",
    "print_info",
    "print_success",
    "show_spinner",
]
