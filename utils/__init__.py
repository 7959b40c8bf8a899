"""Utility modules for logging helpers."""

__all__ = [
    "format_rows",
    "log_layout_summary",
]

from .helpers import (
    format_rows,
    log_layout_summary,
)
