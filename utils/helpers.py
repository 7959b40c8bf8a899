"""
Utility functions for Grid Stack.

Includes layout summaries for logging and debugging.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.layout import GridLayout


def format_rows(rows: list[list[int]], max_rows: int = 4) -> str:
    """Render rows as '[0 1 2] [3 4 5] ...', truncated after max_rows."""
    shown = " ".join("[" + " ".join(str(i) for i in row) + "]" for row in rows[:max_rows])
    hidden = len(rows) - max_rows
    if hidden > 0:
        shown += f" ... (+{hidden} rows)"
    return shown


def log_layout_summary(grid_layout: GridLayout, level: int = logging.INFO) -> None:
    """Log a one-line summary of a resolved grid layout.

    Args:
        grid_layout: Layout returned by GridStack.resolve()
        level: Logging level for the summary line
    """
    remainder = 0
    if grid_layout.rows:
        last = len(grid_layout.rows[-1])
        if last < grid_layout.column_count:
            remainder = last

    logging.log(
        level,
        "Grid width=%.1f cols=%d col_width=%.1f items=%d rows=%d remainder=%d align=%s scroll=%s",
        grid_layout.width,
        grid_layout.column_count,
        grid_layout.column_width,
        grid_layout.num_items,
        len(grid_layout.rows),
        remainder,
        grid_layout.alignment.value,
        grid_layout.is_scrollable,
    )
    if grid_layout.column_width <= 0:
        logging.warning("Non-positive column width for available width %.1f", grid_layout.width)
    logging.debug("Rows: %s", format_rows(grid_layout.rows))
