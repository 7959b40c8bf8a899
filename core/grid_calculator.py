"""
Column math for Grid Stack.

Works out how many equal-width columns fit into a given width and how wide
each of them has to be so the grid spans that width edge to edge.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass


class GridConfigError(ValueError):
    """Raised when grid parameters cannot produce a layout."""


@dataclass(frozen=True)
class GridDefinition:
    column_count: int
    column_width: float


def calculate(
    available_width: float,
    minimum_cell_width: float,
    cell_spacing: float,
) -> GridDefinition:
    """
    Return the column count and column width for the given width.

    The count is the largest n with n cells of at least minimum_cell_width
    and n-1 gaps of cell_spacing inside available_width, but never less
    than 1. The width then stretches those columns to fill available_width,
    so a forced single column may overflow (or be non-positive for a
    degenerate width).

    Raises:
        GridConfigError: a non-finite argument, minimum_cell_width <= 0
            or cell_spacing < 0
    """
    for name, value in (
        ("available_width", available_width),
        ("minimum_cell_width", minimum_cell_width),
        ("cell_spacing", cell_spacing),
    ):
        if not math.isfinite(value):
            raise GridConfigError(f"{name} must be finite, got {value!r}")
    if minimum_cell_width <= 0:
        raise GridConfigError(
            f"minimum_cell_width must be > 0, got {minimum_cell_width!r}"
        )
    if cell_spacing < 0:
        raise GridConfigError(f"cell_spacing must be >= 0, got {cell_spacing!r}")

    fitting = math.floor((available_width + cell_spacing) / (minimum_cell_width + cell_spacing))
    column_count = max(1, fitting)
    if fitting < 1:
        logging.debug(
            "Width %.1f below minimum cell width %.1f, forcing one column",
            available_width,
            minimum_cell_width,
        )

    column_width = (available_width - (column_count - 1) * cell_spacing) / column_count
    return GridDefinition(column_count=column_count, column_width=column_width)


class GridCalculator:
    """Stateless holder for calculate(), kept by views that want an instance."""

    def calculate(
        self,
        available_width: float,
        minimum_cell_width: float,
        cell_spacing: float,
    ) -> GridDefinition:
        return calculate(available_width, minimum_cell_width, cell_spacing)
