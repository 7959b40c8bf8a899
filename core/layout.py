"""
Row chunking and layout orchestration for Grid Stack.

Turns a grid definition into ordered rows of item indexes, and resolves the
width a grid should be laid out at (fixed, or measured by the host).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from core.grid_calculator import GridCalculator, GridConfigError, GridDefinition

T = TypeVar("T")

Row = list[int]
ContentCallback = Callable[[int, float], Any]


class Alignment(enum.Enum):
    """Horizontal placement of a row inside the grid frame."""

    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


@dataclass(frozen=True)
class ViewWidth:
    """Either a fixed width or 'measure it from the host' (automatic)."""

    width: Optional[float] = None

    @classmethod
    def fixed(cls, width: float) -> ViewWidth:
        return cls(width=float(width))

    @classmethod
    def automatic(cls) -> ViewWidth:
        return cls(width=None)

    @property
    def is_automatic(self) -> bool:
        return self.width is None

    @property
    def absolute_width(self) -> Optional[float]:
        return self.width


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive groups of `size`, keeping order."""
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size!r}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def items_for(num_items: int) -> list[int]:
    """Item identifiers 0..num_items-1 (empty for negative counts)."""
    return list(range(max(0, num_items)))


def layout(num_items: int, grid_definition: GridDefinition, available_width: float) -> list[Row]:
    """
    Partition items into rows of grid_definition.column_count.

    available_width is not read here, the column count was already derived
    from it by calculate().
    """
    return chunked(items_for(num_items), grid_definition.column_count)


@dataclass
class GridLayout:
    """
    Everything a renderer needs to place the cells of one grid.

    Not hashable: rows are plain lists, built fresh on every resolve().
    """

    width: float
    grid: GridDefinition
    rows: list[Row]
    spacing: float
    alignment: Alignment = Alignment.LEADING
    is_scrollable: bool = False

    @property
    def column_count(self) -> int:
        return self.grid.column_count

    @property
    def column_width(self) -> float:
        return self.grid.column_width

    @property
    def top_padding(self) -> float:
        return self.spacing

    @property
    def row_padding(self) -> float:
        return self.spacing

    @property
    def num_items(self) -> int:
        return sum(len(row) for row in self.rows)

    def cells(self) -> Iterator[tuple[int, float]]:
        """Yield (index, column_width) for every item in source order."""
        for row in self.rows:
            for index in row:
                yield index, self.column_width

    def row_width(self, row: Sequence[int]) -> float:
        if not row:
            return 0.0
        return len(row) * self.column_width + (len(row) - 1) * self.spacing

    def row_offset(self, row: Sequence[int]) -> float:
        """X offset of a row inside the frame for the configured alignment."""
        slack = self.width - self.row_width(row)
        if self.alignment is Alignment.CENTER:
            return slack / 2.0
        if self.alignment is Alignment.TRAILING:
            return slack
        return 0.0

    def cell_x(self, row_index: int, column: int) -> float:
        row = self.rows[row_index]
        if not 0 <= column < len(row):
            raise IndexError(f"column {column} out of range for row {row_index}")
        return self.row_offset(row) + column * (self.column_width + self.spacing)


class GridStack:
    """
    Grid of `num_items` equal-width cells.

    Holds the grid parameters and a content callback; every call to
    resolve() recomputes the grid for the current width. In automatic mode
    the host has to pass the width it measured.
    """

    def __init__(
        self,
        width: ViewWidth,
        is_scrollable: bool,
        min_cell_width: float,
        spacing: float,
        num_items: int,
        content: ContentCallback,
        alignment: Alignment = Alignment.LEADING,
    ):
        self.view_width = width
        self.is_scrollable = is_scrollable
        self.min_cell_width = min_cell_width
        self.spacing = spacing
        self.num_items = num_items
        self.alignment = alignment
        self.content = content
        self._calculator = GridCalculator()

    @property
    def items(self) -> list[int]:
        return items_for(self.num_items)

    def width_for(self, measured_width: Optional[float] = None) -> float:
        """Pick the width to lay out at: the fixed one, else the measurement."""
        if not self.view_width.is_automatic:
            return self.view_width.absolute_width
        if measured_width is None:
            raise GridConfigError("automatic width needs a measured width")
        return float(measured_width)

    def resolve(self, measured_width: Optional[float] = None) -> GridLayout:
        width = self.width_for(measured_width)
        grid = self._calculator.calculate(
            available_width=width,
            minimum_cell_width=self.min_cell_width,
            cell_spacing=self.spacing,
        )
        return GridLayout(
            width=width,
            grid=grid,
            rows=layout(self.num_items, grid, width),
            spacing=self.spacing,
            alignment=self.alignment,
            is_scrollable=self.is_scrollable,
        )

    def render(self, measured_width: Optional[float] = None) -> list[list[Any]]:
        """Resolve the grid and call content(index, column_width) per cell."""
        grid_layout = self.resolve(measured_width)
        return [
            [self.content(index, grid_layout.column_width) for index in row]
            for row in grid_layout.rows
        ]
