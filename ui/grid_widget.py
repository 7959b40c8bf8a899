"""
Qt widgets for Grid Stack.

GridStackWidget lays out one child widget per item on the grid computed by
core.layout, recomputing it whenever its own width changes.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from core.layout import GridLayout, GridStack


def _cell_height(cell: QtWidgets.QWidget) -> int:
    """Preferred height of a cell, within its min/max constraints."""
    return cell.sizeHint().expandedTo(cell.minimumSize()).boundedTo(cell.maximumSize()).height()


class GridStackWidget(QtWidgets.QWidget):
    """Places content(index, column_width) widgets on a responsive grid."""

    layout_changed = pyqtSignal(object)

    def __init__(self, grid_stack: GridStack, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.grid_stack = grid_stack
        self.current_layout: Optional[GridLayout] = None
        self._cells: list[QtWidgets.QWidget] = []
        self._content_height = 0

        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Minimum,
        )

        # Fixed grids never follow the host, lay them out once up front
        if not grid_stack.view_width.is_automatic:
            fixed_layout = self.apply_width()
            self.setFixedWidth(max(0, round(fixed_layout.width)))

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:
        super().resizeEvent(event)
        if self.grid_stack.view_width.is_automatic:
            self.apply_width(event.size().width())

    def sizeHint(self) -> QtCore.QSize:
        width = round(self.current_layout.width) if self.current_layout else 0
        return QtCore.QSize(width, self._content_height)

    def minimumSizeHint(self) -> QtCore.QSize:
        # Width stays 0 so the host can always shrink us and trigger a relayout
        return QtCore.QSize(0, self._content_height)

    def apply_width(self, width: Optional[float] = None) -> GridLayout:
        """Recompute the grid for `width` and rebuild cells if it changed."""
        new_layout = self.grid_stack.resolve(width)
        if new_layout == self.current_layout:
            return new_layout

        self._rebuild_cells(new_layout)
        self.current_layout = new_layout
        self._place_cells(new_layout)
        logging.debug(
            "Grid relayout width=%.1f cols=%d col_width=%.1f rows=%d",
            new_layout.width,
            new_layout.column_count,
            new_layout.column_width,
            len(new_layout.rows),
        )
        self.layout_changed.emit(new_layout)
        return new_layout

    def cell_widgets(self) -> list[QtWidgets.QWidget]:
        return list(self._cells)

    def _clear_cells(self) -> None:
        for cell in self._cells:
            cell.hide()
            cell.setParent(None)
            cell.deleteLater()
        self._cells = []

    def _rebuild_cells(self, grid_layout: GridLayout) -> None:
        self._clear_cells()
        column_width = max(0, round(grid_layout.column_width))
        for index, width in grid_layout.cells():
            try:
                cell = self.grid_stack.content(index, width)
            except Exception:
                logging.exception("Content callback failed for cell %d", index)
                raise
            if not isinstance(cell, QtWidgets.QWidget):
                raise TypeError(
                    f"content callback must return a QWidget, got {type(cell).__name__}"
                )
            cell.setParent(self)
            cell.setFixedWidth(column_width)
            cell.show()
            self._cells.append(cell)

    def _place_cells(self, grid_layout: GridLayout) -> None:
        y = grid_layout.top_padding
        cell_iter = iter(self._cells)
        for row_index, row in enumerate(grid_layout.rows):
            row_cells = [next(cell_iter) for _ in row]
            row_height = max(1, max(_cell_height(c) for c in row_cells))
            for column, cell in enumerate(row_cells):
                x = grid_layout.cell_x(row_index, column)
                cell.setGeometry(
                    round(x),
                    round(y),
                    max(0, round(grid_layout.column_width)),
                    row_height,
                )
            y += row_height + grid_layout.spacing

        if grid_layout.rows:
            y -= grid_layout.spacing
        self._content_height = max(0, round(y))
        self.setMinimumHeight(self._content_height)
        self.updateGeometry()


def build_grid_view(
    grid_stack: GridStack,
    parent: Optional[QtWidgets.QWidget] = None,
) -> tuple[QtWidgets.QWidget, GridStackWidget]:
    """
    Create the grid widget, wrapped in a vertical scroll area when the grid
    is scrollable. Returns (outer widget, grid widget).
    """
    grid_widget = GridStackWidget(grid_stack)
    if not grid_stack.is_scrollable:
        grid_widget.setParent(parent)
        return grid_widget, grid_widget

    area = QtWidgets.QScrollArea(parent)
    area.setWidgetResizable(True)
    area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
    area.setFrameShape(QtWidgets.QFrame.Shape.NoFrame)
    area.setWidget(grid_widget)
    return area, grid_widget
