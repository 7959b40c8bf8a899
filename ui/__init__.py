"""UI modules for the Qt grid widget."""

__all__ = [
    "GridStackWidget",
    "build_grid_view",
]

from .grid_widget import GridStackWidget, build_grid_view
