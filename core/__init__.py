"""Core modules for grid math, row layout, and configuration."""

__all__ = [
    # grid_calculator module exports
    "GridCalculator",
    "GridConfigError",
    "GridDefinition",
    "calculate",
    # layout module exports
    "Alignment",
    "GridLayout",
    "GridStack",
    "ViewWidth",
    "chunked",
    "items_for",
    # config module exports
    "load_config",
    "apply_config",
    "configure_logging",
    "grid_stack_from_config",
    "CONFIG_PATH",
]

from .grid_calculator import GridCalculator, GridConfigError, GridDefinition, calculate
from .layout import Alignment, GridLayout, GridStack, ViewWidth, chunked, items_for
from .config import (
    load_config,
    apply_config,
    configure_logging,
    grid_stack_from_config,
    CONFIG_PATH,
)
