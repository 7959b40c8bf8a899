"""
Configuration for Grid Stack.

Reads an INI file into module-level settings and sets up logging.
"""

from __future__ import annotations

import configparser
import logging
import math
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.layout import Alignment, ContentCallback, GridStack, ViewWidth

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.ini"
CONFIG_ENV_VAR = "GRID_STACK_CONFIG"

# ============================================================
# LOGGING
# ------------------------------------------------------------
LOG_LEVEL = "INFO"
LOG_FILE = "./logs/grid_stack.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_TO_STDOUT = True
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# ============================================================
# GRID
# ------------------------------------------------------------
GRID_WIDTH_MODE = "automatic"
GRID_FIXED_WIDTH = 800.0
GRID_MIN_CELL_WIDTH = 100.0
GRID_SPACING = 10.0
GRID_NUM_ITEMS = 12
GRID_ALIGNMENT = "leading"
GRID_SCROLLABLE = True

_WIDTH_MODES = ("automatic", "fixed")


def _as_bool(value: str, default: bool) -> bool:
    v = str(value).strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def _as_int(
    value: str,
    default: int,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    try:
        result = int(str(value).strip())
    except ValueError:
        return default
    if min_value is not None:
        result = max(min_value, result)
    if max_value is not None:
        result = min(max_value, result)
    return result


def _as_float(
    value: str,
    default: float,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    try:
        result = float(str(value).strip())
    except ValueError:
        return default
    if not math.isfinite(result):
        return default
    if min_value is not None:
        result = max(min_value, result)
    if max_value is not None:
        result = min(max_value, result)
    return result


def _as_choice(value: str, default: str, choices: tuple[str, ...]) -> str:
    v = str(value).strip().lower()
    return v if v in choices else default


def load_config(path: Optional[str] = None) -> configparser.ConfigParser:
    """
    Read the INI file. Falls back to $GRID_STACK_CONFIG, then config.ini
    next to the project root. A missing file gives an empty parser.
    """
    parser = configparser.ConfigParser()
    config_path = path or os.environ.get(CONFIG_ENV_VAR) or str(CONFIG_PATH)
    if not parser.read(config_path):
        logging.debug("No config file at %s, using defaults", config_path)
    return parser


def apply_config(parser: configparser.ConfigParser) -> None:
    """Copy parsed values into module globals, clamping to sane ranges."""
    global LOG_LEVEL, LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT, LOG_TO_STDOUT
    global GRID_WIDTH_MODE, GRID_FIXED_WIDTH, GRID_MIN_CELL_WIDTH, GRID_SPACING
    global GRID_NUM_ITEMS, GRID_ALIGNMENT, GRID_SCROLLABLE

    if parser.has_section("logging"):
        sec = parser["logging"]
        LOG_LEVEL = sec.get("level", LOG_LEVEL).strip().upper()
        LOG_FILE = sec.get("file", LOG_FILE).strip()
        LOG_MAX_BYTES = _as_int(sec.get("max_bytes", ""), LOG_MAX_BYTES, min_value=1024)
        LOG_BACKUP_COUNT = _as_int(sec.get("backup_count", ""), LOG_BACKUP_COUNT, min_value=0, max_value=20)
        LOG_TO_STDOUT = _as_bool(sec.get("stdout", ""), LOG_TO_STDOUT)

    if parser.has_section("grid"):
        sec = parser["grid"]
        GRID_WIDTH_MODE = _as_choice(sec.get("width_mode", ""), GRID_WIDTH_MODE, _WIDTH_MODES)
        GRID_FIXED_WIDTH = _as_float(sec.get("width", ""), GRID_FIXED_WIDTH, min_value=0.0)
        GRID_MIN_CELL_WIDTH = _as_float(sec.get("min_cell_width", ""), GRID_MIN_CELL_WIDTH, min_value=1.0)
        GRID_SPACING = _as_float(sec.get("spacing", ""), GRID_SPACING, min_value=0.0)
        GRID_NUM_ITEMS = _as_int(sec.get("num_items", ""), GRID_NUM_ITEMS, min_value=0, max_value=10000)
        GRID_ALIGNMENT = _as_choice(
            sec.get("alignment", ""),
            GRID_ALIGNMENT,
            tuple(a.value for a in Alignment),
        )
        GRID_SCROLLABLE = _as_bool(sec.get("scrollable", ""), GRID_SCROLLABLE)


def configure_logging() -> None:
    """Log to a rotating file, plus stdout when enabled."""
    handlers: list[logging.Handler] = []
    if LOG_FILE:
        log_dir = os.path.dirname(LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
        )
    if LOG_TO_STDOUT or not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def view_width() -> ViewWidth:
    if GRID_WIDTH_MODE == "fixed":
        return ViewWidth.fixed(GRID_FIXED_WIDTH)
    return ViewWidth.automatic()


def grid_stack_from_config(content: ContentCallback) -> GridStack:
    """Build a GridStack from the current [grid] settings."""
    return GridStack(
        width=view_width(),
        is_scrollable=GRID_SCROLLABLE,
        min_cell_width=GRID_MIN_CELL_WIDTH,
        spacing=GRID_SPACING,
        num_items=GRID_NUM_ITEMS,
        content=content,
        alignment=Alignment(GRID_ALIGNMENT),
    )
