"""
Pytest configuration and shared fixtures for Grid Stack tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def temp_config_file() -> Generator[Path, None, None]:
    """Create a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".ini", delete=False) as f:
        f.write("""
[logging]
level = DEBUG
file = ./logs/test.log
max_bytes = 1048576
backup_count = 2
stdout = false

[grid]
width_mode = fixed
width = 320
min_cell_width = 100
spacing = 10
num_items = 7
alignment = center
scrollable = false
""")
        f.flush()
        yield Path(f.name)
    os.unlink(f.name)


@pytest.fixture
def restore_config():
    """Snapshot core.config globals and put them back after the test."""
    from core import config

    names = [n for n in dir(config) if n.isupper()]
    saved = {n: getattr(config, n) for n in names}
    yield config
    for name, value in saved.items():
        setattr(config, name, value)


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication instance for widget tests.

    This fixture is session-scoped to avoid creating multiple QApplication instances.
    """
    # Use offscreen platform for headless testing
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        pytest.skip("PyQt6 not available")

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
