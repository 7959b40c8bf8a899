# ============================================================
# TABLE OF CONTENTS
# ------------------------------------------------------------
# 1. CONFIG + LOGGING
# 2. DEMO CELLS
# 3. MAIN ENTRYPOINT
# ============================================================

# ------------------------------------------------------------
# Standard library imports
# ------------------------------------------------------------
import logging
import signal
import sys

# ------------------------------------------------------------
# Third-party imports
# ------------------------------------------------------------
import qdarkstyle
from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtCore import Qt, QTimer

# ------------------------------------------------------------
# Local imports
# ------------------------------------------------------------
from core import config
from ui import build_grid_view
from utils import log_layout_summary

# ============================================================
# DEMO CELLS
# ------------------------------------------------------------
CELL_HEIGHT = 80
CELL_COLORS = ("#3d6a8c", "#5b8c3d", "#8c5b3d", "#6a3d8c", "#8c3d5b", "#3d8c7f")


def make_cell(index, column_width):
    """Colored tile showing its index and the width it was given."""
    label = QtWidgets.QLabel(f"#{index}\n{column_width:.0f}px")
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    label.setMinimumHeight(CELL_HEIGHT)
    label.setAttribute(QtCore.Qt.WidgetAttribute.WA_StyledBackground, True)
    label.setStyleSheet(
        f"background: {CELL_COLORS[index % len(CELL_COLORS)]}; color: #ffffff; border-radius: 4px;"
    )
    return label


# ============================================================
# MAIN ENTRYPOINT
# ------------------------------------------------------------
def main():
    """Load config, build the grid window, and start the event loop."""
    config.apply_config(config.load_config())
    config.configure_logging()
    logging.info("Starting grid stack demo")

    app = QtWidgets.QApplication(sys.argv)
    signal.signal(signal.SIGINT, lambda sig, frame: app.quit())

    # Allow Python to handle SIGINT properly in Qt event loop
    sigint_timer = QTimer()
    sigint_timer.timeout.connect(lambda: None)
    sigint_timer.start(500)

    app.setStyle(QtWidgets.QStyleFactory.create("Fusion"))
    app.setStyleSheet(qdarkstyle.load_stylesheet(qt_api="pyqt6"))

    grid_stack = config.grid_stack_from_config(make_cell)
    outer, grid_widget = build_grid_view(grid_stack)
    grid_widget.layout_changed.connect(log_layout_summary)

    mw = QtWidgets.QMainWindow()
    mw.setWindowTitle("Grid Stack")
    mw.setCentralWidget(outer)
    mw.resize(800, 600)
    mw.show()

    if grid_widget.current_layout is not None:
        log_layout_summary(grid_widget.current_layout)

    QtGui.QShortcut(QtGui.QKeySequence("q"), mw, app.quit)
    logging.info("Resize the window to reflow the grid. q=quit.")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
