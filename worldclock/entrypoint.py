"""Application entrypoint.

Kept small so `main.py` can remain a thin wrapper.
"""

from __future__ import annotations

import sys

from PySide6.QtCore import QCoreApplication, QLoggingCategory
from PySide6.QtWidgets import QApplication

from worldclock.window import ClockWindow


def main() -> int:
    """Run the WorldClock Qt application."""
    QLoggingCategory.setFilterRules("qt.text.font.db=false")

    app = QApplication(sys.argv)

    QCoreApplication.setOrganizationName("WorldClock")
    QCoreApplication.setApplicationName("WorldClock")

    window = ClockWindow()
    window.show()
    return app.exec()
