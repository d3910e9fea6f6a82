"""Main application window."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from worldclock.window_clocks import WindowClocksMixin
from worldclock.window_converter import WindowConverterMixin


class ClockWindow(QMainWindow, WindowClocksMixin, WindowConverterMixin):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("World Clock")
        self._set_scaled_initial_size(1.5)

        self._restore_time_format()

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        self._build_time_format_toggle(self.layout)
        self._build_clock_grid(self.layout)
        self._build_converter_panel(self.layout)

        self._init_converter()
        self.update_time()

        self.tick_timer = QTimer(self)
        self.tick_timer.timeout.connect(self.update_time)
        self.tick_timer.start(1000)

    def _set_scaled_initial_size(self, scale: float = 1.5) -> None:
        base_w, base_h = 640, 480
        self.resize(int(base_w * scale), int(base_h * scale))
