"""Clock window live-clock cards and 12H/24H toggle mixin."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from settings_store import get_setting, set_setting
from worldclock.clock_zones import TIME_FORMAT_STORAGE_KEY, ZONE_OPTIONS, ZoneOption
from worldclock.live_clock import ClockReading, read_clocks

CARD_COLUMNS = 4


class ClockCard(QFrame):
    """One zone's card: location with day/night marker, time, date, offset."""

    def __init__(self, zone: ZoneOption, parent=None):
        super().__init__(parent)
        self.zone = zone
        self.setFrameShape(QFrame.StyledPanel)

        layout = QVBoxLayout(self)
        self.location_label = QLabel(zone.label, self)
        self.time_label = QLabel("--:--:--", self)
        self.date_label = QLabel("", self)
        self.offset_label = QLabel("", self)

        time_font = QFont()
        time_font.setPointSize(20)
        time_font.setBold(True)
        self.time_label.setFont(time_font)

        for label in (
            self.location_label,
            self.time_label,
            self.date_label,
            self.offset_label,
        ):
            label.setAlignment(Qt.AlignCenter)
            layout.addWidget(label)

    def show_reading(self, reading: ClockReading) -> None:
        self.location_label.setText(f"{reading.day_night} {reading.label}")
        self.time_label.setText(reading.time)
        self.date_label.setText(reading.date)
        self.offset_label.setText(reading.utc_offset)


class WindowClocksMixin:
    """Adds the clock grid, the per-second tick and the time format toggle."""

    def _restore_time_format(self) -> None:
        saved = get_setting(TIME_FORMAT_STORAGE_KEY, True)
        self.is_24_hour = saved if isinstance(saved, bool) else True

    def _build_time_format_toggle(self, parent_layout) -> None:
        row = QHBoxLayout()
        row.addStretch(1)

        self.format_group = QButtonGroup(self)
        self.format_group.setExclusive(True)
        self.format_12h_button = QPushButton("12H")
        self.format_24h_button = QPushButton("24H")
        for button in (self.format_12h_button, self.format_24h_button):
            button.setCheckable(True)
            self.format_group.addButton(button)
            row.addWidget(button)

        self.format_24h_button.setChecked(self.is_24_hour)
        self.format_12h_button.setChecked(not self.is_24_hour)
        self.format_12h_button.clicked.connect(lambda: self.set_time_format(False))
        self.format_24h_button.clicked.connect(lambda: self.set_time_format(True))

        parent_layout.addLayout(row)

    def _build_clock_grid(self, parent_layout) -> None:
        grid = QGridLayout()
        self.clock_cards: Dict[str, ClockCard] = {}
        for index, zone in enumerate(ZONE_OPTIONS):
            card = ClockCard(zone, self)
            self.clock_cards[zone.key] = card
            grid.addWidget(card, index // CARD_COLUMNS, index % CARD_COLUMNS)
        parent_layout.addLayout(grid)

    def set_time_format(self, is_24_hour: bool) -> None:
        if is_24_hour == self.is_24_hour:
            return
        self.is_24_hour = is_24_hour
        set_setting(TIME_FORMAT_STORAGE_KEY, is_24_hour)
        self.update_time()
        self.refresh_converter_for_format_change()

    def update_time(self) -> None:
        """Slot called by the tick timer once per second."""
        now = datetime.now(timezone.utc)
        for reading in read_clocks(now, self.is_24_hour):
            self.clock_cards[reading.key].show_reading(reading)
