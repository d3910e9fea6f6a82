"""Clock window converter panel mixin."""

from __future__ import annotations

from PySide6.QtCore import QDate, QStringListModel, Qt
from PySide6.QtWidgets import (
    QCompleter,
    QDateEdit,
    QGridLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
)

from worldclock.converter import (
    INVALID_INPUT_MESSAGE,
    ConverterState,
    compute_converter_view_data,
    default_converter_state,
    load_converter_state,
    save_converter_state,
    swap_converter_state,
)
from worldclock.timezones import (
    filter_time_zone_options,
    find_time_zone_option_by_input,
    format_zone_input_value,
)
from worldclock.wall_time import format_source_time_for_display, parse_source_time_to_24

QT_DATE_FORMAT = "yyyy-MM-dd"
# one day inside the datetime range so every zone can show the result
MIN_SOURCE_DATE = QDate(1, 1, 2)
MAX_SOURCE_DATE = QDate(9999, 12, 30)
ZONE_SUGGESTION_LIMIT = 50


class WindowConverterMixin:
    """Adds the source/target converter and keeps it in sync with its state."""

    def _build_converter_panel(self, parent_layout) -> None:
        box = QGroupBox("Time zone converter", self)
        grid = QGridLayout(box)

        self.source_zone_input = self._zone_line_edit(box)
        self.target_zone_input = self._zone_line_edit(box)
        self.source_zone_name = QLabel("", box)
        self.target_zone_name = QLabel("", box)

        self.source_time_input = QLineEdit(box)
        self.source_date_input = QDateEdit(box)
        self.source_date_input.setCalendarPopup(True)
        self.source_date_input.setDisplayFormat(QT_DATE_FORMAT)
        self.source_date_input.setDateRange(MIN_SOURCE_DATE, MAX_SOURCE_DATE)
        self.source_date_display = QLabel("", box)

        self.swap_button = QPushButton("Swap", box)

        self.target_time = QLabel("", box)
        self.target_period = QLabel("", box)
        self.target_date = QLabel("", box)
        self.relative_label = QLabel("", box)
        self.relative_label.setTextFormat(Qt.RichText)
        self.hint_label = QLabel("", box)
        self.hint_label.setWordWrap(True)

        grid.addWidget(QLabel("From", box), 0, 0)
        grid.addWidget(self.source_zone_input, 0, 1)
        grid.addWidget(self.source_zone_name, 0, 2)
        grid.addWidget(self.source_time_input, 1, 1)
        grid.addWidget(self.source_date_input, 1, 2)
        grid.addWidget(self.source_date_display, 2, 1, 1, 2)
        grid.addWidget(self.swap_button, 3, 1)
        grid.addWidget(QLabel("To", box), 4, 0)
        grid.addWidget(self.target_zone_input, 4, 1)
        grid.addWidget(self.target_zone_name, 4, 2)
        grid.addWidget(self.target_time, 5, 1)
        grid.addWidget(self.target_period, 5, 2)
        grid.addWidget(self.target_date, 6, 1, 1, 2)
        grid.addWidget(self.relative_label, 7, 0, 1, 3)
        grid.addWidget(self.hint_label, 8, 0, 1, 3)

        parent_layout.addWidget(box)

        self.swap_button.clicked.connect(self.swap_converter_values)
        self.source_time_input.textEdited.connect(
            lambda _text: self._on_date_time_change(preserve_time_input=True)
        )
        self.source_time_input.editingFinished.connect(self._on_date_time_change)
        self.source_date_input.dateChanged.connect(
            lambda _date: self._on_date_time_change()
        )
        self.source_zone_input.editingFinished.connect(
            lambda: self._apply_zone_input("source")
        )
        self.target_zone_input.editingFinished.connect(
            lambda: self._apply_zone_input("target")
        )

    def _zone_line_edit(self, parent) -> QLineEdit:
        line_edit = QLineEdit(parent)
        # the model is already filtered by label and zone id
        completer = QCompleter(QStringListModel(line_edit), line_edit)
        completer.setCaseSensitivity(Qt.CaseInsensitive)
        completer.setCompletionMode(QCompleter.UnfilteredPopupCompletion)
        line_edit.setCompleter(completer)
        line_edit.textEdited.connect(
            lambda text, edit=line_edit: self._update_zone_suggestions(edit, text)
        )
        self._update_zone_suggestions(line_edit, "")
        return line_edit

    def _update_zone_suggestions(self, line_edit: QLineEdit, text: str) -> None:
        options = filter_time_zone_options(text, ZONE_SUGGESTION_LIMIT)
        line_edit.completer().model().setStringList(
            [option.label for option in options]
        )

    def _init_converter(self) -> None:
        self.converter_state = load_converter_state() or default_converter_state()
        self._sync_inputs_from_state(self.converter_state)
        self._render_from_state(self.converter_state, persist=False)

    # ------------------------------------------------------------------
    # State -> widgets
    # ------------------------------------------------------------------

    def _sync_inputs_from_state(self, state: ConverterState) -> None:
        self.source_zone_input.setText(format_zone_input_value(state.source_time_zone))
        self.target_zone_input.setText(format_zone_input_value(state.target_time_zone))
        self.source_time_input.setText(
            format_source_time_for_display(state.time, self.is_24_hour)
        )
        self.source_date_input.blockSignals(True)
        try:
            self.source_date_input.setDate(QDate.fromString(state.date, QT_DATE_FORMAT))
        finally:
            self.source_date_input.blockSignals(False)

    def _render_from_state(
        self,
        state: ConverterState,
        persist: bool,
        preserve_time_input: bool = False,
    ) -> None:
        view = compute_converter_view_data(state, self.is_24_hour)
        if view is None:
            self.hint_label.setText(INVALID_INPUT_MESSAGE)
            return

        self.converter_state = view.state
        if persist:
            save_converter_state(view.state)

        if not preserve_time_input:
            self._sync_inputs_from_state(view.state)

        self.source_zone_name.setText(view.source_zone_name)
        self.target_zone_name.setText(view.target_zone_name)
        self.source_zone_name.setToolTip(view.source_zone_long_name)
        self.target_zone_name.setToolTip(view.target_zone_long_name)
        self.source_date_display.setText(view.source_date_display)
        self.target_time.setText(view.target_time)
        self.target_period.setText(view.target_period)
        self.target_period.setVisible(bool(view.target_period))
        self.target_date.setText(view.target_date)
        self.relative_label.setText(
            f"{view.relative_text}<b>{view.relative_emphasis}</b>{view.relative_tail}"
        )
        self.relative_label.setAccessibleName(view.relative_sentence)
        self.hint_label.setText(view.hint)

    # ------------------------------------------------------------------
    # Widget events
    # ------------------------------------------------------------------

    def _on_date_time_change(self, preserve_time_input: bool = False) -> None:
        parsed_time = parse_source_time_to_24(self.source_time_input.text())
        if parsed_time is None:
            self.hint_label.setText(INVALID_INPUT_MESSAGE)
            return

        next_state = ConverterState(
            source_time_zone=self.converter_state.source_time_zone,
            target_time_zone=self.converter_state.target_time_zone,
            date=self.source_date_input.date().toString(QT_DATE_FORMAT),
            time=parsed_time,
        )
        self._render_from_state(
            next_state, persist=True, preserve_time_input=preserve_time_input
        )

    def _apply_zone_input(self, role: str) -> None:
        line_edit = self.source_zone_input if role == "source" else self.target_zone_input
        current = (
            self.converter_state.source_time_zone
            if role == "source"
            else self.converter_state.target_time_zone
        )

        selected = find_time_zone_option_by_input(line_edit.text())
        if selected is None:
            line_edit.setText(format_zone_input_value(current))
            return
        if selected.time_zone == current:
            line_edit.setText(selected.label)
            return

        if role == "source":
            next_state = ConverterState(
                selected.time_zone,
                self.converter_state.target_time_zone,
                self.converter_state.date,
                self.converter_state.time,
            )
        else:
            next_state = ConverterState(
                self.converter_state.source_time_zone,
                selected.time_zone,
                self.converter_state.date,
                self.converter_state.time,
            )
        self._render_from_state(next_state, persist=True)

    def swap_converter_values(self) -> None:
        self._render_from_state(
            swap_converter_state(self.converter_state), persist=True
        )

    def refresh_converter_for_format_change(self) -> None:
        self._render_from_state(self.converter_state, persist=False)
