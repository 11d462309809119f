"""Main countdown widget.

Layout (top → bottom):
    - "JET COUNTER" title
    - ProgressRing with the clock in its centre
    - Duration choices (60 / 30 / 15 / 5 MIN)
    - START or CANCEL, depending on whether the countdown is running
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy,
)

from ..timer.engine import TimerEngine, CountdownSnapshot, DURATION_CHOICES
from ..timer.presenter import ProgressPresenter
from .progress_ring import ProgressRing

logger = logging.getLogger(__name__)

TITLE_TEXT = "JET COUNTER"
SELECTED_STYLE = "primaryButton"
UNSELECTED_STYLE = "outlinedButton"


class TimerWidget(QWidget):
    """Title, ring, duration choices and the Start/Cancel control."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._presenter = ProgressPresenter()
        self._selected_minutes: int | None = None
        self._build_ui()
        self._connect_signals()
        self._refresh_display(engine.snapshot)
        self._update_button_visibility(engine.is_running)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        self._title = QLabel(TITLE_TEXT, self)
        self._title.setObjectName("titleLabel")
        self._title.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(self._title)

        layout.addStretch(1)

        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding,
        )
        layout.addWidget(self._ring, 4)

        # ── duration choices ─────────────────────────────────────────
        choice_row = QHBoxLayout()
        choice_row.setSpacing(8)
        choice_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._choice_buttons: dict[int, QPushButton] = {}
        for minutes in DURATION_CHOICES:
            btn = QPushButton(f"{minutes} MIN", self)
            btn.setObjectName(UNSELECTED_STYLE)
            btn.clicked.connect(lambda _checked=False, m=minutes: self.select_duration(m))
            self._choice_buttons[minutes] = btn
            choice_row.addWidget(btn)
        layout.addLayout(choice_row)

        layout.addSpacing(40)

        # ── start / cancel ───────────────────────────────────────────
        action_row = QHBoxLayout()
        action_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("START", self)
        self._start_btn.setObjectName(SELECTED_STYLE)
        self._start_btn.setFixedWidth(150)

        self._cancel_btn = QPushButton("CANCEL", self)
        self._cancel_btn.setObjectName(UNSELECTED_STYLE)
        self._cancel_btn.setFixedWidth(150)

        action_row.addWidget(self._start_btn)
        action_row.addWidget(self._cancel_btn)
        layout.addLayout(action_row)

        layout.addStretch(1)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self.press_start)
        self._cancel_btn.clicked.connect(self.press_cancel)

        self._engine.snapshot_changed.connect(self._refresh_display)
        self._engine.running_changed.connect(self._update_button_visibility)

    # ── input events ──────────────────────────────────────────────────────

    @property
    def selected_minutes(self) -> int | None:
        return self._selected_minutes

    def select_duration(self, minutes: int) -> None:
        self._engine.select_duration(minutes)
        self._selected_minutes = minutes
        logger.debug("duration selected: %d min", minutes)
        self._restyle_choices()

    def press_start(self) -> None:
        self._engine.start()

    def press_cancel(self) -> None:
        self._engine.cancel()

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh_display(self, snapshot: CountdownSnapshot) -> None:
        self._ring.set_frame(self._presenter.present(snapshot))

    def _update_button_visibility(self, running: bool) -> None:
        self._start_btn.setVisible(not running)
        self._cancel_btn.setVisible(running)
        # configure is rejected while running; keep the choices out of reach
        for btn in self._choice_buttons.values():
            btn.setEnabled(not running)

    def _restyle_choices(self) -> None:
        for minutes, btn in self._choice_buttons.items():
            name = SELECTED_STYLE if minutes == self._selected_minutes else UNSELECTED_STYLE
            if btn.objectName() != name:
                btn.setObjectName(name)
                btn.style().unpolish(btn)
                btn.style().polish(btn)

    # ── theming ───────────────────────────────────────────────────────────

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._ring.apply_palette(palette)
