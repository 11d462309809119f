"""Main application window for JetCounter."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QMainWindow

from .timer.engine import TimerEngine, DURATION_CHOICES
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, load_settings, save_settings

logger = logging.getLogger(__name__)


class CountdownScreen(QMainWindow):
    """The single screen.  Owns the engine for as long as it is shown.

    The engine is parented to the window, so Qt destroys its timer with
    the window.  Hiding or closing the screen shuts the engine down so no
    tick outlives the visible screen; showing it again re-attaches it
    without starting anything.

    Minimizing the window also delivers a hide event, so minimizing
    cancels a running countdown just like closing does.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("JetCounter")

        self._settings: Settings = settings if settings is not None else load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── theme ─────────────────────────────────────────────────────
        self._palette = get_palette()
        self.setStyleSheet(build_stylesheet(self._palette))

        # ── engine + widget ───────────────────────────────────────────
        self._timer_engine = TimerEngine(self)
        self._timer_widget = TimerWidget(self._timer_engine, self)
        self._timer_widget.apply_palette(self._palette)
        self.setCentralWidget(self._timer_widget)

        initial = self._settings.initial_minutes
        if (
            isinstance(initial, int)
            and not isinstance(initial, bool)
            and initial in DURATION_CHOICES
        ):
            self._timer_widget.select_duration(initial)
        elif initial is not None:
            logger.warning("ignoring unsupported initial_minutes=%r", initial)

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    # ── lifecycle ─────────────────────────────────────────────────────────

    def showEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.attach()
        super().showEvent(event)

    def hideEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.shutdown()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.shutdown()
        self._save_geometry()
        super().closeEvent(event)

    def _save_geometry(self) -> None:
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("could not save settings: %s", exc)
