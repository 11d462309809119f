"""Circular countdown ring rendered with QPainter.

- A faint full circle is always drawn as the track.
- The progress arc starts at 12 o'clock and sweeps clockwise in
  proportion to the time left, so it shrinks as the countdown runs.
- The ``HH:MM:SS`` clock sits in the middle.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.presenter import RingFrame, ProgressPresenter, qt_arc_angles
from .styles import DEFAULT_PALETTE, RING_TRACK_ALPHA


class ProgressRing(QWidget):
    """Custom-painted countdown ring."""

    RING_THICKNESS = 30
    PADDING = 20
    MIN_DIAMETER = 100

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.MIN_DIAMETER + 2 * self.PADDING,
                            self.MIN_DIAMETER + 2 * self.PADDING)

        self._frame: RingFrame = ProgressPresenter().idle_frame()

        self._track_color = QColor(DEFAULT_PALETTE["primary"])
        self._arc_color = QColor(DEFAULT_PALETTE["primary_variant"])
        self._text_color = QColor(DEFAULT_PALETTE["primary_variant"])

    # ── public API ────────────────────────────────────────────────────────

    @property
    def frame(self) -> RingFrame:
        return self._frame

    def set_frame(self, frame: RingFrame) -> None:
        self._frame = frame
        self.update()

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._track_color = QColor(palette.get("primary", DEFAULT_PALETTE["primary"]))
        self._arc_color = QColor(
            palette.get("primary_variant", DEFAULT_PALETTE["primary_variant"])
        )
        self._text_color = QColor(self._arc_color)
        self.update()

    def ring_rect(self) -> QRectF:
        """Square the ring is inscribed in, centred in the widget."""
        w, h = self.width(), self.height()
        diameter = max(self.MIN_DIAMETER, min(w, h) - 2 * self.PADDING)
        return QRectF(
            (w - diameter) / 2, (h - diameter) / 2,
            diameter, diameter,
        )

    # ── painting ──────────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rect = self.ring_rect()
        thickness = self.RING_THICKNESS

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._track_color)
        track_color.setAlpha(RING_TRACK_ALPHA)
        painter.setPen(QPen(track_color, thickness, Qt.PenStyle.SolidLine))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(rect)

        # ── progress arc ─────────────────────────────────────────────
        if self._frame.draws_arc:
            arc_pen = QPen(self._arc_color, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)
            start, span = qt_arc_angles(self._frame)
            painter.drawArc(rect, start, span)

        # ── centre clock ─────────────────────────────────────────────
        font = QFont()
        font.setPixelSize(max(12, int(rect.width() / 6)))
        font.setWeight(QFont.Weight.Bold)
        painter.setFont(font)
        painter.setPen(self._text_color)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._frame.display_text)

        painter.end()
