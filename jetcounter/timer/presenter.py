"""Display values for the progress ring, derived from a snapshot.

Angles here use the screen convention: 0° at 3 o'clock, clockwise
positive.  The arc always begins at 12 o'clock (−90°).  ``qt_arc_angles``
converts to what ``QPainter.drawArc`` expects (1/16 degree units,
counter-clockwise positive).
"""

from __future__ import annotations

from dataclasses import dataclass

from .engine import CountdownSnapshot

ARC_START_DEGREES = -90.0
FULL_CIRCLE_DEGREES = 360.0


@dataclass(frozen=True)
class RingFrame:
    display_text: str
    progress_fraction: float
    sweep_angle_degrees: float
    start_angle_degrees: float = ARC_START_DEGREES

    @property
    def draws_arc(self) -> bool:
        """At zero progress only the background ring is painted."""
        return self.progress_fraction > 0


def present(snapshot: CountdownSnapshot) -> RingFrame:
    """Pure transform of *snapshot* into what the ring widget paints."""
    progress = snapshot.progress
    return RingFrame(
        display_text=snapshot.display_text,
        progress_fraction=progress,
        sweep_angle_degrees=FULL_CIRCLE_DEGREES * progress,
    )


def qt_arc_angles(frame: RingFrame) -> tuple[int, int]:
    """Return ``(start, span)`` in Qt's 1/16-degree arc units."""
    start = int(round(-frame.start_angle_degrees * 16))
    span = -int(round(frame.sweep_angle_degrees * 16))
    return start, span


class ProgressPresenter:
    """Stateless wrapper around :func:`present` for widget code."""

    def present(self, snapshot: CountdownSnapshot) -> RingFrame:
        return present(snapshot)

    def idle_frame(self) -> RingFrame:
        return present(CountdownSnapshot.EMPTY)
