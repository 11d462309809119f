"""Timer package."""

from .engine import (
    TimerEngine,
    CountdownSnapshot,
    DURATION_CHOICES,
    TICK_INTERVAL_MS,
)
from .errors import CountdownError, InvalidArgumentError, InvalidStateError
from .presenter import ProgressPresenter, RingFrame, present, qt_arc_angles

__all__ = [
    "TimerEngine",
    "CountdownSnapshot",
    "DURATION_CHOICES",
    "TICK_INTERVAL_MS",
    "CountdownError",
    "InvalidArgumentError",
    "InvalidStateError",
    "ProgressPresenter",
    "RingFrame",
    "present",
    "qt_arc_angles",
]
