"""Countdown state machine for JetCounter.

States
------
IDLE      Configured, not counting.  Snapshot shows the full duration
          (or zero, after a countdown ran to completion).
RUNNING   One ``QTimer`` loop active, one snapshot per second.

Transitions
-----------
IDLE → RUNNING      (start)
RUNNING → IDLE      (cancel — snapshot resets to the full duration)
RUNNING → IDLE      (remaining reaches 0 — snapshot stays at zero)
Any → IDLE          (shutdown, when the owning screen goes away)

Only the latest snapshot is kept.  Subscribers connect to
``snapshot_changed`` or read ``engine.snapshot`` whenever they like.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .errors import InvalidArgumentError, InvalidStateError

logger = logging.getLogger(__name__)


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 1000
DURATION_CHOICES = (60, 30, 15, 5)  # minutes, in on-screen order


def _check_seconds(name: str, value: object) -> int:
    # bool is an int subclass; True seconds is never what the caller meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")
    return value


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CountdownSnapshot:
    """One immutable reading of the countdown."""

    remaining_seconds: int
    total_seconds: int

    EMPTY: ClassVar["CountdownSnapshot"]

    def __post_init__(self) -> None:
        _check_seconds("remaining_seconds", self.remaining_seconds)
        _check_seconds("total_seconds", self.total_seconds)
        if self.remaining_seconds > self.total_seconds:
            raise InvalidArgumentError(
                f"remaining_seconds ({self.remaining_seconds}) exceeds "
                f"total_seconds ({self.total_seconds})"
            )

    @classmethod
    def idle(cls, total_seconds: int) -> "CountdownSnapshot":
        return cls(remaining_seconds=total_seconds, total_seconds=total_seconds)

    @property
    def progress(self) -> float:
        """Fraction of the duration still left, 1.0 → 0.0."""
        if self.total_seconds == 0:
            return 0.0
        return self.remaining_seconds / self.total_seconds

    @property
    def display_text(self) -> str:
        hours, rest = divmod(self.remaining_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


CountdownSnapshot.EMPTY = CountdownSnapshot(remaining_seconds=0, total_seconds=0)


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based single countdown driven by one repeating ``QTimer``.

    Signals
    -------
    snapshot_changed(snapshot: CountdownSnapshot)
        Emitted on every tick and on every configure / start / cancel.
    running_changed(running: bool)
        Emitted when the countdown starts or stops (for button toggling).
    finished(snapshot: CountdownSnapshot)
        Emitted once when the countdown reaches zero on its own.
    """

    snapshot_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)
    finished = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        self._total: int = 0
        self._snapshot: CountdownSnapshot = CountdownSnapshot.EMPTY
        self._running: bool = False
        self._attached: bool = True

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def total_seconds(self) -> int:
        return self._total

    @property
    def snapshot(self) -> CountdownSnapshot:
        """The most recently emitted snapshot."""
        return self._snapshot

    @property
    def remaining(self) -> int:
        return self._snapshot.remaining_seconds

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_attached(self) -> bool:
        return self._attached

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    # ══════════════════════════════════════════════════════════════════
    #  CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    def configure(self, total_seconds: int | None) -> None:
        """Set the countdown length.  Only valid while idle.

        ``None`` is treated as zero.  Raises ``InvalidArgumentError`` for
        negative or non-integer values and ``InvalidStateError`` when a
        countdown is in progress.
        """
        if total_seconds is None:
            total_seconds = 0
        _check_seconds("total_seconds", total_seconds)
        if self._running:
            raise InvalidStateError("cannot configure while the countdown is running")

        self._total = total_seconds
        logger.info("countdown configured to %d sec", total_seconds)
        self._publish(CountdownSnapshot.idle(total_seconds))

    def set_duration(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        """Configure from an hours/minutes/seconds breakdown."""
        for name, value in (("hours", hours), ("minutes", minutes), ("seconds", seconds)):
            _check_seconds(name, value)
        self.configure(hours * 3600 + minutes * 60 + seconds)

    def select_duration(self, minutes: int) -> None:
        """Configure from one of the on-screen choices in ``DURATION_CHOICES``."""
        if isinstance(minutes, bool) or minutes not in DURATION_CHOICES:
            raise InvalidArgumentError(
                f"duration must be one of {DURATION_CHOICES} minutes, got {minutes!r}"
            )
        self.set_duration(minutes=minutes)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin counting down from the configured total.

        A no-op while already running, so there is never more than one
        active loop.  Also a no-op after ``shutdown()``.
        """
        if self._running:
            logger.debug("start ignored: countdown already running")
            return
        if not self._attached:
            logger.debug("start ignored: engine is shut down")
            return

        logger.info("countdown started at %d sec", self._total)
        self._set_running(True)
        self._emit_remaining(self._total)

        if self._total == 0:
            self._finish()
        else:
            self._qt_timer.start()

    def cancel(self) -> None:
        """Stop the countdown and reset to the full duration.  Idempotent."""
        was_running = self._running
        self._qt_timer.stop()
        if was_running:
            logger.info("countdown cancelled at %d sec", self.remaining)
        self._set_running(False)
        self._publish(CountdownSnapshot.idle(self._total))

    def shutdown(self) -> None:
        """Detach from the owning screen: cancel and refuse further starts."""
        self.cancel()
        self._attached = False
        logger.debug("engine shut down")

    def attach(self) -> None:
        """Re-enable ``start()`` after a ``shutdown()``.  Starts nothing."""
        self._attached = True

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        # A timeout already queued when cancel() ran must not emit.
        if not self._running or not self._attached:
            return

        remaining = self.remaining - 1
        self._emit_remaining(remaining)
        if remaining == 0:
            self._finish()

    def _finish(self) -> None:
        self._qt_timer.stop()
        logger.info("countdown finished after %d sec", self._total)
        self._set_running(False)
        self.finished.emit(self._snapshot)

    def _emit_remaining(self, remaining: int) -> None:
        logger.debug("countdown remain sec is %d", remaining)
        self._publish(
            CountdownSnapshot(remaining_seconds=remaining, total_seconds=self._total)
        )

    def _publish(self, snapshot: CountdownSnapshot) -> None:
        self._snapshot = snapshot
        self.snapshot_changed.emit(snapshot)

    def _set_running(self, running: bool) -> None:
        if running == self._running:
            return
        self._running = running
        self.running_changed.emit(running)
