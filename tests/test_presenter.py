"""Tests for the ring presenter (pure snapshot → display transform)."""

import pytest

from jetcounter.timer.engine import CountdownSnapshot
from jetcounter.timer.presenter import (
    ProgressPresenter, RingFrame, present, qt_arc_angles,
    ARC_START_DEGREES,
)


class TestPresent:

    def test_half_progress_sweeps_180(self):
        frame = present(CountdownSnapshot(remaining_seconds=150, total_seconds=300))
        assert frame.progress_fraction == 0.5
        assert frame.sweep_angle_degrees == 180

    def test_full_progress_sweeps_360(self):
        frame = present(CountdownSnapshot.idle(300))
        assert frame.progress_fraction == 1.0
        assert frame.sweep_angle_degrees == 360

    def test_display_text_passes_through(self):
        frame = present(CountdownSnapshot(remaining_seconds=3661, total_seconds=3661))
        assert frame.display_text == "01:01:01"

    def test_arc_starts_at_twelve_oclock(self):
        frame = present(CountdownSnapshot.idle(60))
        assert frame.start_angle_degrees == ARC_START_DEGREES == -90.0

    def test_no_arc_at_zero_progress(self):
        frame = present(CountdownSnapshot(remaining_seconds=0, total_seconds=300))
        assert frame.progress_fraction == 0.0
        assert frame.sweep_angle_degrees == 0.0
        assert frame.draws_arc is False

    def test_no_arc_when_unconfigured(self):
        frame = present(CountdownSnapshot.EMPTY)
        assert frame.draws_arc is False
        assert frame.display_text == "00:00:00"

    def test_arc_drawn_for_last_second(self):
        frame = present(CountdownSnapshot(remaining_seconds=1, total_seconds=3600))
        assert frame.draws_arc is True
        assert frame.sweep_angle_degrees == pytest.approx(0.1)

    def test_sweep_shrinks_as_countdown_runs(self):
        sweeps = [
            present(CountdownSnapshot(remaining_seconds=r, total_seconds=60)).sweep_angle_degrees
            for r in range(60, -1, -1)
        ]
        assert sweeps == sorted(sweeps, reverse=True)
        assert all(0.0 <= s <= 360.0 for s in sweeps)

    def test_same_snapshot_same_frame(self):
        snap = CountdownSnapshot(remaining_seconds=42, total_seconds=90)
        assert present(snap) == present(snap)


class TestQtArcAngles:

    def test_start_is_twelve_oclock_in_qt_units(self):
        start, _ = qt_arc_angles(present(CountdownSnapshot.idle(60)))
        assert start == 90 * 16

    def test_span_is_clockwise(self):
        _, span = qt_arc_angles(
            present(CountdownSnapshot(remaining_seconds=30, total_seconds=60))
        )
        assert span == -180 * 16

    def test_full_circle(self):
        _, span = qt_arc_angles(present(CountdownSnapshot.idle(60)))
        assert span == -360 * 16


class TestProgressPresenter:

    def test_wraps_present(self):
        snap = CountdownSnapshot(remaining_seconds=10, total_seconds=20)
        assert ProgressPresenter().present(snap) == present(snap)

    def test_idle_frame(self):
        frame = ProgressPresenter().idle_frame()
        assert frame == RingFrame(
            display_text="00:00:00",
            progress_fraction=0.0,
            sweep_angle_degrees=0.0,
        )
