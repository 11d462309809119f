"""Shared test helpers for JetCounter."""

from jetcounter.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def tick(engine: TimerEngine, times: int = 1) -> None:
    """Fire the tick handler directly, without waiting on the QTimer."""
    for _ in range(times):
        engine._on_tick()


def run_to_completion(engine: TimerEngine) -> int:
    """Tick until the countdown stops; return how many ticks it took."""
    count = 0
    while engine.is_running:
        engine._on_tick()
        count += 1
    return count
