"""Shared test helpers for the egg timer."""

from eggtimer.shell import PresentationShell
from eggtimer.timer.engine import CountdownEngine


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


class FakeAlarm:
    """Stands in for AlarmPlayer so tests never touch an audio device."""

    def __init__(self):
        self.plays = 0
        self.stops = 0

    def play(self):
        self.plays += 1
        return "primary"

    def stop(self):
        self.stops += 1


class RecordingShell(PresentationShell):
    """PresentationShell that records requests instead of performing them."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.notifications: list[str] = []
        self.fronted: list[object] = []
        self.hidden: list[object] = []

    def notify_completion(self, label: str) -> bool:
        self.notifications.append(label)
        return True

    def bring_to_front(self, window) -> None:
        self.fronted.append(window)

    def minimize_to_tray(self, window) -> None:
        self.hidden.append(window)


def run_ticks(engine: CountdownEngine, count: int) -> None:
    """Fire *count* tick callbacks without waiting on the event loop."""
    for _ in range(count):
        engine._on_tick()


def run_to_completion(engine: CountdownEngine) -> None:
    """Tick until the engine stops running."""
    while engine.is_running:
        engine._on_tick()
