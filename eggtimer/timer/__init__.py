"""Timer package."""

from .engine import CountdownEngine, TICK_INTERVAL_MS
from .presets import Preset, DEFAULT_PRESETS, parse_presets
from .session import (
    TimerSession,
    TimerState,
    format_time,
    progress_fraction,
)

__all__ = [
    "CountdownEngine",
    "TICK_INTERVAL_MS",
    "Preset",
    "DEFAULT_PRESETS",
    "parse_presets",
    "TimerSession",
    "TimerState",
    "format_time",
    "progress_fraction",
]
