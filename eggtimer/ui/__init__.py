"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing, ring_offset
from .title_flasher import TitleFlasher

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "ring_offset",
    "TitleFlasher",
]
