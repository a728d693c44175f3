"""Preset catalog: the one-tap durations offered in the window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preset:
    duration_seconds: int
    label: str

    @property
    def minutes_text(self) -> str:
        minutes, seconds = divmod(self.duration_seconds, 60)
        if seconds:
            return f"{minutes}:{seconds:02d} min"
        return f"{minutes} min"


DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset(5 * 60, "soft-boiled"),
    Preset(7 * 60, "medium-boiled"),
    Preset(10 * 60, "hard-boiled"),
)


def parse_presets(raw: Iterable[object] | None) -> tuple[Preset, ...]:
    """Build a catalog from config entries like ``[300, "soft-boiled"]``.

    Entries that are not a positive integer duration plus a label are
    skipped.  Falls back to ``DEFAULT_PRESETS`` when nothing usable is left.
    """
    if raw is None:
        return DEFAULT_PRESETS

    presets: list[Preset] = []
    for entry in raw:
        if isinstance(entry, dict):
            duration = entry.get("duration_seconds")
            label = entry.get("label")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            duration, label = entry
        else:
            logger.warning("Ignoring malformed preset entry: %r", entry)
            continue

        # bool is an int subclass; reject it explicitly
        if (
            not isinstance(duration, int)
            or isinstance(duration, bool)
            or duration <= 0
            or not isinstance(label, str)
        ):
            logger.warning("Ignoring invalid preset entry: %r", entry)
            continue
        presets.append(Preset(duration, label.strip()))

    if not presets:
        logger.warning("No usable presets configured; using defaults")
        return DEFAULT_PRESETS
    return tuple(presets)
