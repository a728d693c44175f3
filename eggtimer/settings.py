"""Application settings loaded from an optional JSON file.

Settings are read from (first match wins):
    $EGGTIMER_CONFIG
    <app data dir>/settings.json

The app never writes this file; it only holds preferences, never timer
state.

Usage::

    settings = load_settings()
    if settings.sound_enabled:
        ...
"""

from __future__ import annotations

import json
import logging
import math
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path

from .timer.presets import Preset, parse_presets

logger = logging.getLogger(__name__)

APP_NAME = "EggTimer"
CONFIG_ENV_VAR = "EGGTIMER_CONFIG"


def _app_data_dir() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        return Path(base) / APP_NAME if base else Path.home() / APP_NAME
    base = os.environ.get("XDG_CONFIG_HOME")
    return (Path(base) if base else Path.home() / ".config") / "eggtimer"


APP_DATA_DIR = _app_data_dir()
SETTINGS_PATH = APP_DATA_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100
    alarm_sound: str | None = None         # path to a .wav, None = built-in

    # ── completion effects ────────────────────────────────────────────
    notifications_enabled: bool = True
    flash_title: bool = True

    # ── process ───────────────────────────────────────────────────────
    quit_on_last_window_closed: bool | None = None   # None = platform default

    # ── presets ───────────────────────────────────────────────────────
    presets: list | None = None            # [[seconds, label], ...]

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"

    def preset_catalog(self) -> tuple[Preset, ...]:
        return parse_presets(self.presets)

    def should_quit_on_last_window_closed(self) -> bool:
        """macOS keeps apps alive with no windows; everyone else quits."""
        if self.quit_on_last_window_closed is None:
            return sys.platform != "darwin"
        return self.quit_on_last_window_closed


def settings_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else SETTINGS_PATH


# Accepted JSON types per key; bool is excluded where an int is expected
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "sound_enabled": (bool,),
    "sound_volume": (int, float),
    "alarm_sound": (str, type(None)),
    "notifications_enabled": (bool,),
    "flash_title": (bool,),
    "quit_on_last_window_closed": (bool, type(None)),
    "presets": (list, type(None)),
    "log_level": (str,),
}


def _valid_value(key: str, value) -> bool:
    if isinstance(value, bool) and bool not in _FIELD_TYPES[key]:
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return isinstance(value, _FIELD_TYPES[key])


def _sanitize(settings: Settings, path: Path) -> Settings:
    """Replace wrong-typed fields with their defaults."""
    defaults = Settings()
    for f in fields(Settings):
        value = getattr(settings, f.name)
        if not _valid_value(f.name, value):
            logger.warning(
                "Ignoring %s=%r in %s: wrong type", f.name, value, path,
            )
            setattr(settings, f.name, getattr(defaults, f.name))
    settings.sound_volume = max(0, min(int(settings.sound_volume), 100))
    return settings


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or settings_path()
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        settings = _sanitize(Settings(**filtered), path)
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return Settings()
    return settings
