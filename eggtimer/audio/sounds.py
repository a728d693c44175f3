"""Alarm synthesis and playback using numpy + QSoundEffect.

Two sounds are generated programmatically as WAV files with sine-wave
synthesis and cached to disk so later launches skip the work:

- ``alarm``          — the egg-timer ring (three bell strikes), the
  primary asset unless the config points ``alarm_sound`` elsewhere
- ``fallback_beep``  — 800 Hz, 1 s, amplitude decaying 0.3 → 0.01;
  played when the primary asset is missing or fails to load

If neither effect can be played, ``QApplication.beep()`` is the last
resort.  Nothing here raises to the caller.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect
from PyQt6.QtWidgets import QApplication

from ..settings import APP_DATA_DIR

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_DATA_DIR / "sounds"

SAMPLE_RATE = 44100

FALLBACK_FREQ = 800.0
FALLBACK_DURATION = 1.0
FALLBACK_START_GAIN = 0.3
FALLBACK_END_GAIN = 0.01

SOURCE_PRIMARY = "primary"
SOURCE_FALLBACK = "fallback"
SOURCE_BEEP = "beep"


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    # Attack
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    # Decay
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    # Sustain
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    # Release
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_alarm() -> bytes:
    """Egg-timer ring — three bright bell strikes (A5 + overtone)."""
    strike_dur = 0.45
    gap = 0.12
    parts: list[np.ndarray] = []
    for _ in range(3):
        tone = _sine(880.0, strike_dur) * 0.5 + _sine(1760.0, strike_dur) * 0.12
        env = _make_envelope(
            len(tone),
            attack=int(SAMPLE_RATE * 0.005),
            decay=int(SAMPLE_RATE * 0.12),
            sustain_level=0.35,
            release=int(SAMPLE_RATE * 0.25),
        )
        parts.append(tone * env)
        parts.append(np.zeros(int(SAMPLE_RATE * gap)))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_fallback_beep() -> bytes:
    """Fixed-pitch beep with an exponential fade, about one second long."""
    tone = _sine(FALLBACK_FREQ, FALLBACK_DURATION)
    gain = np.geomspace(FALLBACK_START_GAIN, FALLBACK_END_GAIN, len(tone))
    return _to_wav_bytes(tone * gain)


_GENERATORS = {
    "alarm": _generate_alarm,
    "fallback_beep": _generate_fallback_beep,
}


# ═══════════════════════════════════════════════════════════════════════════
#  ALARM PLAYER
# ═══════════════════════════════════════════════════════════════════════════


class AlarmPlayer(QObject):
    """Plays the completion alarm, degrading to a synthesized beep.

    Usage::

        alarm = AlarmPlayer(parent=self, volume=70)
        alarm.play()
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        alarm_path: Path | None = None,
        volume: int = 70,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._volume = max(0, min(volume, 100)) / 100.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._pending_primary = False

        self._ensure_wav_files()

        primary_path = alarm_path or self._sounds_dir / "alarm.wav"
        self._primary = self._load_effect(primary_path)
        self._fallback = self._load_effect(self._sounds_dir / "fallback_beep.wav")
        if self._primary is not None:
            self._primary.statusChanged.connect(self._on_primary_status)

    # ── public API ────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def primary_available(self) -> bool:
        return (
            self._primary is not None
            and self._primary.status() != QSoundEffect.Status.Error
        )

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self) -> str | None:
        """Play the alarm from the start.

        Returns which source was used (``"primary"``, ``"fallback"`` or
        ``"beep"``), or None when sound is disabled.
        """
        if not self._enabled:
            return None
        self.stop()

        if self.primary_available:
            self._pending_primary = True
            self._primary.play()
            return SOURCE_PRIMARY
        return self._play_fallback()

    def stop(self) -> None:
        """Stop and rewind everything that might be playing."""
        self._pending_primary = False
        for effect in (self._primary, self._fallback):
            if effect is not None:
                effect.stop()

    # ── internal ──────────────────────────────────────────────────────

    def _play_fallback(self) -> str:
        if (
            self._fallback is not None
            and self._fallback.status() != QSoundEffect.Status.Error
        ):
            logger.warning("Alarm sound unavailable, playing fallback tone")
            self._fallback.play()
            return SOURCE_FALLBACK
        logger.warning("No playable alarm sound, using system beep")
        QApplication.beep()
        return SOURCE_BEEP

    def _on_primary_status(self) -> None:
        # QSoundEffect loads asynchronously; a queued play can still fail
        if (
            self._pending_primary
            and self._primary.status() == QSoundEffect.Status.Error
        ):
            self._pending_primary = False
            self._play_fallback()

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        try:
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            for name, gen_fn in _GENERATORS.items():
                path = self._sounds_dir / f"{name}.wav"
                if not path.exists():
                    path.write_bytes(gen_fn())
        except OSError as exc:
            logger.warning("Could not write sounds to %s: %s", self._sounds_dir, exc)

    def _load_effect(self, path: Path) -> QSoundEffect | None:
        if not path.is_file():
            logger.debug("Sound file missing: %s", path)
            return None
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.setVolume(self._volume)
        return effect
