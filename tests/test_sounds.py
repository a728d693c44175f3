"""Tests for alarm synthesis and the fallback chain in AlarmPlayer.

Covers:
- WAV generation for the alarm and fallback tone
- Fallback tone shape (800 Hz, one second, fading 0.3 → 0.01)
- AlarmPlayer picks primary → fallback → system beep
- Disabled sound is a no-op
"""

from __future__ import annotations

import io
import wave

import numpy as np
import pytest
from PyQt6.QtMultimedia import QSoundEffect

from eggtimer.audio import sounds
from eggtimer.audio.sounds import (
    AlarmPlayer,
    SAMPLE_RATE,
    SOURCE_BEEP,
    SOURCE_FALLBACK,
    SOURCE_PRIMARY,
    _generate_alarm,
    _generate_fallback_beep,
)


def _read_samples(data: bytes) -> np.ndarray:
    with wave.open(io.BytesIO(data), "rb") as wf:
        frames = wf.readframes(wf.getnframes())
    return np.frombuffer(frames, dtype=np.int16).astype(np.float64) / 32767


class _FakeEffect:
    """Minimal QSoundEffect stand-in with a fixed status."""

    def __init__(self, status=QSoundEffect.Status.Ready):
        self._status = status
        self.plays = 0
        self.stops = 0

    def status(self):
        return self._status

    def play(self):
        self.plays += 1

    def stop(self):
        self.stops += 1


# ═══════════════════════════════════════════════════════════════════════
#  SOUND SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", [_generate_alarm, _generate_fallback_beep])
    def test_wav_is_parseable(self, gen_fn):
        data = gen_fn()
        assert data[:4] == b"RIFF"
        with wave.open(io.BytesIO(data), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == SAMPLE_RATE
            assert wf.getnframes() > 0

    def test_fallback_is_one_second(self):
        with wave.open(io.BytesIO(_generate_fallback_beep()), "rb") as wf:
            assert wf.getnframes() == SAMPLE_RATE

    def test_fallback_fades_out(self):
        samples = np.abs(_read_samples(_generate_fallback_beep()))
        head = samples[: SAMPLE_RATE // 20].max()
        tail = samples[-SAMPLE_RATE // 20:].max()
        assert head == pytest.approx(0.3, abs=0.02)
        assert tail < 0.02

    def test_fallback_pitch_is_800hz(self):
        samples = _read_samples(_generate_fallback_beep())
        spectrum = np.abs(np.fft.rfft(samples))
        freqs = np.fft.rfftfreq(len(samples), 1 / SAMPLE_RATE)
        assert freqs[spectrum.argmax()] == pytest.approx(800, abs=2)


# ═══════════════════════════════════════════════════════════════════════
#  ALARM PLAYER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestAlarmPlayer:

    def test_wav_files_generated(self, tmp_path):
        AlarmPlayer(sounds_dir=tmp_path)
        for name in ("alarm", "fallback_beep"):
            path = tmp_path / f"{name}.wav"
            assert path.exists()
            assert path.stat().st_size > 100

    def test_default_dir_is_used(self, sounds_dir):
        AlarmPlayer()
        assert (sounds_dir / "alarm.wav").exists()

    def test_existing_files_not_rewritten(self, tmp_path):
        custom = tmp_path / "alarm.wav"
        custom.write_bytes(_generate_fallback_beep())
        AlarmPlayer(sounds_dir=tmp_path)
        assert custom.read_bytes() == _generate_fallback_beep()

    def test_missing_custom_asset_has_no_primary(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path, alarm_path=tmp_path / "nope.wav")
        assert not player.primary_available

    def test_plays_primary_when_available(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path)
        primary, fallback = _FakeEffect(), _FakeEffect()
        player._primary, player._fallback = primary, fallback

        assert player.play() == SOURCE_PRIMARY
        assert primary.plays == 1
        assert fallback.plays == 0

    def test_play_rewinds_first(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path)
        primary = _FakeEffect()
        player._primary, player._fallback = primary, _FakeEffect()
        player.play()
        player.play()
        assert primary.stops == 2
        assert primary.plays == 2

    def test_falls_back_when_primary_missing(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path)
        fallback = _FakeEffect()
        player._primary, player._fallback = None, fallback

        assert player.play() == SOURCE_FALLBACK
        assert fallback.plays == 1

    def test_falls_back_when_primary_errors(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path)
        fallback = _FakeEffect()
        player._primary = _FakeEffect(QSoundEffect.Status.Error)
        player._fallback = fallback

        assert player.play() == SOURCE_FALLBACK
        assert fallback.plays == 1

    def test_late_load_error_triggers_fallback(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path)
        primary, fallback = _FakeEffect(), _FakeEffect()
        player._primary, player._fallback = primary, fallback

        assert player.play() == SOURCE_PRIMARY
        primary._status = QSoundEffect.Status.Error
        player._on_primary_status()

        assert fallback.plays == 1
        # only once per play
        player._on_primary_status()
        assert fallback.plays == 1

    def test_system_beep_as_last_resort(self, tmp_path, monkeypatch):
        beeps = []
        monkeypatch.setattr(sounds.QApplication, "beep", lambda: beeps.append(True))
        player = AlarmPlayer(sounds_dir=tmp_path)
        player._primary = None
        player._fallback = _FakeEffect(QSoundEffect.Status.Error)

        assert player.play() == SOURCE_BEEP
        assert beeps == [True]

    def test_disabled_is_noop(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path, enabled=False)
        primary = _FakeEffect()
        player._primary = primary
        assert player.play() is None
        assert primary.plays == 0

    def test_set_enabled(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path, enabled=False)
        player.set_enabled(True)
        assert player.enabled is True

    def test_stop_without_effects_does_not_raise(self, tmp_path):
        player = AlarmPlayer(sounds_dir=tmp_path)
        player._primary = None
        player._fallback = None
        player.stop()

    def test_unwritable_dir_degrades(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        player = AlarmPlayer(sounds_dir=blocker / "sounds")
        assert not player.primary_available
