"""Tests for the ring, the timer card, and the title flasher."""

from __future__ import annotations

import math

import pytest
from PyQt6.QtWidgets import QWidget

from eggtimer.timer.engine import CountdownEngine
from eggtimer.timer.presets import DEFAULT_PRESETS, Preset
from eggtimer.timer.session import TimerState
from eggtimer.ui.progress_ring import CIRCUMFERENCE, RING_RADIUS, ProgressRing, ring_offset
from eggtimer.ui.timer_widget import (
    DONE_TEXT, PAUSE_TEXT, RESUME_TEXT, START_TEXT, TimerWidget,
)
from eggtimer.ui.title_flasher import FLASH_ALTERNATIONS, FLASH_TITLE, TitleFlasher

from helpers import run_ticks, run_to_completion


@pytest.fixture
def widget(engine):
    return TimerWidget(engine, DEFAULT_PRESETS)


# ═══════════════════════════════════════════════════════════════════════
#  RING GEOMETRY
# ═══════════════════════════════════════════════════════════════════════


class TestRingOffset:

    def test_circumference_matches_radius(self):
        assert RING_RADIUS == 110
        assert CIRCUMFERENCE == pytest.approx(2 * math.pi * 110)

    def test_empty_ring_is_full_offset(self):
        assert ring_offset(0.0) == pytest.approx(CIRCUMFERENCE)

    def test_full_ring_is_zero_offset(self):
        assert ring_offset(1.0) == pytest.approx(0.0)

    def test_linear_in_between(self):
        assert ring_offset(0.25, 100.0) == pytest.approx(75.0)

    def test_clamped(self):
        assert ring_offset(1.5, 100.0) == 0.0
        assert ring_offset(-1.0, 100.0) == 100.0


@pytest.mark.usefixtures("qapp")
class TestProgressRing:

    def test_starts_empty(self):
        ring = ProgressRing()
        assert ring.stroke_offset == pytest.approx(CIRCUMFERENCE)
        assert not ring.is_complete

    def test_completion_marker_toggles(self):
        ring = ProgressRing()
        ring.apply_state(TimerState.COMPLETED)
        assert ring.is_complete
        ring.apply_state(TimerState.READY)
        assert not ring.is_complete

    def test_paints_offscreen(self):
        ring = ProgressRing()
        ring.set_progress(0.5)
        ring.apply_state(TimerState.COMPLETED)
        ring.grab()  # exercises paintEvent


# ═══════════════════════════════════════════════════════════════════════
#  TIMER CARD
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    def test_one_button_per_preset(self, widget):
        assert len(widget.preset_buttons) == len(DEFAULT_PRESETS)

    def test_controls_disabled_while_idle(self, widget):
        assert not widget.start_pause_button.isEnabled()
        assert not widget.reset_button.isEnabled()
        assert widget.ring.time_text == "00:00"

    def test_clicking_start_in_idle_does_nothing(self, widget, engine):
        widget.start_pause_button.click()  # disabled → no clicked signal
        assert engine.state == TimerState.IDLE
        assert not engine.tick_active

    def test_preset_click_selects_and_enables(self, widget, engine):
        widget.preset_buttons[0].click()
        assert engine.label == "soft-boiled"
        assert engine.remaining == 300
        assert widget.preset_buttons[0].isChecked()
        assert widget.start_pause_button.isEnabled()
        assert widget.reset_button.isEnabled()
        assert widget.ring.time_text == "05:00"
        assert widget.ring.caption == "soft-boiled"

    def test_presets_are_exclusive(self, widget):
        widget.preset_buttons[0].click()
        widget.preset_buttons[2].click()
        assert not widget.preset_buttons[0].isChecked()
        assert widget.preset_buttons[2].isChecked()

    def test_toggle_copy(self, widget, engine):
        widget.preset_buttons[0].click()
        assert widget.start_pause_button.text() == START_TEXT

        widget.start_pause_button.click()
        assert engine.is_running
        assert widget.start_pause_button.text() == PAUSE_TEXT

        widget.start_pause_button.click()
        assert not engine.is_running
        assert widget.start_pause_button.text() == RESUME_TEXT

        widget.start_pause_button.click()
        assert widget.start_pause_button.text() == PAUSE_TEXT

    def test_reset_restores_start_copy(self, widget, engine):
        widget.preset_buttons[0].click()
        widget.start_pause_button.click()
        widget.start_pause_button.click()
        widget.reset_button.click()
        assert widget.start_pause_button.text() == START_TEXT
        assert widget.ring.time_text == "05:00"

    def test_tick_updates_display(self, widget, engine):
        widget.preset_buttons[1].click()
        engine.start()
        run_ticks(engine, 61)
        assert widget.ring.time_text == "05:59"
        assert widget.ring.stroke_offset == pytest.approx(
            ring_offset(61 / 420),
        )

    def test_completion_marks_done_and_reset_clears(self, engine):
        widget = TimerWidget(engine, (Preset(2, "quick"),))
        widget.preset_buttons[0].click()
        engine.start()
        run_to_completion(engine)

        assert widget.status_text == DONE_TEXT
        assert widget.ring.is_complete
        assert widget.ring.time_text == "00:00"
        assert widget.ring.stroke_offset == pytest.approx(0.0)
        assert not widget.start_pause_button.isEnabled()
        assert widget.reset_button.isEnabled()

        widget.reset_button.click()
        assert widget.status_text == ""
        assert widget.start_pause_button.isEnabled()
        assert not widget.ring.is_complete
        assert widget.ring.stroke_offset == pytest.approx(CIRCUMFERENCE)


# ═══════════════════════════════════════════════════════════════════════
#  TITLE FLASHER
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestTitleFlasher:

    def _window(self):
        w = QWidget()
        w.setWindowTitle("Egg Timer")
        return w

    def test_alternates_then_restores(self):
        w = self._window()
        flasher = TitleFlasher(w)
        flasher.start()
        assert flasher.is_active

        titles = []
        for _ in range(FLASH_ALTERNATIONS):
            flasher._on_tick()
            titles.append(w.windowTitle())

        assert titles == [FLASH_TITLE, "Egg Timer"] * (FLASH_ALTERNATIONS // 2)
        assert flasher.is_active

        flasher._on_tick()
        assert not flasher.is_active
        assert w.windowTitle() == "Egg Timer"

    def test_stop_mid_flash_restores(self):
        w = self._window()
        flasher = TitleFlasher(w)
        flasher.start()
        flasher._on_tick()
        assert w.windowTitle() == FLASH_TITLE

        flasher.stop()
        assert not flasher.is_active
        assert w.windowTitle() == "Egg Timer"

    def test_restart_keeps_original_title(self):
        w = self._window()
        flasher = TitleFlasher(w)
        flasher.start()
        flasher._on_tick()
        flasher.start()  # while showing the flash text
        assert w.windowTitle() == "Egg Timer"
        assert flasher.count == 0
        flasher.stop()
        assert w.windowTitle() == "Egg Timer"

    def test_independent_of_countdown(self, engine):
        w = self._window()
        flasher = TitleFlasher(w)
        engine.select_preset(Preset(5, "x"))
        engine.start()
        flasher.start()
        engine.pause()
        assert flasher.is_active
        flasher.stop()

    def test_interval_is_half_second(self):
        flasher = TitleFlasher(self._window())
        assert flasher._timer.interval() == 500
