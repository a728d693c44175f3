"""Circular progress ring widget rendered with QPainter.

The ring is the centrepiece of the window:
- Fills clockwise from 12 o'clock as the countdown runs.  The fill is
  described as a stroke offset along the circumference: offset equal to
  the circumference is an empty ring, offset 0 a full one.
- Colour-coded by timer state (ready=yolk, running=orange, done=green).
- Shows MM:SS in bold text at the centre plus the preset label.
- Completion marker: green ring and a short sparkle burst.
"""

from __future__ import annotations

import math
import random

from PyQt6.QtCore import Qt, QRectF, QPointF, QTimer, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.session import TimerState
from .styles import STATE_COLORS, PALETTE

RING_RADIUS = 110
CIRCUMFERENCE = 2 * math.pi * RING_RADIUS


def ring_offset(fraction: float, circumference: float = CIRCUMFERENCE) -> float:
    """Map progress (0..1) to a stroke offset (circumference..0)."""
    fraction = max(0.0, min(1.0, fraction))
    return circumference - fraction * circumference


# ── helpers ──────────────────────────────────────────────────────────────────

def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = max(0.0, min(1.0, t))
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


# ── sparkle particle ────────────────────────────────────────────────────────

class _Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "color", "size")

    def __init__(self, cx: float, cy: float, color: QColor) -> None:
        angle = random.uniform(0, 2 * math.pi)
        speed = random.uniform(2.0, 6.0)
        self.x = cx
        self.y = cy
        self.vx = math.cos(angle) * speed
        self.vy = math.sin(angle) * speed
        self.life = 1.0
        self.color = QColor(color)
        self.size = random.uniform(3, 7)

    def tick(self, dt: float) -> bool:
        """Advance and return True if still alive."""
        self.x += self.vx * dt * 60
        self.y += self.vy * dt * 60
        self.vy += 0.12 * dt * 60  # gravity
        self.life -= dt * 1.8
        return self.life > 0


# ── main widget ──────────────────────────────────────────────────────────────


class ProgressRing(QWidget):
    """Custom-painted circular countdown ring."""

    RING_THICKNESS = 12

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        side = RING_RADIUS * 2 + 40
        self.setMinimumSize(side, side)

        # ── state ──────────────────────────────────────────────────────
        self._offset: float = CIRCUMFERENCE       # target stroke offset
        self._display_offset: float = CIRCUMFERENCE
        self._time_text: str = "00:00"
        self._caption: str = "Pick your eggs"
        self._timer_state: TimerState = TimerState.IDLE
        self._complete: bool = False

        primary_hex, secondary_hex = STATE_COLORS[TimerState.IDLE]
        self._primary_color = QColor(primary_hex)
        self._secondary_color = QColor(secondary_hex)
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(self._primary_color)
        self._target_secondary = QColor(self._secondary_color)

        self._text_color = QColor(PALETTE["text"])
        self._muted_color = QColor(PALETTE["text_muted"])

        # ── arc transition animation ───────────────────────────────────
        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(400)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

        # ── color transition animation ─────────────────────────────────
        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(500)
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

        # ── celebration particles ──────────────────────────────────────
        self._particles: list[_Particle] = []
        self._particle_timer = QTimer(self)
        self._particle_timer.setInterval(16)  # ~60 fps
        self._particle_timer.timeout.connect(self._on_particle_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def stroke_offset(self) -> float:
        return self._offset

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def caption(self) -> str:
        return self._caption

    @property
    def is_complete(self) -> bool:
        return self._complete

    def set_progress(self, fraction: float) -> None:
        """Update the fill (0..1).  Smoothly animates."""
        self._offset = ring_offset(fraction)
        self._arc_anim.stop()
        self._arc_anim.setStartValue(self._display_offset)
        self._arc_anim.setEndValue(self._offset)
        self._arc_anim.start()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_caption(self, text: str) -> None:
        self._caption = text
        self.update()

    def apply_state(self, state: TimerState) -> None:
        """Update colours and the completion marker for a new state."""
        if state == self._timer_state:
            return
        self._timer_state = state

        primary_hex, secondary_hex = STATE_COLORS[state]
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(primary_hex)
        self._target_secondary = QColor(secondary_hex)
        self._color_anim.stop()
        self._color_anim.start()

        was_complete = self._complete
        self._complete = state == TimerState.COMPLETED
        if self._complete and not was_complete:
            self._spawn_celebration()
        elif not self._complete:
            self._particles.clear()
            self._particle_timer.stop()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_offset = float(value)  # type: ignore[arg-type]
        self.update()

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._primary_color = _lerp_color(
            self._old_primary, self._target_primary, t
        )
        self._secondary_color = _lerp_color(
            self._old_secondary, self._target_secondary, t
        )
        self.update()

    def _on_particle_tick(self) -> None:
        dt = 0.016
        self._particles = [p for p in self._particles if p.tick(dt)]
        if not self._particles:
            self._particle_timer.stop()
        self.update()

    def _spawn_celebration(self) -> None:
        cx = self.width() / 2
        cy = self.height() / 2

        colors = [
            QColor("#FACC15"),  # yolk
            QColor("#F97316"),  # orange
            QColor("#22C55E"),  # green
            QColor("#FDE68A"),  # pale
        ]

        for _ in range(40):
            angle = random.uniform(0, 2 * math.pi)
            px = cx + math.cos(angle) * RING_RADIUS
            py = cy + math.sin(angle) * RING_RADIUS
            self._particles.append(_Particle(px, py, random.choice(colors)))

        if not self._particle_timer.isActive():
            self._particle_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        cx, cy = self.width() / 2, self.height() / 2
        radius = RING_RADIUS
        thickness = self.RING_THICKNESS
        ring_rect = QRectF(cx - radius, cy - radius, radius * 2, radius * 2)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(45)
        track_pen = QPen(track_color, thickness, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── filled arc ───────────────────────────────────────────────
        filled = 1.0 - self._display_offset / CIRCUMFERENCE
        if filled > 0.001:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)

            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(filled * 360 * 16))

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(48)
        time_font.setWeight(QFont.Weight.Bold)
        time_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 2)
        painter.setFont(time_font)
        painter.setPen(self._text_color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 12)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: caption ─────────────────────────────────────
        caption_font = QFont()
        caption_font.setPixelSize(13)
        caption_font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(caption_font)
        painter.setPen(self._muted_color)

        caption_rect = QRectF(ring_rect)
        caption_rect.moveTop(caption_rect.top() + 32)
        painter.drawText(caption_rect, Qt.AlignmentFlag.AlignCenter, self._caption)

        # ── celebration particles ────────────────────────────────────
        for p in self._particles:
            c = QColor(p.color)
            c.setAlpha(int(255 * max(0, p.life)))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(c)
            size = p.size * p.life
            painter.drawEllipse(QPointF(p.x, p.y), size, size)

        painter.end()
