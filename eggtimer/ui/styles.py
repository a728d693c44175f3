"""QSS stylesheet, palette, and ring colours for the egg timer."""

from __future__ import annotations

from ..timer.session import TimerState

# ── state colors (ring gradient pairs) ───────────────────────────────────
#    Each state maps to (primary, secondary) for the conical gradient.

STATE_COLORS: dict[TimerState, tuple[str, str]] = {
    TimerState.IDLE:      ("#E7D8C4", "#D9C6AE"),   # eggshell
    TimerState.READY:     ("#F59E0B", "#FBBF24"),   # yolk
    TimerState.RUNNING:   ("#F97316", "#F59E0B"),   # warm orange
    TimerState.COMPLETED: ("#22C55E", "#4ADE80"),   # done green
}

# ── palette (warm cream, matches the window background) ──────────────────

PALETTE: dict[str, str] = {
    "bg":           "#FFF7ED",
    "bg_secondary": "#FFEDD5",
    "surface":      "#FED7AA",
    "accent":       "#F97316",
    "accent2":      "#EA580C",
    "text":         "#431407",
    "text_muted":   "#9A3412",
    "success":      "#16A34A",
    "border":       "#FDBA74",
}


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Pro", ".AppleSystemUIFont", "Segoe UI", "Cantarell"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    font = resolve_font_family()
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['border']};
        border-color: {p['bg_secondary']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#primaryButton:disabled {{
        background-color: {p['surface']};
        color: {p['bg_secondary']};
    }}

    QPushButton#secondaryButton {{
        background-color: transparent;
        color: {p['text_muted']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    /* ── preset buttons ──────────────────────────── */
    QPushButton#presetButton {{
        font-size: 13px;
        padding: 10px 12px;
        border-radius: 12px;
    }}

    QPushButton#presetButton:checked {{
        background-color: {p['surface']};
        border: 2px solid {p['accent']};
    }}

    /* ── labels ──────────────────────────────────── */
    QLabel#statusLabel {{
        font-size: 18px;
        color: {p['success']};
        font-weight: 700;
    }}
    """
