"""QSS stylesheet and ring colours for JetCounter."""

from __future__ import annotations

# ── default palette (Material light: purple primary on white) ────────────

DEFAULT_PALETTE: dict[str, str] = {
    "surface":         "#FFFFFF",
    "primary":         "#6200EE",
    "primary_variant": "#3700B3",
    "on_primary":      "#FFFFFF",
    "text":            "#1F1B24",
    "text_muted":      "#8A8496",
    "border":          "#D7CCE8",
}

# Background track is drawn in the primary colour at half opacity.
RING_TRACK_ALPHA = 128


def get_palette() -> dict[str, str]:
    """Return a fresh copy of the palette, safe for callers to modify."""
    return dict(DEFAULT_PALETTE)


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['surface']};
        color: {p['text']};
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['surface']};
    }}

    /* ── title ───────────────────────────────────── */
    QLabel#titleLabel {{
        color: {p['primary_variant']};
        font-size: 20px;
        font-weight: 700;
    }}

    /* ── filled button (START, selected choice) ──── */
    QPushButton#primaryButton {{
        background-color: {p['primary']};
        color: {p['on_primary']};
        border: none;
        border-radius: 4px;
        padding: 8px 16px;
        font-weight: 600;
    }}

    QPushButton#primaryButton:pressed {{
        background-color: {p['primary_variant']};
    }}

    /* ── outlined button (CANCEL, other choices) ─── */
    QPushButton#outlinedButton {{
        background-color: transparent;
        color: {p['primary']};
        border: 1px solid {p['border']};
        border-radius: 4px;
        padding: 8px 16px;
        font-weight: 600;
    }}

    QPushButton#outlinedButton:hover {{
        border-color: {p['primary']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
        border-color: {p['border']};
    }}
    """
