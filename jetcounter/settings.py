"""Application settings with JSON persistence.

Settings are stored at:
    ~/.jetcounter/settings.json

Only preferences live here.  The countdown itself is never saved.

Usage::

    settings = load_settings()
    settings.initial_minutes = 15
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / ".jetcounter"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    initial_minutes: int | None = None     # pre-selected choice, if any

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 360
    window_height: int = 640

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"


_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "initial_minutes": (int, type(None)),
    "window_width": (int,),
    "window_height": (int,),
    "log_level": (str,),
}


def _has_field_type(name: str, value: object) -> bool:
    # JSON true/false load as bool, which is an int subclass
    if isinstance(value, bool):
        return False
    return isinstance(value, _FIELD_TYPES[name])


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys are ignored.  A value of the wrong type falls back to
    that field's default, so a hand-edited file cannot break startup.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {}
        for key, value in data.items():
            if key not in valid_keys:
                continue
            if not _has_field_type(key, value):
                logger.warning(
                    "ignoring %s=%r in %s, using the default", key, value, SETTINGS_PATH,
                )
                continue
            filtered[key] = value
        return Settings(**filtered)
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("could not read %s, using defaults: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
