"""Read-only JSON config helpers.

Stores theme, image, and input preferences. The app never writes this file.
All access is defensive: malformed or missing config falls back safely, and
each invalid value is dropped on its own without discarding the rest.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..input.modes import CaptureArrowPolicy

logger = logging.getLogger(__name__)

APP_NAME = "anitui"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class AppConfig:
    theme: str | None = None
    images: bool = True
    capture_arrows: CaptureArrowPolicy = CaptureArrowPolicy.ABANDON
    poster_dir: Path | None = None
    cell_pixels: tuple[int, int] | None = None
    enhanced_keyboard: bool = True
    debug_log: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable config %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def _bool_value(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else keeps ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _theme_value(data: dict[str, object]) -> str | None:
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def parse_capture_arrows(value: object) -> CaptureArrowPolicy | None:
    if not isinstance(value, str):
        return None
    try:
        return CaptureArrowPolicy(value.strip().lower())
    except ValueError:
        return None


def _poster_dir_value(data: dict[str, object]) -> Path | None:
    value = data.get("poster_dir")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def _cell_pixels_value(data: dict[str, object]) -> tuple[int, int] | None:
    """Accept ``[width, height]`` of positive integers (booleans rejected)."""
    value = data.get("cell_pixels")
    if not isinstance(value, list) or len(value) != 2:
        return None
    width, height = value
    for part in (width, height):
        if isinstance(part, bool) or not isinstance(part, int) or part <= 0:
            return None
    return (width, height)


def load_app_config() -> AppConfig:
    """Load and sanitize the config file into an ``AppConfig``."""
    data = load_config()
    return AppConfig(
        theme=_theme_value(data),
        images=_bool_value(data, "images", True),
        capture_arrows=parse_capture_arrows(data.get("capture_arrows")) or CaptureArrowPolicy.ABANDON,
        poster_dir=_poster_dir_value(data),
        cell_pixels=_cell_pixels_value(data),
        enhanced_keyboard=_bool_value(data, "enhanced_keyboard", True),
        debug_log=_bool_value(data, "debug_log", False),
    )
