from __future__ import annotations

from dataclasses import dataclass, field, fields
import json
import logging
import os
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class KeyboardConfig:
    language: str = "english"
    show_controls: bool = True  # expose Clear / Speak buttons
    layout_dir: str | None = None  # extra *.json layouts to register
    speech_rate: int | None = None  # words per minute, engine default if None
    speech_volume: float | None = None  # 0.0 - 1.0

    # runtime only, never written to disk
    target_input: Any = field(default=None, repr=False, compare=False)
    on_key_press: Callable[[Any], None] | None = field(
        default=None, repr=False, compare=False
    )
    on_language_change: Callable[[str], None] | None = field(
        default=None, repr=False, compare=False
    )


PERSISTED_FIELDS = ("language", "show_controls", "layout_dir", "speech_rate", "speech_volume")

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".multilang_keyboard")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")


def load_config(path: str = CONFIG_FILE) -> KeyboardConfig:
    """Return saved keyboard settings or defaults if unavailable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        known = {f.name for f in fields(KeyboardConfig)} & set(PERSISTED_FIELDS)
        return KeyboardConfig(**{k: v for k, v in data.items() if k in known})
    except FileNotFoundError:
        return KeyboardConfig()
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return KeyboardConfig()


def save_config(config: KeyboardConfig, path: str = CONFIG_FILE) -> None:
    """Persist the settings part of ``config`` to ``path`` in JSON format."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    data = {name: getattr(config, name) for name in PERSISTED_FIELDS}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)
