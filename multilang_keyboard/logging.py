"""Logging helpers for the keyboard."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path


_DEFAULT_LOG = Path.home() / ".multilang_keyboard.log"

# speech backends log every COM / driver call at INFO or DEBUG
NOISY_LOGGERS = ("comtypes", "pyttsx3")


def setup(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> list[logging.Handler]:
    """Configure logging for the keyboard and return the installed handlers.

    Parameters
    ----------
    level:
        Minimum severity level for log messages.
    log_file:
        Optional path to the log file.  If not provided,
        ``~/.multilang_keyboard.log`` is used.
    quiet:
        Third-party loggers capped at WARNING whatever ``level`` is.
    """

    log_file = _DEFAULT_LOG if log_file is None else Path(log_file)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError:
        # console-only when the file can't be opened
        pass

    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )
    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    def _excepthook(exc_type, exc, tb) -> None:
        logging.getLogger("multilang_keyboard").critical(
            "Unhandled exception", exc_info=(exc_type, exc, tb)
        )

    sys.excepthook = _excepthook
    return handlers
