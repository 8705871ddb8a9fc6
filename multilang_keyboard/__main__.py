"""Command line entry point for the on-screen keyboard."""

from __future__ import annotations

import argparse
import json
import logging
import tkinter as tk

from . import logging as kb_logging
from .config import CONFIG_FILE, load_config, save_config
from .errors import LayoutError, UnknownLanguage
from .kb_gui import TkTextTarget, create_keyboard
from .pc_control import PCController

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Open a text box with the multi-language keyboard below it."""
    parser = argparse.ArgumentParser(
        description="Type in several scripts with an on-screen keyboard",
    )
    parser.add_argument(
        "--language",
        help="Layout to start with (default: from config, else english)",
    )
    parser.add_argument(
        "--layout-dir",
        help="Directory of extra layout JSON files to register",
    )
    parser.add_argument(
        "--no-controls",
        action="store_true",
        help="Hide the Clear and Speak buttons",
    )
    parser.add_argument(
        "--mirror",
        action="store_true",
        help="Also send typed text to the focused application",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_FILE,
        help="Path to the settings file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    args = parser.parse_args(argv)

    kb_logging.setup(logging.DEBUG if args.verbose else logging.INFO)

    cfg = load_config(args.config)
    if args.language:
        cfg.language = args.language
    if args.layout_dir:
        cfg.layout_dir = args.layout_dir
    if args.no_controls:
        cfg.show_controls = False

    root = tk.Tk()
    root.title("Multi-language Keyboard")

    text = None
    if args.mirror:
        # keys go to the application with OS focus; an in-app field would
        # receive every character a second time
        cfg.target_input = None
        try:
            root.attributes("-topmost", True)
        except tk.TclError:
            pass
    else:
        text = tk.Text(root, height=6, width=80, font=("Noto Sans", 14), wrap=tk.WORD)
        text.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)
        cfg.target_input = TkTextTarget(text)

    try:
        keyboard = create_keyboard(root, cfg)
    except FileNotFoundError:
        parser.error(f"Layout directory '{cfg.layout_dir}' not found")
    except json.JSONDecodeError as exc:
        parser.error(f"Invalid JSON in layout file: {exc.msg}")
    except LayoutError as exc:
        parser.error(str(exc))
    except UnknownLanguage as exc:
        parser.error(str(exc))

    if args.mirror:
        PCController().attach(keyboard.session)

    def _on_close() -> None:
        remember_language(args.config, keyboard.session.language)
        keyboard.destroy()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", _on_close)
    if text is not None:
        text.focus_set()
    root.mainloop()


def remember_language(path: str, language: str) -> None:
    """Store ``language`` as the starting layout for the next run."""
    # reload so command line overrides are not written back
    saved = load_config(path)
    saved.language = language
    try:
        save_config(saved, path)
    except OSError as exc:
        logger.warning("Could not save settings to %s: %s", path, exc)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
