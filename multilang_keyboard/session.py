"""Input state of one on-screen keyboard.

:class:`KeyboardSession` turns key symbols into edits on the bound
:class:`~multilang_keyboard.interfaces.EditTarget`, tracks Shift / Caps Lock
and the active language, and reports what happened through its
:class:`~multilang_keyboard.notifications.Notifier`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from . import text_editor
from .config import KeyboardConfig
from .errors import UnknownLanguage
from .interfaces import EditTarget, KeyReceiver, SpeechEngine
from .kb_layout import Grid, LayoutTable
from .kb_layout_io import LayoutRegistry, default_registry, load_layout_dir
from .key_types import WHITESPACE, Control, parse_symbol
from .modifier_state import ModifierState
from .notifications import (
    BACKSPACE,
    CLEAR,
    INPUT,
    KEYPRESS,
    LANGUAGE_CHANGE,
    LAYOUT_REGISTERED,
    MODIFIER_CHANGE,
    Notifier,
)
from .speech import Speaker

logger = logging.getLogger(__name__)


class KeyboardSession(KeyReceiver):
    def __init__(
        self,
        language: str = "english",
        target: EditTarget | None = None,
        registry: LayoutRegistry | None = None,
        speaker: SpeechEngine | None = None,
        state: ModifierState | None = None,
        on_key_press: Callable[[Any], None] | None = None,
        on_language_change: Callable[[str], None] | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        if language not in self.registry:
            raise UnknownLanguage(language)
        self.language = language
        self.target = target
        # single source of truth for modifier state
        self.state = state or ModifierState()
        self.speaker = speaker
        self.events = Notifier()
        self.destroyed = False

        if on_key_press is not None:
            self.events.subscribe(KEYPRESS, on_key_press)
        if on_language_change is not None:
            self.events.subscribe(LANGUAGE_CHANGE, on_language_change)

    # ───────── queries ─────────────────────────────────────────────────────
    @property
    def layout(self) -> LayoutTable:
        return self.registry.get(self.language)

    def active_grid(self) -> Grid:
        """Return the key grid to show for the current language and modifiers."""
        return self.layout.grid(self.state.uppercase_active())

    # ───────── key dispatch ────────────────────────────────────────────────
    def on_key(self, key: Any) -> None:
        if self.destroyed:
            logger.debug("Ignoring key %r on a destroyed keyboard", key)
            return

        self.events.emit(KEYPRESS, key)
        symbol = parse_symbol(key)

        if symbol is None:
            logger.debug("Ignoring unusable key symbol %r", key)
            return

        if symbol == Control.Backspace:
            deleted = text_editor.delete_backward(self.target)
            if deleted:
                self._resignal()
            self.events.emit(BACKSPACE, deleted)
            return

        if symbol == Control.Shift:
            self.state.toggle_shift()
            self.events.emit(MODIFIER_CHANGE, self.state)
            return

        if symbol == Control.Caps:
            self.state.toggle_caps()
            self.events.emit(MODIFIER_CHANGE, self.state)
            return

        if isinstance(symbol, Control) and symbol.is_reserved():
            return  # Ctrl / Win / Alt / Menu belong to the host

        # printable glyph or whitespace key
        text = WHITESPACE[symbol] if isinstance(symbol, Control) else symbol
        if text_editor.insert(self.target, text) is not None:
            self._resignal()
        self.events.emit(INPUT, text)

        if self.state.release_after_printable():
            self.events.emit(MODIFIER_CHANGE, self.state)

    def type_text(self, keys) -> None:
        """Press each key symbol in ``keys`` in turn."""
        for key in keys:
            self.on_key(key)

    # ───────── language selection ──────────────────────────────────────────
    def switch_language(self, language: str) -> None:
        """Make ``language`` current; Shift and Caps Lock carry over."""
        if language not in self.registry:
            logger.error("Layout '%s' not registered", language)
            raise UnknownLanguage(language)
        self.language = language
        logger.debug("Language switched to %s", language)
        self.events.emit(LANGUAGE_CHANGE, language)

    def register_layout(self, language: str, table: LayoutTable) -> None:
        self.registry.register(language, table)
        self.events.emit(LAYOUT_REGISTERED, language)

    def languages(self):
        return self.registry.languages()

    # ───────── session operations ──────────────────────────────────────────
    def set_target(self, target: EditTarget | None) -> None:
        self.target = target

    def clear(self) -> None:
        if self.destroyed:
            return
        if text_editor.clear(self.target):
            self._resignal()
        self.events.emit(CLEAR)

    def speak(self) -> bool:
        """Read the target's text aloud; return True if speech was requested."""
        if self.destroyed or self.target is None or not self.target.value:
            return False
        if self.speaker is None:
            self.speaker = Speaker()
        self.speaker.say(self.target.value, self.layout.locale)
        return True

    def destroy(self) -> None:
        self.events.clear()
        self.target = None
        self.speaker = None
        self.destroyed = True

    # ───────── internal helpers ────────────────────────────────────────────
    def _resignal(self) -> None:
        """Let the host UI catch up with an edit it did not make itself."""
        for hook in ("focus", "notify_changed"):
            method = getattr(self.target, hook, None)
            if callable(method):
                method()


def create(
    config: KeyboardConfig | None = None,
    *,
    registry: LayoutRegistry | None = None,
    speaker: SpeechEngine | None = None,
) -> KeyboardSession:
    """Build a session from ``config``.

    Extra layouts in ``config.layout_dir`` are registered first, and
    ``config.on_language_change`` is told the starting language.
    """
    config = config or KeyboardConfig()
    if registry is None:
        registry = default_registry()
    if config.layout_dir:
        load_layout_dir(registry, config.layout_dir)
    if speaker is None:
        speaker = Speaker(rate=config.speech_rate, volume=config.speech_volume)

    session = KeyboardSession(
        language=config.language,
        target=config.target_input,
        registry=registry,
        speaker=speaker,
        on_key_press=config.on_key_press,
        on_language_change=config.on_language_change,
    )
    if config.on_language_change is not None:
        config.on_language_change(session.language)
    return session
