from __future__ import annotations

from typing import Any, Callable

from .notifications import BACKSPACE, INPUT


class PCController:
    """Replay a keyboard session's edits as OS key events.

    With a controller attached, whatever the on-screen keyboard types also
    reaches the window that currently has OS focus.
    """

    def __init__(self, kb: Any = None, backspace_key: Any = None) -> None:
        if kb is None or backspace_key is None:
            from pynput.keyboard import Controller, Key as OSKey

            kb = kb or Controller()
            backspace_key = backspace_key or OSKey.backspace
        self.kb = kb
        self.backspace_key = backspace_key
        self._unsubscribe: list[Callable[[], None]] = []

    def _tap(self, k: Any) -> None:
        self.kb.press(k)
        self.kb.release(k)

    def on_input(self, text: str) -> None:
        if text:
            self.kb.type(text)

    def on_backspace(self, deleted: str | None = None) -> None:
        # one tap per removed code point; a single tap when no field is bound
        for _ in range(1 if deleted is None else len(deleted)):
            self._tap(self.backspace_key)

    def attach(self, session) -> None:
        """Start mirroring ``session``."""
        self.detach()
        self._unsubscribe = [
            session.events.subscribe(INPUT, self.on_input),
            session.events.subscribe(BACKSPACE, self.on_backspace),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
