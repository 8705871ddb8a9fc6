"""Interface definitions to decouple core components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyReceiver(Protocol):
    """Object capable of handling a key activation."""

    def on_key(self, key: Any) -> None:
        """Process an activated key."""
        ...


@runtime_checkable
class EditTarget(Protocol):
    """Text field the keyboard types into.

    Positions are string indices with
    ``0 <= selection_start <= selection_end <= len(value)``. Targets may also
    provide ``focus()`` and ``notify_changed()``; the session calls them after
    every edit when present.
    """

    value: str

    @property
    def selection_start(self) -> int:
        ...

    @property
    def selection_end(self) -> int:
        ...

    def set_selection(self, start: int, end: int) -> None:
        ...


@runtime_checkable
class SpeechEngine(Protocol):
    """Text-to-speech capability used by ``speak()``."""

    def say(self, text: str, locale: str) -> None:
        ...
