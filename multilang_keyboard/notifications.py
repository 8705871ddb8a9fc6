"""Observer registration for keyboard notifications."""

from __future__ import annotations

from collections.abc import Callable

KEYPRESS = "keypress"  # (key) raw symbol, before its effect
LANGUAGE_CHANGE = "language_change"  # (language_id)
INPUT = "input"  # (text) after an insertion
BACKSPACE = "backspace"  # (deleted) text removed, "" if nothing, None without target
CLEAR = "clear"  # ()
MODIFIER_CHANGE = "modifier_change"  # (ModifierState) after shift/caps changed
LAYOUT_REGISTERED = "layout_registered"  # (language_id) added or replaced

EVENTS = frozenset(
    {
        KEYPRESS,
        LANGUAGE_CHANGE,
        INPUT,
        BACKSPACE,
        CLEAR,
        MODIFIER_CHANGE,
        LAYOUT_REGISTERED,
    }
)


class Notifier:
    """Deliver notifications to subscribed callbacks in subscription order."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[..., None]]] = {
            event: [] for event in EVENTS
        }

    def subscribe(self, event: str, callback: Callable[..., None]) -> Callable[[], None]:
        """Register ``callback`` for ``event`` and return an unsubscribe function."""
        self._check(event)
        self._listeners[event].append(callback)

        def _unsubscribe() -> None:
            self.unsubscribe(event, callback)

        return _unsubscribe

    def unsubscribe(self, event: str, callback: Callable[..., None]) -> None:
        self._check(event)
        try:
            self._listeners[event].remove(callback)
        except ValueError:
            pass  # already gone

    def emit(self, event: str, *args) -> None:
        self._check(event)
        # copy so a listener may unsubscribe itself while being notified
        for callback in list(self._listeners[event]):
            callback(*args)

    def clear(self) -> None:
        for listeners in self._listeners.values():
            listeners.clear()

    def _check(self, event: str) -> None:
        if event not in EVENTS:
            raise ValueError(f"Unknown keyboard event {event!r}")
