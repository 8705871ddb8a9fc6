from __future__ import annotations

from enum import Enum, auto
from typing import Any


#Authoritative list of control tokens. Anything else in a grid is a glyph.
class Control(str, Enum):
    def _generate_next_value_(name, *_):
        return name  # the token is spelled exactly like the member

    Backspace = auto()
    Tab       = auto()
    Enter     = auto()
    Shift     = auto()
    Caps      = auto()
    Ctrl      = auto()
    Win       = auto()
    Alt       = auto()
    Menu      = auto()
    Space     = auto()

    def is_reserved(self) -> bool:
        """Return ``True`` for keys left to host-level shortcuts."""
        return self in RESERVED


# whitespace keys insert text like a glyph does
WHITESPACE = {
    Control.Space: " ",
    Control.Enter: "\n",
    Control.Tab: "\t",
}
RESERVED = frozenset({Control.Ctrl, Control.Win, Control.Alt, Control.Menu})


def parse_symbol(symbol: Any) -> Control | str | None:
    """Classify a pressed key symbol.

    Returns the matching :class:`Control`, the glyph string itself, or
    ``None`` when ``symbol`` cannot be typed at all (not a string, or empty).
    """
    if isinstance(symbol, Control):
        return symbol
    if not isinstance(symbol, str) or not symbol:
        return None
    try:
        return Control(symbol)
    except ValueError:
        return symbol


def is_control(symbol: Any) -> bool:
    return isinstance(parse_symbol(symbol), Control)
