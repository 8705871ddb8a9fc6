"""Editing operations applied to an :class:`~multilang_keyboard.interfaces.EditTarget`.

Every operation accepts ``None`` as the target and then does nothing: a
keyboard can exist before any field is bound to it.
"""

from __future__ import annotations

from dataclasses import dataclass

import grapheme

from .interfaces import EditTarget


@dataclass
class TextField:
    """In-memory :class:`EditTarget`, used headless and in tests."""

    value: str = ""
    selection_start: int = 0
    selection_end: int = 0

    def set_selection(self, start: int, end: int) -> None:
        self.selection_start = start
        self.selection_end = end


def _selection(target: EditTarget) -> tuple[int, int]:
    """Return the target's selection ordered and clamped to its value."""
    size = len(target.value)
    start = min(max(target.selection_start, 0), size)
    end = min(max(target.selection_end, 0), size)
    return (start, end) if start <= end else (end, start)


# enough code points for any cluster a keyboard can type
_TAIL = 32


def _is_regional_indicator(char: str) -> bool:
    return "\U0001F1E6" <= char <= "\U0001F1FF"


def _last_grapheme(text: str) -> str:
    """Return the final grapheme cluster of ``text``.

    Only a short tail is segmented. The whole text is used when the tail is a
    single cluster or ends in flag characters, whose pairing depends on where
    the run starts.
    """
    tail = text[-_TAIL:]
    last = ""
    for last in grapheme.graphemes(tail):
        pass
    if len(tail) < len(text) and (
        len(last) == len(tail) or _is_regional_indicator(last[-1])
    ):
        for last in grapheme.graphemes(text):
            pass
    return last


def insert(target: EditTarget | None, text: str) -> str | None:
    """Replace the selection with ``text`` and collapse the cursor after it.

    Returns the inserted text, or ``None`` if there is no target.
    """
    if target is None:
        return None
    start, end = _selection(target)
    value = target.value
    target.value = value[:start] + text + value[end:]
    cursor = start + len(text)
    target.set_selection(cursor, cursor)
    return text


def delete_backward(target: EditTarget | None) -> str | None:
    """Delete the selection, or the grapheme cluster before the cursor.

    Returns the removed text (empty when there was nothing to delete), or
    ``None`` if there is no target.
    """
    if target is None:
        return None
    start, end = _selection(target)
    value = target.value
    if start == end:
        if start == 0:
            return ""
        # never split a base letter from its combining marks
        start -= len(_last_grapheme(value[:end]))
    removed = value[start:end]
    target.value = value[:start] + value[end:]
    target.set_selection(start, start)
    return removed


def clear(target: EditTarget | None) -> bool:
    """Empty the target and put the cursor at 0."""
    if target is None:
        return False
    target.value = ""
    target.set_selection(0, 0)
    return True
