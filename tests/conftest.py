import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from multilang_keyboard.kb_layout_io import default_registry
from multilang_keyboard.modifier_state import ModifierState
from multilang_keyboard.notifications import EVENTS
from multilang_keyboard.session import KeyboardSession
from multilang_keyboard.text_editor import TextField


class RecordingSpeaker:
    def __init__(self):
        self.spoken = []

    def say(self, text, locale):
        self.spoken.append((text, locale))


class RecordingField(TextField):
    """TextField that also counts the session's re-signal calls."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.focused = 0
        self.changed = 0

    def focus(self):
        self.focused += 1

    def notify_changed(self):
        self.changed += 1


@pytest.fixture
def field():
    return RecordingField()


@pytest.fixture
def speaker():
    return RecordingSpeaker()


@pytest.fixture
def session(field, speaker):
    return KeyboardSession(target=field, registry=default_registry(), speaker=speaker)


@pytest.fixture
def events(session):
    """Record every notification the session emits, in order.

    Modifier states are recorded as ``(shift_on, caps_on)`` snapshots.
    """
    seen = []

    def _recorder(name):
        def _record(*args):
            args = tuple(
                (a.shift_on, a.caps_on) if isinstance(a, ModifierState) else a
                for a in args
            )
            seen.append((name, *args))
        return _record

    for name in sorted(EVENTS):
        session.events.subscribe(name, _recorder(name))
    return seen
