from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ModifierState:
    shift_on: bool = False  # selects the shifted grid
    caps_on: bool = False  # Caps Lock latched

    def toggle_shift(self) -> bool:
        """Flip Shift; return True if now active."""
        self.shift_on = not self.shift_on
        return self.shift_on

    def toggle_caps(self) -> bool:
        """Flip Caps Lock and bring Shift in line with it."""
        self.caps_on = not self.caps_on
        self.shift_on = self.caps_on
        return self.caps_on

    def release_after_printable(self) -> bool:
        """Drop a one-shot Shift after a character has been typed.

        Shift held by Caps Lock stays on. Returns True if Shift was released.
        """
        if self.shift_on and not self.caps_on:
            self.shift_on = False
            return True
        return False

    def uppercase_active(self) -> bool:
        return self.shift_on
