from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Tuple

from .errors import LayoutError

Grid = Tuple[Tuple[str, ...], ...]

DEFAULT_LOCALE = "en-US"


def _freeze(grid: Sequence[Sequence[str]], which: str) -> Grid:
    if isinstance(grid, str) or not grid:
        raise LayoutError(f"'{which}' grid must contain at least one row")
    rows = []
    for r_idx, row in enumerate(grid):
        if isinstance(row, str) or not row:
            raise LayoutError(f"'{which}' row {r_idx} must contain at least one key")
        for key in row:
            if not isinstance(key, str) or not key:
                raise LayoutError(
                    f"'{which}' row {r_idx} has an invalid key {key!r}"
                )
        rows.append(tuple(row))
    return tuple(rows)


@dataclass(frozen=True, slots=True)
class LayoutTable:
    """Immutable key tables for one language.

    ``normal`` and ``shift`` always have the same shape: the same number of
    rows, and corresponding rows with the same number of keys.
    """

    name: str
    normal: Grid
    shift: Grid
    locale: str = DEFAULT_LOCALE  # speech-locale tag, e.g. "hi-IN"

    def __post_init__(self):
        normal = _freeze(self.normal, "normal")
        shift = _freeze(self.shift, "shift")
        if [len(r) for r in normal] != [len(r) for r in shift]:
            raise LayoutError(
                f"Layout {self.name!r}: shifted grid shape {_shape(shift)} "
                f"does not match unshifted shape {_shape(normal)}"
            )
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "shift", shift)

    def grid(self, shifted: bool) -> Grid:
        return self.shift if shifted else self.normal

    @property
    def shape(self) -> tuple[int, ...]:
        return _shape(self.normal)


def _shape(grid: Grid) -> tuple[int, ...]:
    return tuple(len(row) for row in grid)
