"""Load layout tables and keep them in a registry keyed by language id."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path

from .errors import LayoutError, UnknownLanguage
from .kb_layout import DEFAULT_LOCALE, LayoutTable

logger = logging.getLogger(__name__)

LAYOUT_PACKAGE = "multilang_keyboard.resources.layouts"

# registry order of the bundled layouts
BUILTIN_LANGUAGES = ("english", "hindi", "marathi", "telugu", "tamil", "bengali")


def parse_layout(blueprint: Mapping) -> LayoutTable:
    """Build a :class:`LayoutTable` from a decoded JSON document."""
    if not isinstance(blueprint, Mapping):
        raise LayoutError("layout document must be a JSON object")
    try:
        return LayoutTable(
            blueprint["name"],
            blueprint["normal"],
            blueprint["shift"],
            blueprint.get("locale") or DEFAULT_LOCALE,
        )
    except KeyError as exc:
        raise LayoutError(f"layout is missing required field {exc}") from exc


def load_layout(path: str | Path) -> LayoutTable:
    """Load a :class:`LayoutTable` definition from ``path``."""
    with open(path, "r", encoding="utf-8") as file:
        blueprint = json.load(file)
    return parse_layout(blueprint)


@lru_cache(maxsize=None)
def builtin_layouts() -> tuple[tuple[str, LayoutTable], ...]:
    """Return the layouts bundled with the package, in registry order."""
    layouts = []
    for language in BUILTIN_LANGUAGES:
        entry = resources.files(LAYOUT_PACKAGE).joinpath(f"{language}.json")
        with entry.open("r", encoding="utf-8") as file:
            layouts.append((language, parse_layout(json.load(file))))
    return tuple(layouts)


class LayoutRegistry:
    """Mapping of language id to :class:`LayoutTable`.

    Each session owns (or is handed) a registry, so registering a layout in
    one never changes what another session can see unless they share it.
    """

    def __init__(self, layouts: Mapping[str, LayoutTable] | None = None) -> None:
        self._layouts: dict[str, LayoutTable] = {}
        for language, table in (layouts or {}).items():
            self.register(language, table)

    def register(self, language: str, table: LayoutTable) -> None:
        """Store ``table`` under ``language``, replacing any previous one."""
        if not isinstance(language, str) or not language:
            raise LayoutError("language id must be a non-empty string")
        if not isinstance(table, LayoutTable):
            raise LayoutError(f"expected a LayoutTable, got {type(table).__name__}")
        if language in self._layouts:
            logger.debug("Replacing layout %r", language)
        self._layouts[language] = table

    def get(self, language: str) -> LayoutTable:
        try:
            return self._layouts[language]
        except KeyError:
            raise UnknownLanguage(language) from None

    def languages(self) -> Iterator[str]:
        """Yield registered language ids in insertion order."""
        yield from list(self._layouts)

    def __contains__(self, language: object) -> bool:
        return language in self._layouts

    def __iter__(self) -> Iterator[str]:
        return self.languages()

    def __len__(self) -> int:
        return len(self._layouts)


def default_registry() -> LayoutRegistry:
    """Return a fresh registry holding the built-in layouts."""
    return LayoutRegistry(dict(builtin_layouts()))


def load_layout_dir(registry: LayoutRegistry, directory: str | Path) -> list[str]:
    """Register every ``*.json`` file in ``directory`` under its file stem."""
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Layout directory '{directory}' not found")
    added = []
    for path in sorted(directory.glob("*.json")):
        registry.register(path.stem, load_layout(path))
        added.append(path.stem)
    logger.info("Loaded %d layout(s) from %s", len(added), directory)
    return added
