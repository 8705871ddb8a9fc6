from __future__ import annotations

import tkinter as tk
from typing import Any, Callable

from .config import KeyboardConfig
from .errors import ContainerNotFound
from .key_types import Control, parse_symbol
from .notifications import LANGUAGE_CHANGE, LAYOUT_REGISTERED, MODIFIER_CHANGE
from .session import KeyboardSession, create

TINT = "#b0d4ff"  # active Shift / Caps / language
SPECIAL_BG = "#e0e0e0"
FONT = ("Noto Sans", 12)


class TkTextTarget:
    """Expose a ``tk.Text`` or ``tk.Entry`` widget as an edit target."""

    def __init__(self, widget: Any) -> None:
        self.widget = widget
        self._is_text = hasattr(widget, "tag_ranges")

    @property
    def value(self) -> str:
        if self._is_text:
            return self.widget.get("1.0", "end-1c")
        return self.widget.get()

    @value.setter
    def value(self, text: str) -> None:
        if self._is_text:
            self.widget.delete("1.0", "end")
            self.widget.insert("1.0", text)
        else:
            self.widget.delete(0, "end")
            self.widget.insert(0, text)

    def _offset(self, index: str) -> int:
        if self._is_text:
            return len(self.widget.get("1.0", index))
        return int(self.widget.index(index))

    def _selection(self) -> tuple[int, int] | None:
        if self._is_text:
            ranges = self.widget.tag_ranges("sel")
            if not ranges:
                return None
            return self._offset(str(ranges[0])), self._offset(str(ranges[1]))
        if not self.widget.selection_present():
            return None
        return self._offset("sel.first"), self._offset("sel.last")

    @property
    def selection_start(self) -> int:
        sel = self._selection()
        return sel[0] if sel else self._offset("insert")

    @property
    def selection_end(self) -> int:
        sel = self._selection()
        return sel[1] if sel else self._offset("insert")

    def set_selection(self, start: int, end: int) -> None:
        if self._is_text:
            self.widget.tag_remove("sel", "1.0", "end")
            if start != end:
                self.widget.tag_add("sel", f"1.0+{start}c", f"1.0+{end}c")
            self.widget.mark_set("insert", f"1.0+{end}c")
            self.widget.see("insert")
        else:
            self.widget.selection_clear()
            if start != end:
                self.widget.selection_range(start, end)
            self.widget.icursor(end)

    def focus(self) -> None:
        self.widget.focus_set()

    def notify_changed(self) -> None:
        self.widget.event_generate("<<KeyboardInput>>")


def resolve_container(container: Any, master: Any = None) -> Any:
    """Return the widget named by ``container`` or raise ContainerNotFound."""
    if container is None:
        raise ContainerNotFound("Container element not found")
    if isinstance(container, str):
        if master is None:
            raise ContainerNotFound(
                f"Cannot resolve container {container!r} without a master widget"
            )
        try:
            container = master.nametowidget(container)
        except (KeyError, tk.TclError) as exc:
            raise ContainerNotFound(f"Container {container!r} not found") from exc
    try:
        exists = container.winfo_exists()
    except (AttributeError, tk.TclError) as exc:
        raise ContainerNotFound(f"{container!r} is not a live widget") from exc
    if not exists:
        raise ContainerNotFound(f"{container!r} has been destroyed")
    return container


class VirtualKeyboard:
    """Render a :class:`KeyboardSession` as clickable tkinter buttons."""

    def __init__(
        self,
        container: Any,
        session: KeyboardSession,
        *,
        show_controls: bool = True,
        master: Any = None,
    ) -> None:
        self.container = resolve_container(container, master)
        self.session = session
        self.show_controls = show_controls

        self.key_widgets: list[tuple[Any, str]] = []
        self.lang_buttons: dict[str, Any] = {}

        self.frame = tk.Frame(self.container)
        self.frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.lang_frame = tk.Frame(self.frame)
        self.lang_frame.pack(fill=tk.X, pady=(0, 5))

        self.page_frame = tk.Frame(self.frame)
        self.page_frame.pack(fill=tk.BOTH, expand=True)

        if show_controls:
            controls = tk.Frame(self.frame)
            controls.pack(fill=tk.X, pady=(5, 0))
            tk.Button(controls, text="Speak", command=self.session.speak).pack(
                side=tk.RIGHT
            )
            tk.Button(controls, text="Clear", command=self.session.clear).pack(
                side=tk.RIGHT, padx=(0, 5)
            )

        # re-render inside the notification so the grid is current before
        # the next key can be pressed
        self._unsubscribe: list[Callable[[], None]] = [
            session.events.subscribe(MODIFIER_CHANGE, self._on_modifiers),
            session.events.subscribe(LANGUAGE_CHANGE, self._on_language),
            session.events.subscribe(LAYOUT_REGISTERED, self._on_layout_registered),
        ]

        self.render()

    # ───────── public control API ──────────────────────────────────────────
    def press(self, key: str) -> None:
        self.session.on_key(key)

    def render(self) -> None:
        self.render_languages()
        self.render_keys()

    def render_languages(self) -> None:
        for child in self.lang_frame.winfo_children():
            child.destroy()
        self.lang_buttons.clear()

        for language in self.session.languages():
            btn = tk.Button(
                self.lang_frame,
                text=self.session.registry.get(language).name,
                font=FONT,
                command=lambda lang=language: self.session.switch_language(lang),
                bg=TINT if language == self.session.language else "white",
            )
            btn.pack(side=tk.LEFT, padx=2)
            self.lang_buttons[language] = btn

    def render_keys(self) -> None:
        # clear out old widgets from the frame before rendering the new grid
        for child in self.page_frame.winfo_children():
            child.destroy()
        self.key_widgets.clear()

        for row in self.session.active_grid():
            row_frame = tk.Frame(self.page_frame)
            row_frame.pack(fill=tk.X)
            for key in row:
                btn = tk.Button(
                    row_frame,
                    text=self._label_for_key(key),
                    width=self._width_for_key(key),
                    font=FONT,
                    command=lambda k=key: self.press(k),
                    bg=self._bg_for_key(key),
                )
                btn.pack(side=tk.LEFT, expand=key == Control.Space.value, fill=tk.X)
                self.key_widgets.append((btn, key))

    def destroy(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
        self.frame.destroy()
        self.session.destroy()

    # ───────── internal helpers ────────────────────────────────────────────
    def _on_modifiers(self, _state) -> None:
        self.render_keys()

    def _on_language(self, _language: str) -> None:
        self.render()

    def _on_layout_registered(self, language: str) -> None:
        if language == self.session.language:
            self.render()  # active table replaced
        else:
            self.render_languages()

    @staticmethod
    def _label_for_key(key: str) -> str:
        return "" if key == Control.Space.value else key

    @staticmethod
    def _width_for_key(key: str) -> int:
        if key == Control.Space.value:
            return 30
        if key == Control.Enter.value:
            return 9
        if key in (Control.Shift.value, Control.Caps.value, Control.Backspace.value):
            return 7
        return 3

    def _bg_for_key(self, key: str) -> str:
        symbol = parse_symbol(key)
        state = self.session.state
        if symbol == Control.Caps and state.caps_on:
            return TINT  # Caps tint
        if symbol == Control.Shift and state.shift_on:
            return TINT  # Shift tint
        if isinstance(symbol, Control) and symbol != Control.Space:
            return SPECIAL_BG
        return "white"


def create_keyboard(
    container: Any,
    config: KeyboardConfig | None = None,
    *,
    master: Any = None,
    **session_kwargs,
) -> VirtualKeyboard:
    """Create a session from ``config`` and render it into ``container``."""
    config = config or KeyboardConfig()
    # resolve first so a bad container fails before any callbacks fire
    widget = resolve_container(container, master)
    session = create(config, **session_kwargs)
    return VirtualKeyboard(widget, session, show_controls=config.show_controls)
