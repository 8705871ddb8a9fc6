"""On-screen keyboard for typing in Latin and Indic scripts."""

from .errors import ContainerNotFound, KeyboardError, LayoutError, UnknownLanguage
from .kb_layout import LayoutTable
from .kb_layout_io import LayoutRegistry, default_registry
from .modifier_state import ModifierState
from .session import KeyboardSession, create
from .text_editor import TextField

__all__ = [
    "ContainerNotFound",
    "KeyboardError",
    "KeyboardSession",
    "LayoutError",
    "LayoutRegistry",
    "LayoutTable",
    "ModifierState",
    "TextField",
    "UnknownLanguage",
    "create",
    "default_registry",
]
