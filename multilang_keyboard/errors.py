"""Exceptions raised by the keyboard package."""


class KeyboardError(Exception):
    """Base class for keyboard errors."""


class UnknownLanguage(KeyboardError, KeyError):
    """No layout is registered under the requested language id."""

    def __init__(self, language: str) -> None:
        super().__init__(language)
        self.language = language

    def __str__(self) -> str:
        return f"Layout '{self.language}' not registered"


class ContainerNotFound(KeyboardError, RuntimeError):
    """The widget the keyboard should render into could not be resolved."""


class LayoutError(KeyboardError, ValueError):
    """A layout table is malformed."""
