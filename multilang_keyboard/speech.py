"""Read the typed text aloud with pyttsx3."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _norm(tag: Any) -> str:
    """Normalise a locale tag so ``hi_IN``, ``hi-in`` and ``HI-IN`` compare equal."""
    if isinstance(tag, bytes):
        # espeak reports languages as bytes with a leading priority byte
        tag = tag.decode("utf-8", errors="ignore")
    tag = "".join(c for c in str(tag) if c.isprintable())
    return tag.replace("_", "-").lower()


class Speaker:
    """Speak text in a given locale.

    The pyttsx3 engine is created on first use so constructing a keyboard never
    requires a working speech backend.
    """

    def __init__(
        self,
        engine: Any = None,
        rate: int | None = None,
        volume: float | None = None,
    ) -> None:
        self._engine = engine
        self.rate = rate
        self.volume = volume

    @property
    def engine(self):
        if self._engine is None:
            import pyttsx3

            self._engine = pyttsx3.init()
            if self.rate is not None:
                self._engine.setProperty("rate", self.rate)
            if self.volume is not None:
                self._engine.setProperty("volume", self.volume)
        return self._engine

    def voice_for(self, locale: str) -> str | None:
        """Return the id of the installed voice best matching ``locale``."""
        wanted = _norm(locale)
        language = wanted.split("-")[0]
        fallback = None
        for voice in self.engine.getProperty("voices") or []:
            tags = [_norm(t) for t in (getattr(voice, "languages", None) or [])]
            if wanted in tags or wanted in _norm(voice.id):
                return voice.id
            if fallback is None and any(t.split("-")[0] == language for t in tags):
                fallback = voice.id
        return fallback

    def say(self, text: str, locale: str) -> None:
        try:
            engine = self.engine
            voice = self.voice_for(locale)
            if voice is not None:
                engine.setProperty("voice", voice)
            else:
                logger.info("No %s voice installed, using the default voice", locale)
            engine.say(text)
            engine.runAndWait()
        except (RuntimeError, OSError) as exc:
            logger.warning("Speech failed for locale %s: %s", locale, exc)
