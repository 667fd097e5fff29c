"""Keyword-based content filter.

Flags text containing any blocked word as a case-insensitive substring.
There is no scoring and no allow-list, so innocent words that contain a
blocked term (``robot`` contains ``bot``) are flagged too.
"""

from __future__ import annotations

from collections.abc import Iterable

from app.core.config import settings
from app.core.constants import BLOCKED_WORDS


def get_blocked_words() -> tuple[str, ...]:
    """Return the built-in word list plus ``CONTENT_FILTER_EXTRA_WORDS``."""
    extra = [
        w.strip().lower()
        for w in settings.CONTENT_FILTER_EXTRA_WORDS.split(",")
        if w.strip()
    ]
    return BLOCKED_WORDS + tuple(w for w in extra if w not in BLOCKED_WORDS)


def contains_blocked_word(
    text: str | None,
    blocked_words: Iterable[str] | None = None,
) -> bool:
    """Return True if *text* contains any blocked word.

    Parameters
    ----------
    text:
        Text to check.  ``None`` and empty strings are never flagged.
    blocked_words:
        Word list to match against.  Defaults to ``get_blocked_words()``.
    """
    if not text:
        return False
    words = get_blocked_words() if blocked_words is None else blocked_words
    lowered = text.lower()
    return any(word.lower() in lowered for word in words if word)
