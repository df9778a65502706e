from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern

from .tables import FILLER_PHRASES, HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN


_DOUBLE_QUOTES = re.compile(r"[“”]")
_SINGLE_QUOTES = re.compile(r"[‘’]")
_WHITESPACE = re.compile(r"\s+")

_FILLER_RE = re.compile(
    r"\b(" + "|".join(re.escape(f) for f in FILLER_PHRASES) + r")\b",
    re.IGNORECASE,
)

_HIGHLIGHT_TOKENS = re.compile(re.escape(HIGHLIGHT_OPEN) + "|" + re.escape(HIGHLIGHT_CLOSE))


def normalize_text(text: str) -> str:
    """Straighten curly quotes and collapse every whitespace run to one space."""

    text = _DOUBLE_QUOTES.sub('"', text)
    text = _SINGLE_QUOTES.sub("'", text)
    return _WHITESPACE.sub(" ", text).strip()


@lru_cache(maxsize=None)
def word_pattern(term: str) -> Pattern[str]:
    """Case-insensitive whole-word matcher for a literal term or phrase."""

    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


def strip_fillers(text: str) -> str:
    out = _FILLER_RE.sub("", text)
    return _WHITESPACE.sub(" ", out).strip()


def mark_text(text: str) -> str:
    return f"{HIGHLIGHT_OPEN}{text}{HIGHLIGHT_CLOSE}"


def strip_highlight_markers(text: str) -> str:
    return _HIGHLIGHT_TOKENS.sub("", text)
