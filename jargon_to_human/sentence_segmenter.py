from __future__ import annotations

import re
from typing import Iterable, List


_SENT_SPLIT = re.compile(r"(?<=[.!?])\s+")
_CLAUSE_SPLIT = re.compile(r",\s+|\s+and\s+", re.IGNORECASE)


def split_sentences(text: str) -> List[str]:
    """Split on sentence-ending punctuation, keeping it with the sentence.

    Never returns an empty list: text without any boundary is one sentence.
    """

    parts = [p.strip() for p in _SENT_SPLIT.split(text)]
    out = [p for p in parts if p]
    return out or [text]


def _wrap_words(chunk: str, limit: int) -> List[str]:
    lines: List[str] = []
    line = ""
    for word in chunk.split():
        candidate = f"{line} {word}" if line else word
        if len(candidate) > limit:
            if line:
                lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


def break_long_sentence(sentence: str, limit: int) -> List[str]:
    """Break a sentence into lines of at most ``limit`` characters.

    Clauses (split at commas and "and") are packed greedily first; a clause
    that is still too long is word-wrapped. A single word longer than the
    limit stays on its own line.
    """

    if len(sentence) <= limit:
        return [sentence]

    chunks: List[str] = []
    current = ""
    for part in _CLAUSE_SPLIT.split(sentence):
        candidate = f"{current}, {part}" if current else part
        if len(candidate) > limit:
            if current:
                chunks.append(current)
            current = part
        else:
            current = candidate
    if current:
        chunks.append(current)

    wrapped: List[str] = []
    for chunk in chunks:
        if len(chunk) <= limit:
            wrapped.append(chunk)
        else:
            wrapped.extend(_wrap_words(chunk, limit))
    return wrapped


def wrap_sentences(sentences: Iterable[str], limit: int) -> List[str]:
    out: List[str] = []
    for s in sentences:
        out.extend(break_long_sentence(s, limit))
    return out
