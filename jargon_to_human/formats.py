from __future__ import annotations

import re
from typing import List, Sequence

from .sentence_segmenter import break_long_sentence
from .tables import GENERIC_TIP, MAX_NEWBIE_TIPS, NEWBIE_TIPS, THREAD_LINE_LIMIT


_THOUGHT_SPLIT = re.compile(r"(?<=[.!?])\s+|;\s+|:\s+|,\s+")
_TRAILING_PUNCT = re.compile(r"[.!?]+$")


def format_plain(sentences: Sequence[str]) -> str:
    return " ".join(sentences)


def format_for_x(sentences: Sequence[str]) -> str:
    """One short thought per line, blank line between thoughts, no end punctuation."""

    lines: List[str] = []
    for sentence in sentences:
        pieces = [p.strip() for p in _THOUGHT_SPLIT.split(sentence)]
        for piece in pieces:
            if piece:
                lines.extend(break_long_sentence(piece, THREAD_LINE_LIMIT))

    cleaned = (_TRAILING_PUNCT.sub("", ln) for ln in lines)
    return "\n\n".join(ln for ln in cleaned if ln)


def build_newbie_extras(text: str) -> List[str]:
    """Pick up to two beginner tips based on topic cues in ``text``."""

    lower = text.lower()
    extras = [tip for cue, tip in NEWBIE_TIPS if cue.search(lower)]
    if len(extras) < MAX_NEWBIE_TIPS:
        extras.append(GENERIC_TIP)
    return extras[:MAX_NEWBIE_TIPS]


def format_newbie(plain: str) -> str:
    return "\n\n".join([plain, *build_newbie_extras(plain)])
