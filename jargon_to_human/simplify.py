from __future__ import annotations

from typing import List

from .sentence_segmenter import split_sentences, wrap_sentences
from .tables import PLAIN_LINE_LIMIT, REWRITE_RULES
from .text_utils import strip_fillers


def apply_patterns(text: str) -> str:
    """Rewrite slang, memes and idioms into plain words.

    Each rule runs once over the whole text, in table order.
    """

    out = text
    for pattern, replace in REWRITE_RULES:
        out = pattern.sub(lambda _m, r=replace: r, out)
    return out


def simplify_sentences(text: str, reading_level: str = "simple") -> List[str]:
    """Drop filler words and split into sentences.

    At the "simple" reading level long sentences are also wrapped at the
    plain-text line budget.
    """

    sentences = split_sentences(strip_fillers(text))
    if reading_level == "normal":
        return sentences
    return wrap_sentences(sentences, PLAIN_LINE_LIMIT)
