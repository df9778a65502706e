"""Two-layer explanations and the guardrail prefix.

A two-layer explanation turns one terse sentence into a claim followed by a
mechanism ("It works by ..."). The split strategies form an ordered chain and
the first one whose split point exists wins.
"""
from __future__ import annotations

import logging
import re
from functools import partial
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from .tables import FALLBACK_MECHANISM, GUARDRAIL_PREFIX


logger = logging.getLogger(__name__)

_END_PUNCT = re.compile(r"[.!?]?$")
_HAS_END_PUNCT = re.compile(r"[.!?]$")

_VERB_CUES: Tuple[Tuple[str, str], ...] = (
    ("causes", "causing"),
    ("improves", "improving"),
    ("secures", "securing"),
    ("uses", "using"),
)


def _claim(text: str) -> str:
    return _END_PUNCT.sub(".", text.strip(), count=1)


def _with_connective(connective: str, head: str, tail: str) -> List[str]:
    mechanism = f"It works by {connective} {tail}"
    if not _HAS_END_PUNCT.search(mechanism):
        mechanism += "."
    return [_claim(head), mechanism]


def _clause_mechanism(head: str, tail: str) -> List[str]:
    return [_claim(head), f"It works by {tail}"]


Action = Callable[[str, str], List[str]]

# (split point, action) pairs, evaluated in order.
TWO_LAYER_CHAIN: Tuple[Tuple[str, Pattern[str], Action], ...] = (
    *(
        (f"verb:{verb}", re.compile(rf"\s+{verb}\s+", re.IGNORECASE), partial(_with_connective, gerund))
        for verb, gerund in _VERB_CUES
    ),
    ("with", re.compile(r"\s+with\s+", re.IGNORECASE), partial(_with_connective, "using")),
    (
        "clause",
        re.compile(r";\s+|,\s+but\s+|,\s+and\s+|\s+because\s+", re.IGNORECASE),
        _clause_mechanism,
    ),
)


def _split_once(pattern: Pattern[str], sentence: str) -> Optional[Tuple[str, str]]:
    parts = pattern.split(sentence, maxsplit=1)
    if len(parts) != 2:
        return None
    head, tail = parts[0].strip(), parts[1].strip()
    if not head or not tail:
        return None
    return head, tail


def explain_in_two_layers(sentence: str) -> List[str]:
    for name, pattern, action in TWO_LAYER_CHAIN:
        split = _split_once(pattern, sentence)
        if split is not None:
            logger.debug("two-layer strategy %s fired", name)
            return action(*split)
    logger.debug("two-layer fallback mechanism used")
    return [_claim(sentence), FALLBACK_MECHANISM]


def apply_two_layer(sentences: Sequence[str], enabled: bool) -> Tuple[List[str], bool]:
    """Return ``(sentences, used)``.

    Two or more sentences already read as claim + detail, so they pass through
    unchanged but still count as a two-layer explanation.
    """

    if not enabled:
        return list(sentences), False
    if len(sentences) >= 2:
        return list(sentences), True
    sentence = sentences[0] if sentences else ""
    return explain_in_two_layers(sentence), True


def apply_guardrail(sentences: Sequence[str], enabled: bool) -> Tuple[List[str], bool]:
    if not enabled or not sentences:
        return list(sentences), False
    first, *rest = sentences
    guarded = f"{GUARDRAIL_PREFIX}{first[:1].lower()}{first[1:]}"
    return [guarded, *rest], True
