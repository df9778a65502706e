from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Literal, get_args

from .explain import apply_guardrail, apply_two_layer
from .formats import format_for_x, format_newbie, format_plain
from .glossary import apply_glossary, count_technical_concepts, has_ambiguous_term
from .simplify import apply_patterns, simplify_sentences
from .text_utils import normalize_text, strip_highlight_markers


logger = logging.getLogger(__name__)

ReadingLevel = Literal["simple", "normal"]
READING_LEVELS = get_args(ReadingLevel)


@dataclass(frozen=True)
class TranslateOptions:
    keep_terms: bool = False
    highlight: bool = False
    reading_level: ReadingLevel = "simple"

    def __post_init__(self) -> None:
        if self.reading_level not in READING_LEVELS:
            raise ValueError(
                f"reading_level must be one of {', '.join(READING_LEVELS)}; got {self.reading_level!r}"
            )


@dataclass(frozen=True)
class TranslationMeta:
    used_two_layer: bool
    used_guardrail: bool


@dataclass(frozen=True)
class TranslationResult:
    plain: str
    x_ready: str
    newbie: str
    meta: TranslationMeta

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plain": self.plain,
            "xReady": self.x_ready,
            "newbie": self.newbie,
            "meta": {
                "usedTwoLayer": self.meta.used_two_layer,
                "usedGuardrail": self.meta.used_guardrail,
            },
        }


def translate_text(text: str, options: TranslateOptions | None = None) -> TranslationResult:
    """Rewrite jargon into plain, thread-ready and beginner versions.

    The thread version honours ``keep_terms`` and never carries highlights.
    The plain version always substitutes definitions (highlighted on request)
    and is the one the meta flags describe.
    """

    if options is None:
        options = TranslateOptions()

    normalized = normalize_text(text)
    concept_count = count_technical_concepts(normalized)
    needs_two_layer = concept_count >= 2
    needs_guardrail = has_ambiguous_term(normalized)
    logger.debug(
        "concepts=%d two_layer=%s guardrail=%s", concept_count, needs_two_layer, needs_guardrail
    )

    # Thread variant: glossary, then slang.
    base = apply_patterns(apply_glossary(normalized, keep_terms=options.keep_terms, highlight=False))
    base_sentences = simplify_sentences(base, options.reading_level)
    layered_base, _ = apply_two_layer(base_sentences, needs_two_layer)
    guarded_base, _ = apply_guardrail(layered_base, needs_guardrail)
    x_ready = format_for_x([strip_highlight_markers(s) for s in guarded_base])

    # Plain variant: slang, then glossary.
    plain_text = apply_glossary(apply_patterns(normalized), keep_terms=False, highlight=options.highlight)
    plain_sentences = simplify_sentences(plain_text, options.reading_level)
    layered_plain, used_two_layer = apply_two_layer(plain_sentences, needs_two_layer)
    guarded_plain, used_guardrail = apply_guardrail(layered_plain, needs_guardrail)
    plain = format_plain(guarded_plain)

    return TranslationResult(
        plain=plain,
        x_ready=x_ready,
        newbie=format_newbie(plain),
        meta=TranslationMeta(used_two_layer=used_two_layer, used_guardrail=used_guardrail),
    )


def translate(text: str, reading_level: ReadingLevel = "simple", keep_key_terms: bool = False) -> TranslationResult:
    """Page-facing shortcut: highlighting is always on."""

    options = TranslateOptions(keep_terms=keep_key_terms, highlight=True, reading_level=reading_level)
    return translate_text(text, options)
