"""Glossary substitution and technical-term detection.

Known limitation: terms are applied one after another over the text produced
so far, so a later (shorter) term can match inside a definition inserted by an
earlier one. The scan order is kept as-is for output compatibility; no guard
against matching inside inserted definitions exists.
"""
from __future__ import annotations

from typing import Iterable, Set

from .tables import AMBIGUOUS_TERMS, GLOSSARY, GLOSSARY_SCAN_ORDER
from .text_utils import mark_text, word_pattern


def apply_glossary(text: str, keep_terms: bool = False, highlight: bool = False) -> str:
    """Replace glossary terms with their plain-language definitions.

    With ``keep_terms`` every match is left untouched. With ``highlight`` each
    inserted definition is wrapped in highlight markers.
    """

    out = text
    for term in GLOSSARY_SCAN_ORDER:
        definition = GLOSSARY[term]
        replacement = mark_text(definition) if highlight else definition

        def repl(m, replacement=replacement):
            return m.group(0) if keep_terms else replacement

        out = word_pattern(term).sub(repl, out)
    return out


def find_terms(text: str, terms: Iterable[str]) -> Set[str]:
    """Return the lower-cased first match of each term found in ``text``."""

    found: Set[str] = set()
    for term in terms:
        m = word_pattern(term).search(text)
        if m:
            found.add(m.group(0).lower())
    return found


def count_technical_concepts(text: str) -> int:
    return len(find_terms(text, (*GLOSSARY, *AMBIGUOUS_TERMS)))


def has_ambiguous_term(text: str) -> bool:
    return any(word_pattern(term).search(text) for term in AMBIGUOUS_TERMS)
