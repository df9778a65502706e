from __future__ import annotations

from jargon_to_human.text_utils import normalize_text, strip_fillers, strip_highlight_markers


def test_normalize_straightens_quotes_and_collapses_whitespace() -> None:
    assert normalize_text("  “Hi”\n\t‘there’  ") == "\"Hi\" 'there'"


def test_normalize_empty() -> None:
    assert normalize_text("") == ""
    assert normalize_text(" \n\t ") == ""


def test_strip_fillers_removes_whole_words_and_phrases() -> None:
    assert strip_fillers("I basically just like staking") == "I staking"
    assert strip_fillers("It is kind of great, you know") == "It is great,"


def test_strip_fillers_leaves_larger_words_alone() -> None:
    assert strip_fillers("justice is unlikely") == "justice is unlikely"


def test_strip_highlight_markers() -> None:
    assert strip_highlight_markers("[[H]]a[[/H]] b") == "a b"
