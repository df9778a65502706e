from __future__ import annotations

from jargon_to_human.sentence_segmenter import break_long_sentence, split_sentences, wrap_sentences


def test_split_keeps_punctuation() -> None:
    assert split_sentences("One. Two! Three?") == ["One.", "Two!", "Three?"]


def test_no_boundary_is_one_sentence() -> None:
    assert split_sentences("no boundary here") == ["no boundary here"]
    assert split_sentences("v1.2 is out") == ["v1.2 is out"]


def test_short_sentence_untouched() -> None:
    assert break_long_sentence("short", 90) == ["short"]


def test_clause_packing() -> None:
    s = "the first clause is here, the second clause is here, and the third clause is here"
    assert break_long_sentence(s, 40) == [
        "the first clause is here",
        "the second clause is here",
        "and the third clause is here",
    ]


def test_clauses_packed_together_when_they_fit() -> None:
    s = "alpha, beta, gamma and delta " + "x" * 20
    assert break_long_sentence(s, 30) == ["alpha, beta, gamma", "delta " + "x" * 20]


def test_word_wrap_fallback() -> None:
    assert break_long_sentence("aaaa bbbb cccc dddd eeee ffff", 10) == ["aaaa bbbb", "cccc dddd", "eeee ffff"]


def test_never_splits_inside_a_word() -> None:
    assert break_long_sentence("x" * 30 + " y", 10) == ["x" * 30, "y"]


def test_wrapped_lines_respect_limit() -> None:
    words = ["validators", "confirm", "transactions", "quickly,", "and", "bridges", "move", "assets"] * 8
    lines = wrap_sentences([" ".join(words)], 90)
    for ln in lines:
        assert len(ln) <= 90 or " " not in ln
    expected = [w.rstrip(",") for w in words if w != "and"]
    rebuilt = [w.rstrip(",") for w in " ".join(lines).split() if w != "and"]
    assert rebuilt == expected
