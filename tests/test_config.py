from __future__ import annotations

import pytest

from jargon_to_human.config import load_options
from jargon_to_human.pipeline import TranslateOptions


def test_defaults() -> None:
    assert load_options() == TranslateOptions(keep_terms=False, highlight=False, reading_level="simple")


def test_env_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JARGON_KEEP_TERMS", "yes")
    monkeypatch.setenv("JARGON_HIGHLIGHT", "off")
    monkeypatch.setenv("JARGON_READING_LEVEL", "Normal")

    opts = load_options()

    assert opts.keep_terms is True
    assert opts.highlight is False
    assert opts.reading_level == "normal"


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JARGON_KEEP_TERMS", "1")
    assert load_options(keep_terms=False).keep_terms is False


def test_none_override_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JARGON_HIGHLIGHT", "true")
    assert load_options(highlight=None).highlight is True


def test_invalid_bool_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JARGON_HIGHLIGHT", "maybe")
    with pytest.raises(ValueError):
        load_options()


def test_invalid_reading_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JARGON_READING_LEVEL", "expert")
    with pytest.raises(ValueError):
        load_options()


def test_unknown_override_key_raises() -> None:
    with pytest.raises(TypeError):
        load_options(not_a_real_key=True)
