from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JARGON_KEEP_TERMS", "JARGON_HIGHLIGHT", "JARGON_READING_LEVEL", "JARGON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
