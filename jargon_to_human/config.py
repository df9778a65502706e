"""Translation options from environment variables and explicit overrides.

Resolution order (later wins):
  1. ``TranslateOptions`` defaults
  2. Environment variables
  3. Keyword arguments to ``load_options``

Supported env vars:
  - JARGON_KEEP_TERMS  ("true"/"false", "yes"/"no", "on"/"off", "1"/"0")
  - JARGON_HIGHLIGHT   (same boolean words)
  - JARGON_READING_LEVEL  ("simple" or "normal")
"""
from __future__ import annotations

import os
from dataclasses import fields, replace
from typing import Any, Dict, Optional

from .pipeline import TranslateOptions


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean word, got {raw!r}")


def _env(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw


def load_options(**overrides: Any) -> TranslateOptions:
    known = {f.name for f in fields(TranslateOptions)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"Unknown option(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}

    keep = _env("JARGON_KEEP_TERMS")
    if keep is not None:
        values["keep_terms"] = _parse_bool("JARGON_KEEP_TERMS", keep)

    highlight = _env("JARGON_HIGHLIGHT")
    if highlight is not None:
        values["highlight"] = _parse_bool("JARGON_HIGHLIGHT", highlight)

    level = _env("JARGON_READING_LEVEL")
    if level is not None:
        values["reading_level"] = level.strip().lower()

    values.update({k: v for k, v in overrides.items() if v is not None})
    # TranslateOptions validates reading_level on construction.
    return replace(TranslateOptions(), **values)
