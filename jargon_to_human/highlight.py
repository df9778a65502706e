from __future__ import annotations

import html
import re

from .tables import HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN
from .text_utils import strip_highlight_markers


_HIGHLIGHT_SPAN = re.compile(re.escape(HIGHLIGHT_OPEN) + r"(.*?)" + re.escape(HIGHLIGHT_CLOSE))

MARK_TEMPLATE = '<mark class="highlight">{}</mark>'


def render_highlighted_text(text: str, highlight: bool) -> str:
    """Turn pipeline output into display markup.

    Highlight markers become ``<mark>`` spans (or are dropped when
    ``highlight`` is off) and newlines become ``<br />``.
    """

    escaped = html.escape(text, quote=False)
    if not highlight:
        return strip_highlight_markers(escaped).replace("\n", "<br />")

    marked = _HIGHLIGHT_SPAN.sub(lambda m: MARK_TEMPLATE.format(m.group(1)), escaped)
    return marked.replace("\n", "<br />")
