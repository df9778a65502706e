from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import load_options
from .pipeline import TranslationResult, translate_text
from .samples import run_samples


EMPTY_OUTPUT = "No output yet."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jargon_to_human",
        description="Rewrite crypto jargon into plain, thread-ready and beginner-friendly text.",
    )
    p.add_argument("text", nargs="?", help="Text to translate (reads stdin when omitted).")
    p.add_argument("--keep-terms", action="store_true", default=None, help="Keep glossary terms in the thread version.")
    p.add_argument("--highlight", action="store_true", default=None, help="Mark inserted definitions with [[H]]…[[/H]].")
    p.add_argument("--reading-level", choices=["simple", "normal"], default=None)
    p.add_argument("--json", action="store_true", help="Print the result as JSON.")
    p.add_argument("--samples", action="store_true", help="Run the built-in development samples.")
    p.add_argument("--log-level", default=os.getenv("JARGON_LOG_LEVEL", "WARNING"))
    return p


def _print_result(result: TranslationResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    print("== Plain ==")
    print(result.plain)
    print()
    print("== X-ready ==")
    print(result.x_ready)
    print()
    print("== Newbie ==")
    print(result.newbie)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.samples:
        for sample, result in run_samples():
            print("Jargon to Human sample")
            print("Input:", sample)
            print("Plain:", result.plain)
            print("X-ready:", result.x_ready)
            print("Newbie:", result.newbie)
            print()
        return 0

    text = args.text
    if text is None:
        text = sys.stdin.read() if not sys.stdin.isatty() else ""

    if not text.strip():
        print(EMPTY_OUTPUT)
        return 0

    options = load_options(
        keep_terms=args.keep_terms,
        highlight=args.highlight,
        reading_level=args.reading_level,
    )
    _print_result(translate_text(text, options), args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
