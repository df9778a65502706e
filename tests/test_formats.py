from __future__ import annotations

from jargon_to_human.formats import build_newbie_extras, format_for_x, format_newbie, format_plain
from jargon_to_human.tables import GENERIC_TIP


def test_format_plain() -> None:
    assert format_plain(["a.", "b."]) == "a. b."


def test_format_for_x_one_thought_per_line() -> None:
    out = format_for_x(["Fees rose, users left. Prices fell; whales sold: nobody cared!"])
    assert out == "Fees rose\n\nusers left\n\nPrices fell\n\nwhales sold\n\nnobody cared"


def test_format_for_x_wraps_at_80() -> None:
    out = format_for_x([" ".join(["word"] * 40)])
    lines = out.split("\n\n")
    assert len(lines) > 1
    assert all(len(ln) <= 80 for ln in lines)


def test_format_for_x_empty() -> None:
    assert format_for_x([""]) == ""


def test_newbie_tips_priority_and_cap() -> None:
    assert build_newbie_extras("gas, scam, price, bridge") == [
        "Why it matters: small fees add up, so plan your steps.",
        "Safety tip: double-check sources before you act.",
    ]


def test_newbie_generic_tip_fills_in() -> None:
    assert build_newbie_extras("hello") == [GENERIC_TIP]
    assert build_newbie_extras("Use a BRIDGE") == [
        "Bridging can take time and extra fees, so be patient.",
        GENERIC_TIP,
    ]


def test_format_newbie() -> None:
    assert format_newbie("Hi") == "Hi\n\n" + GENERIC_TIP
