from __future__ import annotations

from symbol_catalog.catalog import SplitType, SymbolList
from symbol_catalog.resources import Identifier


def test_codepoint_split_keeps_emoji_and_variation_selectors_together() -> None:
    symbols = SplitType.CODEPOINT.split("\U0001f525\u2764\ufe0fA")

    assert symbols == ["\U0001f525", "\u2764\ufe0f", "A"]
    symbol_list = SymbolList(Identifier("ns", "emoji"), symbols)
    assert list(symbol_list.stream_symbols()) == ["\U0001f525", "\u2764\ufe0f", "A"]


def test_codepoint_split_skips_whitespace_and_keeps_duplicates() -> None:
    assert SplitType.CODEPOINT.split("a b\n\ta\r\n") == ["a", "b", "a"]


def test_line_split_preserves_interior_spacing() -> None:
    text = "(´・ω・`)\n\n   \n(  ^_^  )\r\n"

    assert SplitType.LINE.split(text) == [
        "(´・ω・`)",
        "(  ^_^  )",
    ]


def test_get_or_default_is_case_sensitive_and_total() -> None:
    assert SplitType.get_or_default("LINE", SplitType.CODEPOINT) is SplitType.LINE
    assert SplitType.get_or_default("line", SplitType.CODEPOINT) is SplitType.CODEPOINT
    assert SplitType.get_or_default(None, SplitType.LINE) is SplitType.LINE
    assert SplitType.get_or_default("bogus", SplitType.CODEPOINT) is SplitType.CODEPOINT
