"""Ordered symbol lists and the tokenization policies that build them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from symbol_catalog.resources.identifier import Identifier

_VARIATION_SELECTORS = range(0xFE00, 0xFE10)


def _split_codepoints(text: str) -> list[str]:
    symbols: list[str] = []
    for char in text:
        if ord(char) in _VARIATION_SELECTORS:
            if symbols:
                symbols[-1] += char
            continue
        if char.isspace():
            continue
        symbols.append(char)
    return symbols


def _split_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


class SplitType(Enum):
    """How raw symbol-file text is tokenized into symbols."""

    CODEPOINT = "CODEPOINT"
    LINE = "LINE"

    @classmethod
    def get_or_default(cls, name: str | None, fallback: SplitType) -> SplitType:
        """Case-sensitive lookup by variant name, falling back for None or unknown."""
        if name is None:
            return fallback
        return cls.__members__.get(name, fallback)

    def split(self, text: str) -> list[str]:
        """Tokenize text in appearance order without removing duplicates."""
        if self is SplitType.LINE:
            return _split_lines(text)
        return _split_codepoints(text)


class SymbolList:
    """Immutable ordered symbols addressed by an identifier."""

    __slots__ = ("_id", "_symbols", "_members")

    def __init__(self, list_id: Identifier, symbols: Iterable[str] = ()) -> None:
        self._id = list_id
        self._symbols: list[str] = list(symbols)
        self._members: set[str] = set(self._symbols)

    @property
    def id(self) -> Identifier:
        return self._id

    def contains_symbol(self, symbol: str) -> bool:
        return symbol in self._members

    def stream_symbols(self) -> Iterator[str]:
        """Yield symbols in stored order."""
        return iter(tuple(self._symbols))

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id}, {len(self._symbols)} symbols)"


class MutableSymbolList(SymbolList):
    """Long-lived list whose contents are reset from configuration."""

    __slots__ = ()

    def clear(self) -> None:
        self._symbols.clear()
        self._members.clear()

    def add_symbol(self, symbol: str) -> None:
        """Append a symbol; duplicates are kept as display positions."""
        self._symbols.append(symbol)
        self._members.add(symbol)
