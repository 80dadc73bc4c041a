"""Symbol tabs: ordered, typed groupings of symbol lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum
from itertools import chain

from symbol_catalog.catalog.lists import SymbolList
from symbol_catalog.resources.identifier import Identifier


class TabType(Enum):
    """Display kind of a tab."""

    SYMBOLS = "SYMBOLS"
    KAOMOJI = "KAOMOJI"

    @classmethod
    def get_or_default(cls, name: str | None, fallback: TabType) -> TabType:
        """Case-sensitive lookup by variant name, falling back for None or unknown."""
        if name is None:
            return fallback
        return cls.__members__.get(name, fallback)


class SymbolTab:
    """One tab of the catalog.

    Tabs sort by ``order`` ascending, then by identifier, so equal orders still
    produce the same sequence on every reload. Lists are held by reference;
    the favorites and custom lists are shared with the manager.
    """

    __slots__ = ("_id", "_icon", "_order", "_type", "_search_bar", "_symbols")

    def __init__(
        self,
        tab_id: Identifier,
        icon: str,
        order: int,
        tab_type: TabType,
        search_bar: bool,
        symbols: Iterable[SymbolList],
    ) -> None:
        self._id = tab_id
        self._icon = icon
        self._order = order
        self._type = tab_type
        self._search_bar = search_bar
        self._symbols: tuple[SymbolList, ...] = tuple(symbols)

    @property
    def id(self) -> Identifier:
        return self._id

    @property
    def icon(self) -> str:
        return self._icon

    @property
    def order(self) -> int:
        return self._order

    @property
    def type(self) -> TabType:
        return self._type

    @property
    def has_search_bar(self) -> bool:
        return self._search_bar

    def get_symbols(self) -> Sequence[SymbolList]:
        return self._symbols

    def stream_symbols(self) -> Iterator[str]:
        """Yield every symbol of every list, in list order."""
        return chain.from_iterable(symbol_list.stream_symbols() for symbol_list in self._symbols)

    def is_kaomoji(self) -> bool:
        return self._type is TabType.KAOMOJI

    def sort_key(self) -> tuple[int, Identifier]:
        return (self._order, self._id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SymbolTab):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return (
            f"SymbolTab({self._id}, order={self._order}, type={self._type.name}, "
            f"lists={[str(item.id) for item in self._symbols]})"
        )
