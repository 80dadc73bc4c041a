"""Symbol catalog reload orchestration and query surface."""

from __future__ import annotations

import json
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from symbol_catalog.catalog.lists import MutableSymbolList, SplitType, SymbolList
from symbol_catalog.catalog.tabs import SymbolTab, TabType
from symbol_catalog.logging import JsonlAuditLogger, ReloadEvent, utc_timestamp
from symbol_catalog.resources import (
    SYMBOL_TABS_FINDER,
    SYMBOLS_FINDER,
    Identifier,
    ResourceProvider,
)

NAMESPACE = "symbol_catalog"
IDENTIFIER = Identifier(NAMESPACE, "symbols")
FAVORITES_ID = Identifier(NAMESPACE, "favorites")
CUSTOM_KAOMOJIS_ID = Identifier(NAMESPACE, "custom_kaomojis")

_T = TypeVar("_T")


class ReloadError(Exception):
    """Raised when a reload cannot complete; the previous catalog stays published."""

    def __init__(self, identifier: Identifier, reason: str) -> None:
        super().__init__(f"Could not load {identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason


class FavoritesConfig(Protocol):
    """Configuration surface the manager reads on config reload."""

    def get_favorite_symbols(self) -> str: ...

    def get_custom_kaomojis(self) -> Iterable[str]: ...


@dataclass(slots=True, frozen=True)
class _CatalogState:
    """Published catalog; replaced wholesale on each successful reload."""

    tabs: tuple[SymbolTab, ...] = ()
    lists: dict[Identifier, SymbolList] = field(default_factory=dict)


class SymbolManager:
    """Builds the tab catalog from tab-definition and symbol resources."""

    def __init__(self, audit_logger: JsonlAuditLogger | None = None) -> None:
        self._audit_logger = audit_logger
        self._favorites = MutableSymbolList(FAVORITES_ID)
        self._custom_kaomojis = MutableSymbolList(CUSTOM_KAOMOJIS_ID)
        self._state = _CatalogState(lists=self._seed_cache())

    def identity(self) -> Identifier:
        return IDENTIFIER

    @property
    def favorites_list(self) -> MutableSymbolList:
        return self._favorites

    @property
    def custom_kaomojis_list(self) -> MutableSymbolList:
        return self._custom_kaomojis

    def reload(self, provider: ResourceProvider) -> None:
        """Rebuild every tab and list, publishing only if the whole pass succeeds."""
        started = time.perf_counter()
        try:
            tabs, cache = self._build(provider)
        except ReloadError as error:
            self._log(
                action="reload",
                ok=False,
                error_code="RELOAD_FAILED",
                identifier=str(error.identifier),
                metadata={"reason": error.reason},
            )
            raise
        self._state = _CatalogState(tabs=tabs, lists=cache)
        self._log(
            action="reload",
            ok=True,
            metadata={
                "tab_count": len(tabs),
                "list_count": len(cache),
                "duration_ms": int((time.perf_counter() - started) * 1000),
            },
        )

    def on_config_reload(self, config: FavoritesConfig) -> None:
        """Reset favorites and custom kaomojis in place.

        Favorites are one symbol per raw code point; unlike CODEPOINT splitting,
        variation selectors are not merged, so U+2764 U+FE0F yields two favorites.
        """
        self._favorites.clear()
        for char in config.get_favorite_symbols():
            self._favorites.add_symbol(char)
        self._custom_kaomojis.clear()
        for kaomoji in config.get_custom_kaomojis():
            self._custom_kaomojis.add_symbol(kaomoji)
        self._log(
            action="config_reload",
            ok=True,
            metadata={
                "favorite_count": len(self._favorites),
                "custom_kaomoji_count": len(self._custom_kaomojis),
            },
        )

    def is_favorite(self, symbol: str) -> bool:
        return self._favorites.contains_symbol(symbol)

    def get_tabs(self) -> tuple[SymbolTab, ...]:
        return self._state.tabs

    def get_tab(self, identifier: Identifier) -> SymbolTab | None:
        for tab in self._state.tabs:
            if tab.id == identifier:
                return tab
        return None

    def get_list(self, identifier: Identifier) -> SymbolList | None:
        return self._state.lists.get(identifier)

    def get_favorite_symbols(self) -> Iterator[str]:
        return self._favorites.stream_symbols()

    def is_only_favorites(self, tab: SymbolTab) -> bool:
        """True when the tab's single list is the favorites list itself."""
        symbols = tab.get_symbols()
        return len(symbols) == 1 and symbols[0] is self._favorites

    def snapshot(self) -> dict[str, object]:
        """Return a serializable description of the published catalog."""
        return {
            "tabs": [
                {
                    "id": str(tab.id),
                    "icon": tab.icon,
                    "order": tab.order,
                    "type": tab.type.name,
                    "search_bar": tab.has_search_bar,
                    "lists": [str(symbol_list.id) for symbol_list in tab.get_symbols()],
                    "symbol_count": sum(len(symbol_list) for symbol_list in tab.get_symbols()),
                }
                for tab in self._state.tabs
            ],
            "lists": sorted(str(list_id) for list_id in self._state.lists),
            "favorites": list(self._favorites.stream_symbols()),
        }

    def _build(
        self, provider: ResourceProvider
    ) -> tuple[tuple[SymbolTab, ...], dict[Identifier, SymbolList]]:
        cache = self._seed_cache()
        try:
            tab_resources = SYMBOL_TABS_FINDER.find_resources(provider)
        except (OSError, ValueError) as error:
            raise ReloadError(IDENTIFIER, str(error)) from error
        tabs: list[SymbolTab] = []
        for file_id, resource in tab_resources.items():
            try:
                tab_id = SYMBOL_TABS_FINDER.to_resource_id(file_id)
            except ValueError as error:
                raise ReloadError(file_id, str(error)) from error
            try:
                with resource.open() as reader:
                    payload = json.load(reader)
                tabs.append(self._read_tab(provider, tab_id, payload, cache))
            except (OSError, ValueError) as error:
                raise ReloadError(tab_id, str(error)) from error
        tabs.sort()
        return tuple(tabs), cache

    def _seed_cache(self) -> dict[Identifier, SymbolList]:
        return {
            self._favorites.id: self._favorites,
            self._custom_kaomojis.id: self._custom_kaomojis,
        }

    def _read_tab(
        self,
        provider: ResourceProvider,
        tab_id: Identifier,
        payload: object,
        cache: dict[Identifier, SymbolList],
    ) -> SymbolTab:
        if not isinstance(payload, dict):
            raise ValueError("Tab definition must be a JSON object.")
        icon = _required(payload, "icon", str, "a string")
        order = _required(payload, "order", int, "an integer")
        tab_type = TabType.get_or_default(
            _optional(payload, "type", str, "a string", None), TabType.SYMBOLS
        )
        search_bar = _optional(payload, "search_bar", bool, "a boolean", False)
        symbol_files = _optional(payload, "symbols", list, "a list", [])
        return SymbolTab(
            tab_id=tab_id,
            icon=icon,
            order=order,
            tab_type=tab_type,
            search_bar=bool(search_bar),
            symbols=self._read_symbol_lists(provider, symbol_files or [], cache),
        )

    def _read_symbol_lists(
        self,
        provider: ResourceProvider,
        symbol_files: list[object],
        cache: dict[Identifier, SymbolList],
    ) -> list[SymbolList]:
        symbols: list[SymbolList] = []
        for entry in symbol_files:
            if isinstance(entry, str):
                symbols.append(
                    self._read_symbol_list(
                        provider, Identifier.parse(entry), SplitType.CODEPOINT, cache
                    )
                )
                continue
            if not isinstance(entry, dict):
                continue
            split_type = SplitType.get_or_default(
                _optional(entry, "split", str, "a string", None), SplitType.CODEPOINT
            )
            list_id = Identifier.parse(_required(entry, "symbols", str, "a string"))
            symbols.append(self._read_symbol_list(provider, list_id, split_type, cache))
        return symbols

    def _read_symbol_list(
        self,
        provider: ResourceProvider,
        list_id: Identifier,
        split_type: SplitType,
        cache: dict[Identifier, SymbolList],
    ) -> SymbolList:
        cached = cache.get(list_id)
        if cached is not None:
            return cached
        try:
            with provider.open(SYMBOLS_FINDER.to_resource_path(list_id)) as reader:
                symbol_list = SymbolList(list_id, split_type.split(reader.read()))
        except (OSError, ValueError) as error:
            raise ReloadError(list_id, str(error)) from error
        cache[list_id] = symbol_list
        return symbol_list

    def _log(
        self,
        action: str,
        ok: bool,
        metadata: dict[str, object],
        error_code: str | None = None,
        identifier: str | None = None,
    ) -> None:
        if self._audit_logger is None:
            return
        self._audit_logger.append(
            ReloadEvent(
                timestamp=utc_timestamp(),
                listener=str(IDENTIFIER),
                action=action,
                ok=ok,
                error_code=error_code,
                identifier=identifier,
                metadata=metadata,
            )
        )


def _required(payload: dict[str, object], key: str, kind: type[_T], label: str) -> _T:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}'.")
    return _checked(payload[key], key, kind, label)


def _optional(
    payload: dict[str, object], key: str, kind: type[_T], label: str, default: _T | None
) -> _T | None:
    value = payload.get(key)
    if value is None:
        return default
    return _checked(value, key, kind, label)


def _checked(value: object, key: str, kind: type[_T], label: str) -> _T:
    if kind is int and isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be {label}.")
    if not isinstance(value, kind):
        raise ValueError(f"Field '{key}' must be {label}.")
    return value
