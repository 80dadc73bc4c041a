from __future__ import annotations

import json
from dataclasses import dataclass

from symbol_catalog.catalog import CUSTOM_KAOMOJIS_ID, FAVORITES_ID, SymbolManager
from symbol_catalog.resources import Identifier, InMemoryResourceProvider


@dataclass(frozen=True)
class StaticConfig:
    favorites: str
    kaomojis: tuple[str, ...] = ()

    def get_favorite_symbols(self) -> str:
        return self.favorites

    def get_custom_kaomojis(self) -> tuple[str, ...]:
        return self.kaomojis


def _manager_with_shared_tabs() -> SymbolManager:
    manager = SymbolManager()
    manager.reload(
        InMemoryResourceProvider(
            {
                Identifier("ns", "symbol_tabs/favorites.json"): json.dumps(
                    {"icon": "*", "order": 0, "symbols": [str(FAVORITES_ID)]}
                ),
                Identifier("ns", "symbol_tabs/kaomoji.json"): json.dumps(
                    {
                        "icon": "k",
                        "order": 1,
                        "type": "KAOMOJI",
                        "symbols": [{"symbols": str(CUSTOM_KAOMOJIS_ID), "split": "LINE"}],
                    }
                ),
            }
        )
    )
    return manager


def test_favorites_are_one_per_code_point() -> None:
    manager = SymbolManager()

    manager.on_config_reload(StaticConfig(favorites="★a\U0001f525"))

    assert list(manager.get_favorite_symbols()) == ["★", "a", "\U0001f525"]
    assert manager.is_favorite("\U0001f525")
    assert not manager.is_favorite("A")
    assert not manager.is_favorite("★a")


def test_config_reload_replaces_previous_favorites() -> None:
    manager = SymbolManager()
    manager.on_config_reload(StaticConfig(favorites="ab"))

    manager.on_config_reload(StaticConfig(favorites="c"))

    assert not manager.is_favorite("a")
    assert manager.is_favorite("c")


def test_previously_obtained_tabs_observe_config_updates() -> None:
    manager = _manager_with_shared_tabs()
    favorites_tab = manager.get_tab(Identifier("ns", "favorites"))
    kaomoji_tab = manager.get_tab(Identifier("ns", "kaomoji"))
    tabs_before = manager.get_tabs()
    assert favorites_tab is not None and kaomoji_tab is not None
    assert list(favorites_tab.stream_symbols()) == []

    manager.on_config_reload(StaticConfig(favorites="xy", kaomojis=("(^_^)", "(>_<)")))

    assert list(favorites_tab.stream_symbols()) == ["x", "y"]
    assert list(kaomoji_tab.stream_symbols()) == ["(^_^)", "(>_<)"]
    assert manager.get_tabs() is tabs_before


def test_config_survives_full_reload() -> None:
    manager = _manager_with_shared_tabs()
    manager.on_config_reload(StaticConfig(favorites="q"))

    manager.reload(InMemoryResourceProvider({}))
    manager.reload(
        InMemoryResourceProvider(
            {
                Identifier("ns", "symbol_tabs/favorites.json"): json.dumps(
                    {"icon": "*", "order": 0, "symbols": [str(FAVORITES_ID)]}
                )
            }
        )
    )

    tab = manager.get_tab(Identifier("ns", "favorites"))
    assert tab is not None
    assert list(tab.stream_symbols()) == ["q"]


def test_favorites_do_not_merge_variation_selectors() -> None:
    manager = SymbolManager()

    manager.on_config_reload(StaticConfig(favorites="\u2764\ufe0f"))

    assert list(manager.get_favorite_symbols()) == ["\u2764", "\ufe0f"]
    assert manager.is_favorite("\u2764")
    assert not manager.is_favorite("\u2764\ufe0f")
