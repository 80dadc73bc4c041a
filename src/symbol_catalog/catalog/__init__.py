"""Symbol lists, tabs and the reloadable catalog manager."""

from .lists import MutableSymbolList, SplitType, SymbolList
from .manager import (
    CUSTOM_KAOMOJIS_ID,
    FAVORITES_ID,
    IDENTIFIER,
    NAMESPACE,
    FavoritesConfig,
    ReloadError,
    SymbolManager,
)
from .tabs import SymbolTab, TabType

__all__ = [
    "CUSTOM_KAOMOJIS_ID",
    "FAVORITES_ID",
    "FavoritesConfig",
    "IDENTIFIER",
    "MutableSymbolList",
    "NAMESPACE",
    "ReloadError",
    "SplitType",
    "SymbolList",
    "SymbolManager",
    "SymbolTab",
    "TabType",
]
