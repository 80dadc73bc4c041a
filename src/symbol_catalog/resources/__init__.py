"""Resource identifiers, finders and providers."""

from .finder import SYMBOL_TABS_FINDER, SYMBOLS_FINDER, ResourceFinder
from .identifier import DEFAULT_NAMESPACE, Identifier, InvalidIdentifierError
from .provider import (
    DirectoryResourceProvider,
    InMemoryResourceProvider,
    Resource,
    ResourceProvider,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "DirectoryResourceProvider",
    "Identifier",
    "InMemoryResourceProvider",
    "InvalidIdentifierError",
    "Resource",
    "ResourceFinder",
    "ResourceProvider",
    "SYMBOLS_FINDER",
    "SYMBOL_TABS_FINDER",
]
