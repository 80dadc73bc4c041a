from __future__ import annotations

import pytest

from symbol_catalog.catalog import IDENTIFIER, SymbolManager
from symbol_catalog.reload import ReloadListenerRegistry
from symbol_catalog.resources import Identifier, InMemoryResourceProvider, ResourceProvider


class RecordingListener:
    def __init__(self, name: str, calls: list[str]) -> None:
        self._identity = Identifier("test", name)
        self._calls = calls

    def identity(self) -> Identifier:
        return self._identity

    def reload(self, provider: ResourceProvider) -> None:
        self._calls.append(self._identity.path)


def test_registry_keeps_deterministic_registration_order() -> None:
    calls: list[str] = []
    registry = ReloadListenerRegistry()
    registry.register(RecordingListener("beta", calls))
    registry.register(RecordingListener("alpha", calls))

    registry.reload_all(InMemoryResourceProvider({}))

    assert registry.names() == (Identifier("test", "beta"), Identifier("test", "alpha"))
    assert calls == ["beta", "alpha"]


def test_manager_registers_under_well_known_identity() -> None:
    registry = ReloadListenerRegistry()
    manager = SymbolManager()
    registry.register(manager)

    assert registry.get(IDENTIFIER) is manager
    assert str(IDENTIFIER) == "symbol_catalog:symbols"


def test_duplicate_identity_is_rejected() -> None:
    registry = ReloadListenerRegistry()
    registry.register(RecordingListener("same", []))

    with pytest.raises(ValueError, match="test:same"):
        registry.register(RecordingListener("same", []))
