"""Deterministic reload-listener registration primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from symbol_catalog.resources import Identifier, ResourceProvider


class ReloadListener(Protocol):
    """Component rebuilt by the host whenever the resource set changes."""

    def identity(self) -> Identifier: ...

    def reload(self, provider: ResourceProvider) -> None: ...


@dataclass(slots=True)
class ReloadListenerRegistry:
    """In-memory listener registry preserving deterministic insertion order."""

    _listeners: dict[Identifier, ReloadListener] = field(default_factory=dict)

    def register(self, listener: ReloadListener) -> None:
        """Register a listener under its identity."""
        identity = listener.identity()
        if identity in self._listeners:
            raise ValueError(f"Reload listener already registered: {identity}")
        self._listeners[identity] = listener

    def get(self, identity: Identifier) -> ReloadListener | None:
        """Return a listener by identity."""
        return self._listeners.get(identity)

    def names(self) -> tuple[Identifier, ...]:
        """Return registered identities in deterministic order."""
        return tuple(self._listeners.keys())

    def reload_all(self, provider: ResourceProvider) -> None:
        """Reload every listener in registration order; the first failure propagates."""
        for listener in self._listeners.values():
            listener.reload(provider)
