"""Host-side reload listener registry."""

from .registry import ReloadListener, ReloadListenerRegistry

__all__ = ["ReloadListener", "ReloadListenerRegistry"]
