"""Structured logging utilities."""

from .audit import JsonlAuditLogger, ReloadEvent, utc_timestamp

__all__ = ["JsonlAuditLogger", "ReloadEvent", "utc_timestamp"]
