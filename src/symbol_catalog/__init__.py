"""Layered symbol catalog with hot reload and user-curated lists."""

__version__ = "0.1.0"
