"""Namespaced resource identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

DEFAULT_NAMESPACE: Final[str] = "minecraft"
NAMESPACE_SEPARATOR: Final[str] = ":"

_NAMESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9_.-]+$")
_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9_./-]+$")
_RELATIVE_SEGMENTS: Final[frozenset[str]] = frozenset({"", ".", ".."})


class InvalidIdentifierError(ValueError):
    """Raised when a namespace or path has disallowed characters or relative segments."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid identifier '{text}': {reason}")
        self.text = text
        self.reason = reason


@dataclass(slots=True, frozen=True, order=True)
class Identifier:
    """Immutable (namespace, path) key ordered lexically by both fields."""

    namespace: str
    path: str

    def __post_init__(self) -> None:
        if not _NAMESPACE_PATTERN.match(self.namespace):
            raise InvalidIdentifierError(str(self), "namespace must match [a-z0-9_.-]")
        if not _PATH_PATTERN.match(self.path):
            raise InvalidIdentifierError(str(self), "path must match [a-z0-9_./-]")
        if self.namespace in _RELATIVE_SEGMENTS:
            raise InvalidIdentifierError(str(self), "namespace must not be '.' or '..'")
        if any(segment in _RELATIVE_SEGMENTS for segment in self.path.split("/")):
            raise InvalidIdentifierError(
                str(self), "path must not contain empty, '.' or '..' segments"
            )

    @classmethod
    def parse(cls, text: str, default_namespace: str = DEFAULT_NAMESPACE) -> Identifier:
        """Parse 'namespace:path'; a bare path gets the default namespace."""
        namespace, separator, path = text.partition(NAMESPACE_SEPARATOR)
        if not separator:
            return cls(default_namespace, text)
        return cls(namespace or default_namespace, path)

    def with_path(self, path: str) -> Identifier:
        return Identifier(self.namespace, path)

    def __str__(self) -> str:
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.path}"
