"""Resource provider contract and the layered/in-memory providers."""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, TextIO

from symbol_catalog.resources.identifier import Identifier

ASSETS_DIR = "assets"


@dataclass(slots=True, frozen=True)
class Resource:
    """Openable handle to one resource as supplied by a named pack."""

    pack: str
    opener: Callable[[], TextIO]

    def open(self) -> TextIO:
        """Open the resource as UTF-8 text."""
        return self.opener()


class ResourceProvider(Protocol):
    """Read/enumerate surface consumed by reload listeners."""

    def find_resources(self, directory: str, extension: str) -> dict[Identifier, Resource]:
        """Return file identifiers under ``<namespace>/<directory>/`` ending in extension."""
        ...

    def open(self, identifier: Identifier) -> TextIO:
        """Open a file identifier for reading, raising FileNotFoundError if absent."""
        ...


class DirectoryResourceProvider:
    """Merges pack directories laid out as ``<pack>/assets/<namespace>/<path>``.

    Packs are given lowest priority first; a file present in several packs
    resolves to the one from the last pack that has it.
    """

    def __init__(self, pack_roots: Sequence[Path]) -> None:
        self._pack_roots = tuple(root.resolve() for root in pack_roots)

    @property
    def pack_roots(self) -> tuple[Path, ...]:
        return self._pack_roots

    def find_resources(self, directory: str, extension: str) -> dict[Identifier, Resource]:
        found: dict[Identifier, Resource] = {}
        for pack_root in self._pack_roots:
            assets = pack_root / ASSETS_DIR
            if not assets.is_dir():
                continue
            for namespace_dir in sorted(assets.iterdir(), key=lambda item: item.name):
                kind_root = namespace_dir / directory
                if not kind_root.is_dir():
                    continue
                for full_path in _walk_files(kind_root):
                    relative = full_path.relative_to(namespace_dir).as_posix()
                    if not relative.endswith(extension):
                        continue
                    file_id = Identifier(namespace_dir.name, relative)
                    found[file_id] = Resource(pack=pack_root.name, opener=_file_opener(full_path))
        return {file_id: found[file_id] for file_id in sorted(found)}

    def open(self, identifier: Identifier) -> TextIO:
        for pack_root in reversed(self._pack_roots):
            assets = pack_root / ASSETS_DIR
            candidate = (assets / identifier.namespace / identifier.path).resolve(strict=False)
            if not candidate.is_relative_to(assets):
                raise PermissionError(f"Resource escapes pack assets: {identifier}")
            if candidate.is_file():
                return candidate.open("r", encoding="utf-8")
        raise FileNotFoundError(f"Resource not found in any pack: {identifier}")


class InMemoryResourceProvider:
    """Serves resources from a mapping of file identifier to text."""

    def __init__(self, files: Mapping[Identifier, str], pack: str = "memory") -> None:
        self._files = dict(files)
        self._pack = pack

    def find_resources(self, directory: str, extension: str) -> dict[Identifier, Resource]:
        prefix = f"{directory}/"
        found: dict[Identifier, Resource] = {}
        for file_id in sorted(self._files):
            if file_id.path.startswith(prefix) and file_id.path.endswith(extension):
                found[file_id] = Resource(pack=self._pack, opener=self._opener(file_id))
        return found

    def open(self, identifier: Identifier) -> TextIO:
        if identifier not in self._files:
            raise FileNotFoundError(f"Resource not found: {identifier}")
        return io.StringIO(self._files[identifier])

    def _opener(self, identifier: Identifier) -> Callable[[], TextIO]:
        return lambda: io.StringIO(self._files[identifier])


def _file_opener(path: Path) -> Callable[[], TextIO]:
    return lambda: path.open("r", encoding="utf-8")


def _walk_files(root: Path) -> list[Path]:
    """Walk a directory deterministically, skipping symlinked entries."""
    files: list[Path] = []
    stack: list[Path] = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as entries:
                ordered_entries = sorted(entries, key=lambda item: item.name)
        except OSError:
            continue
        for entry in reversed(ordered_entries):
            full_path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                stack.append(full_path)
                continue
            if entry.is_file(follow_symlinks=False):
                files.append(full_path)
    return sorted(files)
