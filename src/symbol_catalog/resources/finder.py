"""Mapping between resource files and resource identifiers for one resource kind."""

from __future__ import annotations

from dataclasses import dataclass

from symbol_catalog.resources.identifier import Identifier
from symbol_catalog.resources.provider import Resource, ResourceProvider


@dataclass(slots=True, frozen=True)
class ResourceFinder:
    """Locates resources of one kind under ``<namespace>/<directory>/**<extension>``."""

    directory: str
    extension: str

    @classmethod
    def json(cls, directory: str) -> ResourceFinder:
        return cls(directory=directory, extension=".json")

    def to_resource_path(self, resource_id: Identifier) -> Identifier:
        """Map ``ns:name`` to the file identifier ``ns:<directory>/name<extension>``."""
        return resource_id.with_path(f"{self.directory}/{resource_id.path}{self.extension}")

    def to_resource_id(self, file_id: Identifier) -> Identifier:
        """Map a file identifier back to its resource identifier."""
        prefix = f"{self.directory}/"
        path = file_id.path
        if not path.startswith(prefix) or not path.endswith(self.extension):
            raise ValueError(f"'{file_id}' is not a '{self.directory}' resource.")
        return file_id.with_path(path[len(prefix) : len(path) - len(self.extension)])

    def find_resources(self, provider: ResourceProvider) -> dict[Identifier, Resource]:
        """Enumerate this finder's resources keyed by file identifier, in sorted order."""
        found = provider.find_resources(self.directory, self.extension)
        return {file_id: found[file_id] for file_id in sorted(found)}


SYMBOLS_FINDER = ResourceFinder(directory="symbols", extension=".txt")
SYMBOL_TABS_FINDER = ResourceFinder.json("symbol_tabs")
