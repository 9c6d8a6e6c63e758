"""Type definitions for extracted resource manifests.

This module defines the classification tag for embedded resources, the
manifest entry returned by the extractor, and the TypedDict that mirrors
the JSON schema in manifest.schema.json.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TypedDict

# Top-level output folder under which resources are namespaced by assembly
CONTENT_SUBDIR_NAME = "_content"


class ResourceKind(str, Enum):
    """Kind of an embedded resource, derived from its logical name prefix."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    STATIC_FILE = "static_file"


class ManifestEntry(TypedDict):
    """Serialized form of a single manifest entry."""

    kind: str  # One of the ResourceKind values
    web_path: str  # Forward-slash path relative to the output root


@dataclass(frozen=True)
class ExtractedResourceInfo:
    """A resource that was written to disk.

    Attributes:
        kind: Classification of the resource
        web_path: Path relative to the output root using forward slashes,
            e.g. "_content/Lib.A/theme.css"
    """

    kind: ResourceKind
    web_path: str

    def to_dict(self) -> ManifestEntry:
        return ManifestEntry(kind=self.kind.value, web_path=self.web_path)


def serialize_manifest(entries: Iterable[ExtractedResourceInfo]) -> list[ManifestEntry]:
    """Convert manifest entries to JSON-compatible dictionaries, keeping order."""
    return [entry.to_dict() for entry in entries]
