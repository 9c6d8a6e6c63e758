"""Blazor Resource Extraction.

This package finds framework-specific embedded resources (scripts,
stylesheets and static files) inside compiled assemblies, writes them to
an output directory and returns a manifest of the written files ordered
with dependencies first.
"""

# Core library interface
from .extractor import EmbeddedResourceExtractor, extract_embedded_resources
from .registry import ReaderRegistry
from .readers.base import AssemblyReader, AssemblyView, EmbeddedResource

# Configuration
from .config import (
    ExtractionOptions,
    skip_base_library,
    skip_by_file_name_prefix,
    skip_nothing,
)

# Core utilities
from .core import (
    AssemblyLoadError,
    ExtractedResourceInfo,
    ExtractionError,
    InvalidResourceNameError,
    ManifestEntry,
    PathEscapeError,
    ResourceKind,
    classify_logical_name,
    manifest_to_json,
    order_assemblies,
    serialize_manifest,
    validate_manifest,
    validate_manifest_with_error_details,
)

__version__ = "0.1.0"

# Auto-discover and register all reader platforms
ReaderRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "EmbeddedResourceExtractor",
    "extract_embedded_resources",
    "ReaderRegistry",
    "AssemblyReader",
    "AssemblyView",
    "EmbeddedResource",
    # Configuration
    "ExtractionOptions",
    "skip_base_library",
    "skip_by_file_name_prefix",
    "skip_nothing",
    # Core utilities
    "ExtractedResourceInfo",
    "ManifestEntry",
    "ResourceKind",
    "classify_logical_name",
    "order_assemblies",
    "serialize_manifest",
    "manifest_to_json",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Errors
    "ExtractionError",
    "AssemblyLoadError",
    "PathEscapeError",
    "InvalidResourceNameError",
]
