"""Core extraction logic.

This package contains the type definitions, error types, logical name
classification, dependency ordering, output path handling and manifest
validation used by the extractor and every reader platform.
"""

from .classifier import classify_logical_name
from .errors import (
    AssemblyLoadError,
    ExtractionError,
    InvalidResourceNameError,
    PathEscapeError,
)
from .ordering import compare_by_reference, order_assemblies
from .paths import resolve_and_write, resolve_output_path, validate_path_safety
from .types import (
    CONTENT_SUBDIR_NAME,
    ExtractedResourceInfo,
    ManifestEntry,
    ResourceKind,
    serialize_manifest,
)
from .validator import (
    manifest_to_json,
    validate_manifest,
    validate_manifest_with_error_details,
)

__all__ = [
    "CONTENT_SUBDIR_NAME",
    "AssemblyLoadError",
    "ExtractedResourceInfo",
    "ExtractionError",
    "InvalidResourceNameError",
    "ManifestEntry",
    "PathEscapeError",
    "ResourceKind",
    "classify_logical_name",
    "compare_by_reference",
    "manifest_to_json",
    "order_assemblies",
    "resolve_and_write",
    "resolve_output_path",
    "serialize_manifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
    "validate_path_safety",
]
