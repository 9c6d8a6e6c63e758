"""JSON Schema validation for extracted resource manifests.

This module loads the bundled JSON Schema and validates serialized
manifests before they are handed to downstream consumers.
"""

import json
from pathlib import Path
from typing import Any, Iterable

import jsonschema
from jsonschema import ValidationError

from .types import ExtractedResourceInfo, ManifestEntry, serialize_manifest

# Schema file shipped next to this module
SCHEMA_PATH = Path(__file__).parent / "manifest.schema.json"


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def _as_entries(
    manifest: Iterable[ExtractedResourceInfo | ManifestEntry],
) -> list[Any]:
    return [
        entry.to_dict() if isinstance(entry, ExtractedResourceInfo) else entry
        for entry in manifest
    ]


def validate_manifest(manifest: Iterable[ExtractedResourceInfo | ManifestEntry]) -> None:
    """Validate a manifest against the JSON Schema.

    Args:
        manifest: Manifest entries, either as returned by the extractor or
            already serialized with serialize_manifest()

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema()
    jsonschema.validate(instance=_as_entries(manifest), schema=schema)


def validate_manifest_with_error_details(
    manifest: Iterable[ExtractedResourceInfo | ManifestEntry],
) -> tuple[bool, str | None]:
    """Validate a manifest and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns user-friendly error messages.

    Args:
        manifest: Manifest entries to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        error_msg = f"Validation error at {error_path}: {e.message}"

        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"

        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"


def manifest_to_json(manifest: Iterable[ExtractedResourceInfo], indent: int | None = 2) -> str:
    """Serialize a manifest to a JSON document after validating it.

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
    """
    entries = serialize_manifest(manifest)
    validate_manifest(entries)
    return json.dumps(entries, indent=indent)
