"""Embedded resource extraction.

This module provides the main interface for extracting framework-specific
embedded resources from a set of assemblies. The extractor is
reader-agnostic and delegates parsing of assembly binaries to an
AssemblyReader implementation.
"""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from .config import ExtractionOptions
from .core.classifier import classify_logical_name
from .core.ordering import order_assemblies
from .core.paths import resolve_and_write
from .core.types import ExtractedResourceInfo
from .readers.base import AssemblyReader, AssemblyView

logger = logging.getLogger(__name__)


class EmbeddedResourceExtractor:
    """Finds embedded resources in assemblies and writes them to disk.

    Resources are read from the referenced assemblies only, written under
    ``<output_root>/_content/<assembly name>/`` and described in a manifest
    ordered so that resources of a referenced assembly come before those of
    the assemblies referencing it.

    Example:
        >>> from blazor_resource_extraction import ReaderRegistry
        >>> extractor = ReaderRegistry.create_extractor('dotnet')
        >>> manifest = extractor.extract(
        ...     'bin/App.dll', ['bin/Lib.A.dll', 'bin/Lib.B.dll'], 'dist'
        ... )
        >>> [entry.web_path for entry in manifest]
        ['_content/Lib.A/theme.css', '_content/Lib.B/app.js']
    """

    def __init__(self, reader: AssemblyReader, options: ExtractionOptions | None = None):
        """Initialize the extractor.

        Args:
            reader: Reader used to load assembly metadata
            options: Extraction settings (defaults to ExtractionOptions())
        """
        self.reader = reader
        self.options = options or ExtractionOptions()

    def extract(
        self,
        entrypoint_path: str | Path,
        referenced_paths: Iterable[str | Path],
        output_root: str | Path,
    ) -> tuple[ExtractedResourceInfo, ...]:
        """Extract embedded resources and return them in dependency order.

        Any content written by an earlier run is removed first. The entrypoint
        assembly is loaded but its own resources are not extracted.

        Args:
            entrypoint_path: Path to the application startup assembly
            referenced_paths: Paths to assemblies that may contain embedded resources
            output_root: Directory where output is being written

        Returns:
            Descriptions of the resources written to disk

        Raises:
            AssemblyLoadError: If an assembly cannot be loaded
            PathEscapeError: If a resource would be written outside output_root
            InvalidResourceNameError: If a recognized resource does not name a file
            OSError: If the output directory cannot be cleaned or written
        """
        output_root = Path(output_root)
        self.reset_output(output_root)

        self.reader.load(entrypoint_path)
        assemblies = order_assemblies(self.load_referenced_assemblies(referenced_paths))

        manifest: list[ExtractedResourceInfo] = []
        for assembly in assemblies:
            manifest.extend(self.extract_from_assembly(assembly, output_root))

        logger.info(
            "Extracted %d embedded resources from %d assemblies into %s",
            len(manifest),
            len(assemblies),
            output_root,
        )
        return tuple(manifest)

    def reset_output(self, output_root: Path) -> None:
        """Delete the content subdirectory left by a previous run."""
        content_dir = output_root / self.options.content_subdir_name
        if content_dir.exists():
            logger.info("Removing previous output: %s", content_dir)
            shutil.rmtree(content_dir)

    def load_referenced_assemblies(
        self, referenced_paths: Iterable[str | Path]
    ) -> list[AssemblyView]:
        """Load every referenced assembly not excluded by the skip predicate."""
        assemblies = []
        for path in referenced_paths:
            if self.options.skip_predicate(path):
                logger.debug("Skipping assembly: %s", path)
                continue
            assemblies.append(self.reader.load(path))
        return assemblies

    def extract_from_assembly(
        self, assembly: AssemblyView, output_root: Path
    ) -> list[ExtractedResourceInfo]:
        """Write the recognized resources of a single assembly.

        Args:
            assembly: Loaded assembly to scan
            output_root: Directory where output is being written

        Returns:
            Manifest entries in the assembly's resource enumeration order
        """
        extracted = []
        for resource in assembly.resources:
            classified = classify_logical_name(resource.logical_name)
            if classified is None:
                logger.debug(
                    "Ignoring resource '%s' in %s", resource.logical_name, assembly.name
                )
                continue

            kind, relative_path = classified
            with resource.open() as stream:
                web_path = resolve_and_write(
                    assembly.name,
                    relative_path,
                    stream,
                    output_root,
                    self.options.content_subdir_name,
                )
            logger.debug("Wrote %s resource %s", kind.value, web_path)
            extracted.append(ExtractedResourceInfo(kind, web_path))
        return extracted


def extract_embedded_resources(
    entrypoint_path: str | Path,
    referenced_paths: Iterable[str | Path],
    output_root: str | Path,
    reader: str = "dotnet",
    options: ExtractionOptions | None = None,
) -> tuple[ExtractedResourceInfo, ...]:
    """Extract embedded resources using a registered reader.

    Args:
        entrypoint_path: Path to the application startup assembly
        referenced_paths: Paths to assemblies that may contain embedded resources
        output_root: Directory where output is being written
        reader: Name of a registered reader platform
        options: Extraction settings

    Returns:
        Descriptions of the resources written to disk, dependencies first

    Raises:
        ValueError: If no reader is registered under ``reader``
    """
    # Import here to avoid circular dependency
    from .registry import ReaderRegistry

    extractor = ReaderRegistry.create_extractor(reader, options=options)
    return extractor.extract(entrypoint_path, referenced_paths, output_root)
