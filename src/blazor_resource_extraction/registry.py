"""Reader registry for factory-based extractor creation.

This module provides a central registry for assembly reader factories,
enabling reader-agnostic extractor creation and automatic platform
discovery.
"""

import importlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .config import ExtractionOptions
    from .extractor import EmbeddedResourceExtractor
    from .readers.base import AssemblyReader

logger = logging.getLogger(__name__)


class ReaderRegistry:
    """Central registry for assembly reader factories.

    Platforms register themselves when imported, and the registry
    can automatically discover all available platforms.
    """

    _factories: dict[str, Callable[..., "AssemblyReader"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "AssemblyReader"]) -> None:
        """Register a factory function for creating readers.

        Args:
            name: Name of the reader (e.g., 'dotnet')
            factory: Callable that creates an AssemblyReader instance

        Example:
            >>> ReaderRegistry.register_factory('dotnet', DotNetAssemblyReader)
        """
        cls._factories[name] = factory

    @classmethod
    def create_reader(cls, reader_name: str, **kwargs) -> "AssemblyReader":
        """Create a reader from a registered factory.

        Args:
            reader_name: Name of the registered reader
            **kwargs: Arguments passed to the reader factory

        Raises:
            ValueError: If reader_name is not registered
        """
        if reader_name not in cls._factories:
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown reader: '{reader_name}'. Available readers: {available}"
            )
        return cls._factories[reader_name](**kwargs)

    @classmethod
    def create_extractor(
        cls,
        reader_name: str,
        options: "ExtractionOptions | None" = None,
        **kwargs,
    ) -> "EmbeddedResourceExtractor":
        """Create an extractor backed by a registered reader.

        Args:
            reader_name: Name of the registered reader
            options: Extraction settings passed to the extractor
            **kwargs: Arguments passed to the reader factory

        Returns:
            EmbeddedResourceExtractor configured with the requested reader

        Raises:
            ValueError: If reader_name is not registered

        Example:
            >>> extractor = ReaderRegistry.create_extractor(
            ...     'dotnet',
            ...     options=ExtractionOptions(skip_predicate=skip_nothing),
            ... )
        """
        # Import here to avoid circular dependency
        from .extractor import EmbeddedResourceExtractor

        reader = cls.create_reader(reader_name, **kwargs)
        return EmbeddedResourceExtractor(reader, options)

    @classmethod
    def list_readers(cls) -> list[str]:
        """List all registered reader names."""
        return list(cls._factories.keys())

    @classmethod
    def discover_platforms(cls) -> None:
        """Auto-discover and import all reader platforms.

        This method iterates through the platforms/ directory and
        attempts to import each platform module. Platforms with
        missing dependencies are skipped.

        Platforms register themselves when imported via their
        __init__.py files.
        """
        platforms_dir = Path(__file__).parent / 'platforms'

        if not platforms_dir.exists():
            return

        for platform_path in platforms_dir.iterdir():
            if not platform_path.is_dir():
                continue

            if not (platform_path / '__init__.py').exists():
                continue

            platform_name = platform_path.name

            try:
                importlib.import_module(
                    f'.platforms.{platform_name}',
                    package='blazor_resource_extraction'
                )
            except ImportError as e:
                logger.debug("Reader platform '%s' unavailable: %s", platform_name, e)
