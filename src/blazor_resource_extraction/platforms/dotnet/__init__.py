""".NET assembly platform for the extractor.

This platform reads managed assemblies with the dnfile library. It
registers itself with ReaderRegistry under the name 'dotnet' if dnfile
is installed.

Usage:
    >>> from blazor_resource_extraction import ReaderRegistry
    >>> if 'dotnet' in ReaderRegistry.list_readers():
    ...     extractor = ReaderRegistry.create_extractor('dotnet')
"""

# Gated import: Only load if dnfile is installed
try:
    from .reader import DotNetAssemblyReader

    # Import registry for auto-registration
    from ...registry import ReaderRegistry

    def _create_dotnet_reader(**kwargs) -> DotNetAssemblyReader:
        """Factory function for creating DotNetAssemblyReader instances.

        Args:
            **kwargs: Additional arguments (currently unused)
        """
        return DotNetAssemblyReader()

    ReaderRegistry.register_factory('dotnet', _create_dotnet_reader)

    DOTNET_AVAILABLE = True

    __all__ = [
        'DotNetAssemblyReader',
        'DOTNET_AVAILABLE',
    ]

except ImportError:
    # dnfile not installed
    DOTNET_AVAILABLE = False
    DotNetAssemblyReader = None  # type: ignore[assignment,misc]

    __all__ = ['DOTNET_AVAILABLE']
