"""Reader platforms for the extractor.

This package contains self-contained platform modules that provide
AssemblyReader implementations for different assembly formats.

Each platform module auto-registers itself with the ReaderRegistry
when imported.
"""

# Platform modules are imported dynamically by ReaderRegistry.discover_platforms()
# to handle missing dependencies gracefully
