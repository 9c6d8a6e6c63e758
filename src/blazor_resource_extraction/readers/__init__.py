"""Assembly readers for the extractor.

This package contains the base reader interface and assembly view types.
Concrete readers live in the platforms/ directory.
"""

from .base import AssemblyReader, AssemblyView, EmbeddedResource

__all__ = ["AssemblyReader", "AssemblyView", "EmbeddedResource"]
