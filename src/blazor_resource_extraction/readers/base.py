"""Base abstractions for assembly metadata readers.

This module defines the read-only view of an assembly that the extractor
works with, and the interface every reader implementation must provide.
How the assembly binary is parsed is left entirely to the reader.
"""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Callable


@dataclass(frozen=True)
class EmbeddedResource:
    """A named binary blob stored inside an assembly.

    Attributes:
        logical_name: Resource name as stored in the assembly metadata
        opener: Callable returning a fresh readable binary stream of the content
    """

    logical_name: str
    opener: Callable[[], BinaryIO] = field(repr=False, compare=False)

    def open(self) -> BinaryIO:
        """Open the resource content for reading."""
        return self.opener()

    @classmethod
    def from_bytes(cls, logical_name: str, data: bytes) -> "EmbeddedResource":
        """Create a resource backed by in-memory content."""
        content = bytes(data)
        return cls(logical_name, lambda: io.BytesIO(content))


@dataclass(frozen=True)
class AssemblyView:
    """Read-only view of a loaded assembly.

    Attributes:
        name: The assembly's own simple name (e.g. "Lib.A")
        resources: Embedded resources in the reader's enumeration order
        references: Simple names of the assemblies this one references
        path: File the assembly was loaded from, if any
    """

    name: str
    resources: tuple[EmbeddedResource, ...] = ()
    references: tuple[str, ...] = ()
    path: Path | None = None

    def references_assembly(self, other: "AssemblyView") -> bool:
        """Return True if this assembly directly references ``other`` by name."""
        return other.name in self.references


class AssemblyReader(ABC):
    """Abstract base class for assembly metadata readers.

    Implementations turn an assembly file into an AssemblyView. The
    extractor only ever talks to this interface, so tests and alternative
    binary parsers can be swapped in freely.
    """

    @abstractmethod
    def load(self, path: str | Path) -> AssemblyView:
        """Load an assembly from disk.

        Args:
            path: Path to the assembly binary

        Returns:
            View of the assembly's name, embedded resources and references

        Raises:
            AssemblyLoadError: If the file cannot be read or is not a valid assembly
        """
        pass
