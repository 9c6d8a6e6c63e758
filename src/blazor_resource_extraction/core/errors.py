"""Exceptions raised during embedded resource extraction."""

from pathlib import Path


class ExtractionError(Exception):
    """Base class for all extraction failures."""


class AssemblyLoadError(ExtractionError):
    """An assembly file could not be read or is not a valid assembly."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load assembly '{self.path}': {reason}")


class PathEscapeError(ExtractionError, ValueError):
    """A resource would be written outside the output root."""

    def __init__(self, assembly_name: str, path: str | Path, output_root: str | Path):
        self.assembly_name = assembly_name
        self.path = Path(path)
        self.output_root = Path(output_root)
        super().__init__(
            f"Cannot write embedded resource from assembly '{assembly_name}' to "
            f"'{self.path}' because it is outside the expected directory {self.output_root}"
        )


class InvalidResourceNameError(ExtractionError, ValueError):
    """A recognized logical name does not carry a usable relative path."""

    def __init__(self, assembly_name: str, logical_name: str):
        self.assembly_name = assembly_name
        self.logical_name = logical_name
        super().__init__(
            f"Embedded resource '{logical_name}' in assembly '{assembly_name}' "
            "does not name a file inside the assembly folder"
        )
