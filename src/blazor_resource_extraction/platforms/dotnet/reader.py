"""Assembly reader for .NET PE files.

This module provides an AssemblyReader implementation that parses CLR
metadata using the dnfile library.
"""

import logging
from pathlib import Path
from typing import Any

import dnfile
from pefile import PEFormatError

from ...core.errors import AssemblyLoadError
from ...readers.base import AssemblyReader, AssemblyView, EmbeddedResource

logger = logging.getLogger(__name__)

# Each embedded resource is stored as a 4-byte little-endian length followed
# by the content, at ManifestResource.Offset within the CLR resources section.
RESOURCE_LENGTH_PREFIX_SIZE = 4


def _text(value: Any) -> str | None:
    """Decode a metadata string, whichever representation dnfile uses."""
    value = getattr(value, "value", value)
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def _table_rows(mdtables: Any, table_name: str) -> list[Any]:
    table = getattr(mdtables, table_name, None)
    if table is None:
        return []
    return list(table.rows)


def _is_embedded(row: Any) -> bool:
    """A null Implementation means the resource lives in this file."""
    implementation = row.Implementation
    return implementation is None or getattr(implementation, "row_index", None) == 0


class DotNetAssemblyReader(AssemblyReader):
    """Reader for managed assemblies (.dll/.exe).

    Reads the assembly name from the Assembly table, references from the
    AssemblyRef table, and the raw content of every embedded resource listed
    in the ManifestResource table, including zero-length ones. Resources
    linked from other files carry no data and are not returned.

    Example:
        >>> reader = DotNetAssemblyReader()
        >>> view = reader.load('bin/Lib.A.dll')
        >>> [r.logical_name for r in view.resources]
        ['blazor:css:theme.css']
    """

    def load(self, path: str | Path) -> AssemblyView:
        path = Path(path)
        try:
            pe = dnfile.dnPE(str(path))
        except (OSError, PEFormatError) as e:
            raise AssemblyLoadError(path, str(e)) from e

        try:
            return self._read_view(pe, path)
        finally:
            pe.close()

    def _read_view(self, pe: "dnfile.dnPE", path: Path) -> AssemblyView:
        net = pe.net
        if net is None or net.mdtables is None:
            raise AssemblyLoadError(path, "no CLR metadata found")

        assembly_rows = _table_rows(net.mdtables, "Assembly")
        if not assembly_rows:
            raise AssemblyLoadError(path, "missing Assembly table")

        name = self._required_text(assembly_rows[0].Name, path, "assembly name")
        references = tuple(
            self._required_text(row.Name, path, "assembly reference name")
            for row in _table_rows(net.mdtables, "AssemblyRef")
        )

        resources = []
        for row in _table_rows(net.mdtables, "ManifestResource"):
            logical_name = self._required_text(row.Name, path, "resource name")
            if not _is_embedded(row):
                logger.debug("Skipping linked resource '%s' in %s", logical_name, name)
                continue
            data = self._read_resource_data(pe, net.struct.ResourcesRva + row.Offset, path)
            resources.append(EmbeddedResource.from_bytes(logical_name, data))

        logger.debug(
            "Loaded assembly %s from %s (%d resources, %d references)",
            name,
            path,
            len(resources),
            len(references),
        )
        return AssemblyView(
            name=name,
            resources=tuple(resources),
            references=references,
            path=path,
        )

    @staticmethod
    def _required_text(value: Any, path: Path, what: str) -> str:
        try:
            text = _text(value)
        except UnicodeDecodeError as e:
            raise AssemblyLoadError(path, f"undecodable {what}") from e
        if text is None:
            raise AssemblyLoadError(path, f"undecodable {what}")
        return text

    @staticmethod
    def _read_resource_data(pe: "dnfile.dnPE", rva: int, path: Path) -> bytes:
        """Read a length-prefixed resource blob at ``rva``."""
        size = pe.get_dword_at_rva(rva)
        if size is None:
            raise AssemblyLoadError(path, f"cannot read resource length at RVA {rva:#x}")
        if size == 0:
            return b""

        data = pe.get_data(rva + RESOURCE_LENGTH_PREFIX_SIZE, size)
        if len(data) < size:
            raise AssemblyLoadError(
                path, f"truncated resource at RVA {rva:#x}: expected {size} bytes, got {len(data)}"
            )
        return bytes(data)
