"""Output path resolution and resource writing.

Every resource is written to <output_root>/<content_subdir>/<assembly>/<path>.
Relative paths come from logical names that may have been embedded on a
different OS, so both separator styles are accepted. Paths resolving
outside the output root are rejected before anything is written.
"""

import os
import posixpath
import shutil
from pathlib import Path
from typing import BinaryIO

from .errors import InvalidResourceNameError, PathEscapeError
from .types import CONTENT_SUBDIR_NAME


def ensure_path_separators(name: str, separator: str) -> str:
    """Replace both forward and back slashes in ``name`` with ``separator``.

    Example:
        >>> ensure_path_separators("sub\\\\dir/file.js", "/")
        'sub/dir/file.js'
    """
    return name.replace("\\", separator).replace("/", separator)


def validate_path_safety(path: Path, base_dir: Path, assembly_name: str = "") -> None:
    """Validate that a path stays within the base directory.

    This prevents path traversal through ".." segments or absolute paths
    in resource names.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within
        assembly_name: Owning assembly, reported in the error message

    Raises:
        PathEscapeError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise PathEscapeError(assembly_name, resolved_path, resolved_base)


def resolve_output_path(
    assembly_name: str,
    relative_path: str,
    output_root: str | Path,
    content_subdir: str = CONTENT_SUBDIR_NAME,
) -> tuple[Path, str]:
    """Compute where a resource is written and the web path that names it.

    Args:
        assembly_name: Name of the assembly owning the resource
        relative_path: Path taken from the logical name, with either separator
        output_root: Root directory of the extraction output
        content_subdir: Folder under the output root holding all resources

    Returns:
        Tuple of (absolute target path, web path relative to output_root)

    Raises:
        InvalidResourceNameError: If relative_path is empty or names the
            assembly folder or one of its parents
        PathEscapeError: If the target resolves outside output_root
    """
    if not relative_path.strip("\\/"):
        raise InvalidResourceNameError(assembly_name, relative_path)

    # Prefix with the assembly name so resources of different assemblies never clash
    name = os.path.join(
        content_subdir, assembly_name, ensure_path_separators(relative_path, os.sep)
    )
    web_path = posixpath.normpath(ensure_path_separators(name, "/"))

    # The target must be a file, never the assembly folder or a folder above it
    assembly_dir = posixpath.join(content_subdir, assembly_name)
    if web_path == "." or (assembly_dir + "/").startswith(web_path + "/"):
        raise InvalidResourceNameError(assembly_name, relative_path)

    root = Path(output_root)
    target = (root / name).resolve()
    validate_path_safety(target, root, assembly_name)

    return target, web_path


def write_resource_file(stream: BinaryIO, target: Path) -> None:
    """Copy a resource stream to ``target``, creating parent directories.

    An existing file at ``target`` is overwritten.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("wb") as output:
        shutil.copyfileobj(stream, output)


def resolve_and_write(
    assembly_name: str,
    relative_path: str,
    stream: BinaryIO,
    output_root: str | Path,
    content_subdir: str = CONTENT_SUBDIR_NAME,
) -> str:
    """Write a classified resource under the output root.

    Returns:
        The web path of the written file (forward slashes, relative to output_root)

    Raises:
        InvalidResourceNameError: If relative_path does not name a file
            below the assembly folder
        PathEscapeError: If the target resolves outside output_root
        OSError: If directories or the file cannot be created
    """
    target, web_path = resolve_output_path(
        assembly_name, relative_path, output_root, content_subdir
    )
    write_resource_file(stream, target)
    return web_path
