"""Extraction options.

Options are passed explicitly to the extractor; there is no global state.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .core.types import CONTENT_SUBDIR_NAME

SkipPredicate = Callable[[str | Path], bool]

# File name prefix of the base class library; these assemblies never carry
# embedded web resources.
BASE_LIBRARY_PREFIX = "System."


def skip_by_file_name_prefix(*prefixes: str) -> SkipPredicate:
    """Build a predicate skipping assemblies whose file name starts with a prefix.

    Only the file name is tested, never the directory part. Matching is
    case-sensitive.

    Example:
        >>> skip = skip_by_file_name_prefix("System.", "Microsoft.")
        >>> skip("/bin/System.Runtime.dll")
        True
        >>> skip("/System.Stuff/Lib.A.dll")
        False
    """

    def predicate(path: str | Path) -> bool:
        return Path(path).name.startswith(prefixes)

    return predicate


skip_base_library = skip_by_file_name_prefix(BASE_LIBRARY_PREFIX)


def skip_nothing(path: str | Path) -> bool:
    return False


@dataclass(frozen=True)
class ExtractionOptions:
    """Settings for an extraction run.

    Attributes:
        content_subdir_name: Folder under the output root that receives all
            resources. It is deleted at the start of every run.
        skip_predicate: Called with each referenced assembly path; paths for
            which it returns True are not loaded at all.
    """

    content_subdir_name: str = CONTENT_SUBDIR_NAME
    skip_predicate: SkipPredicate = field(default=skip_base_library)

    def __post_init__(self) -> None:
        name = self.content_subdir_name
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(
                f"content_subdir_name must be a single directory name, got: '{name}'"
            )
