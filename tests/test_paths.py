"""Tests for output path resolution and writing."""

import io
import os
from pathlib import Path

import pytest

from blazor_resource_extraction import InvalidResourceNameError, PathEscapeError
from blazor_resource_extraction.core.paths import (
    ensure_path_separators,
    resolve_and_write,
    resolve_output_path,
    validate_path_safety,
)


class TestEnsurePathSeparators:
    """Test separator normalization."""

    def test_mixed_separators(self) -> None:
        """Test that both slash styles are replaced."""
        assert ensure_path_separators("a\\b/c", "/") == "a/b/c"
        assert ensure_path_separators("a\\b/c", "\\") == "a\\b\\c"

    def test_no_separators_unchanged(self) -> None:
        """Test that plain names pass through unchanged."""
        assert ensure_path_separators("file.js", "/") == "file.js"


class TestValidatePathSafety:
    """Test path traversal prevention."""

    def test_allows_paths_within_base(self, tmp_path: Path) -> None:
        """Test that paths within base directory are allowed."""
        validate_path_safety(tmp_path / "subdir" / "file.txt", tmp_path)

    def test_rejects_path_traversal(self, tmp_path: Path) -> None:
        """Test that path traversal attempts are rejected."""
        dangerous_path = tmp_path / ".." / ".." / "etc" / "passwd"

        with pytest.raises(PathEscapeError, match="outside the expected directory"):
            validate_path_safety(dangerous_path, tmp_path, "Lib.Evil")

    def test_error_names_the_assembly(self, tmp_path: Path) -> None:
        """Test that the error identifies the offending assembly and path."""
        with pytest.raises(PathEscapeError) as excinfo:
            validate_path_safety(tmp_path.parent / "x.js", tmp_path, "Lib.Evil")

        assert excinfo.value.assembly_name == "Lib.Evil"
        assert "Lib.Evil" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)


class TestResolveOutputPath:
    """Test computation of target and web paths."""

    def test_namespaces_by_assembly(self, tmp_path: Path) -> None:
        """Test that resources land under _content/<assembly>/."""
        target, web_path = resolve_output_path("Lib.A", "theme.css", tmp_path)

        assert target == (tmp_path / "_content" / "Lib.A" / "theme.css").resolve()
        assert web_path == "_content/Lib.A/theme.css"

    def test_separator_styles_give_same_result(self, tmp_path: Path) -> None:
        """Test that backslash and forward slash paths are equivalent."""
        windows = resolve_output_path("Lib", "sub\\dir\\file.js", tmp_path)
        posix = resolve_output_path("Lib", "sub/dir/file.js", tmp_path)

        assert windows == posix
        assert posix[1] == "_content/Lib/sub/dir/file.js"

    def test_custom_content_subdir(self, tmp_path: Path) -> None:
        """Test that the content folder name can be changed."""
        _, web_path = resolve_output_path("Lib", "a.js", tmp_path, content_subdir="static")

        assert web_path == "static/Lib/a.js"

    def test_inner_traversal_is_collapsed(self, tmp_path: Path) -> None:
        """Test that the web path never contains '..' segments."""
        target, web_path = resolve_output_path("Lib", "a/../b.js", tmp_path)

        assert web_path == "_content/Lib/b.js"
        assert target == (tmp_path / "_content" / "Lib" / "b.js").resolve()

    def test_rejects_escape_via_parent_segments(self, tmp_path: Path) -> None:
        """Test that '..' segments leaving the output root are rejected."""
        with pytest.raises(PathEscapeError):
            resolve_output_path("Lib", "../../../outside.js", tmp_path)

    def test_rejects_escape_via_backslash_segments(self, tmp_path: Path) -> None:
        """Test that Windows-style traversal is rejected too."""
        with pytest.raises(PathEscapeError):
            resolve_output_path("Lib", "..\\..\\..\\outside.js", tmp_path)

    def test_rejects_absolute_path(self, tmp_path: Path) -> None:
        """Test that an absolute relative path cannot escape the root."""
        absolute = os.sep + "tmp" + os.sep + "elsewhere.js"
        with pytest.raises(PathEscapeError):
            resolve_output_path("Lib", absolute, tmp_path / "out")

    def test_rejects_empty_path(self, tmp_path: Path) -> None:
        """Test that a prefix-only logical name is rejected."""
        with pytest.raises(InvalidResourceNameError):
            resolve_output_path("Lib", "", tmp_path)
        with pytest.raises(InvalidResourceNameError):
            resolve_output_path("Lib", "/", tmp_path)

    @pytest.mark.parametrize("relative_path", [".", "..", "a/..", "../..", "a\\..", "./"])
    def test_rejects_paths_naming_a_folder(self, tmp_path: Path, relative_path: str) -> None:
        """Test that the assembly folder and its parents cannot be targets."""
        with pytest.raises(InvalidResourceNameError):
            resolve_output_path("Lib", relative_path, tmp_path)

    def test_allows_sibling_file_inside_root(self, tmp_path: Path) -> None:
        """Test that a path leaving the assembly folder but not the root is kept."""
        _, web_path = resolve_output_path("Lib", "../Shared/common.js", tmp_path)

        assert web_path == "_content/Shared/common.js"


class TestResolveAndWrite:
    """Test writing resource content to disk."""

    def test_writes_content_and_creates_directories(self, tmp_path: Path) -> None:
        """Test that parents are created and bytes are copied exactly."""
        content = bytes(range(256))

        web_path = resolve_and_write("Lib", "deep/nested/data.bin", io.BytesIO(content), tmp_path)

        assert web_path == "_content/Lib/deep/nested/data.bin"
        assert (tmp_path / "_content" / "Lib" / "deep" / "nested" / "data.bin").read_bytes() == content

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        """Test that a longer existing file is fully replaced."""
        resolve_and_write("Lib", "a.js", io.BytesIO(b"old content, longer"), tmp_path)
        resolve_and_write("Lib", "a.js", io.BytesIO(b"new"), tmp_path)

        assert (tmp_path / "_content" / "Lib" / "a.js").read_bytes() == b"new"

    def test_nothing_written_on_escape(self, tmp_path: Path) -> None:
        """Test that a rejected path leaves no file behind."""
        root = tmp_path / "out"

        with pytest.raises(PathEscapeError):
            resolve_and_write("Lib", "../../../escaped.js", io.BytesIO(b"x"), root)

        assert not (tmp_path / "escaped.js").exists()
        assert not root.exists()

    def test_nothing_written_for_folder_target(self, tmp_path: Path) -> None:
        """Test that a name resolving to the assembly folder writes no file."""
        with pytest.raises(InvalidResourceNameError):
            resolve_and_write("Lib", "a/..", io.BytesIO(b"x"), tmp_path)

        assert not (tmp_path / "_content" / "Lib").exists()
