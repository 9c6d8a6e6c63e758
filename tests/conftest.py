"""Shared fixtures for extraction tests."""

from pathlib import Path

import pytest

from blazor_resource_extraction import (
    AssemblyLoadError,
    AssemblyReader,
    AssemblyView,
    EmbeddedResource,
)


class FakeAssemblyReader(AssemblyReader):
    """In-memory reader keyed by file name."""

    def __init__(self, assemblies: dict[str, AssemblyView]):
        self.assemblies = assemblies
        self.loaded: list[str] = []

    def load(self, path: str | Path) -> AssemblyView:
        file_name = Path(path).name
        self.loaded.append(file_name)
        try:
            return self.assemblies[file_name]
        except KeyError:
            raise AssemblyLoadError(path, "not a valid assembly") from None


def make_assembly(
    name: str,
    resources: dict[str, bytes] | None = None,
    references: tuple[str, ...] = (),
) -> AssemblyView:
    """Build an AssemblyView with resources given as {logical name: content}."""
    return AssemblyView(
        name=name,
        resources=tuple(
            EmbeddedResource.from_bytes(logical_name, data)
            for logical_name, data in (resources or {}).items()
        ),
        references=references,
    )


@pytest.fixture
def sample_assemblies() -> dict[str, AssemblyView]:
    """Entrypoint App referencing Lib.B, which references Lib.A."""
    return {
        "App.dll": make_assembly(
            "App",
            {"blazor:js:entry.js": b"never extracted"},
            references=("Lib.A", "Lib.B"),
        ),
        "Lib.A.dll": make_assembly(
            "Lib.A",
            {"blazor:css:theme.css": b"body{color:red}"},
        ),
        "Lib.B.dll": make_assembly(
            "Lib.B",
            {"blazor:js:app.js": b"console.log(1)"},
            references=("Lib.A",),
        ),
    }


@pytest.fixture
def fake_reader(sample_assemblies: dict[str, AssemblyView]) -> FakeAssemblyReader:
    return FakeAssemblyReader(sample_assemblies)
