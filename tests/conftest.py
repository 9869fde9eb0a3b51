"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, walker, parsing and engine")
    config.addinivalue_line("markers", "adapters: Filesystem and executor adapters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class FakeFilesystem:
    """In-memory FilesystemPort that records every call.

    Anything not registered in directories, files, modules or errors does
    not exist.
    """

    def __init__(self) -> None:
        self.directories: set[Path] = set()
        self.files: dict[Path, str] = {}
        self.modules: dict[Path, Any] = {}
        self.errors: dict[Path, Exception] = {}
        self.calls: list[tuple[str, Path]] = []

    @property
    def probed(self) -> list[Path]:
        """Paths read or loaded, in order (directory checks excluded)."""
        return [path for op, path in self.calls if op != "is_directory"]

    def _lookup(self, op: str, path: Path) -> None:
        self.calls.append((op, path))
        if path in self.errors:
            raise self.errors[path]

    def is_directory(self, path: Path) -> bool:
        self._lookup("is_directory", path)
        if path in self.directories:
            return True
        if path in self.files or path in self.modules:
            return False
        raise FileNotFoundError(path)

    def read_text(self, path: Path) -> str:
        self._lookup("read_text", path)
        if path in self.files:
            return self.files[path]
        raise FileNotFoundError(path)

    def load_module(self, path: Path) -> Any:
        self._lookup("load_module", path)
        if path in self.modules:
            return self.modules[path]
        raise FileNotFoundError(path)


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    """Reusable recording filesystem for probe-order tests.

    Implements FilesystemPort without touching the disk, so tests can
    assert exactly which paths were probed and in which order.
    """
    return FakeFilesystem()


@pytest.fixture
def virtual_root() -> Path:
    """Absolute root directory for trees that only exist in fake_fs."""
    return Path("/virtual/project")
