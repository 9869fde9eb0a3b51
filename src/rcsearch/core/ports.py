"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    from concurrent.futures import Future
    from pathlib import Path


@runtime_checkable
class FilesystemPort(Protocol):
    """Read-only filesystem access used while probing candidates.

    Every method raises FileNotFoundError when the entry does not exist.
    Any other OSError means the entry exists but cannot be used.
    """

    def is_directory(self, path: Path) -> bool:
        """Return whether path is a directory.

        Raises:
            FileNotFoundError: If nothing exists at path.
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        ...

    def load_module(self, path: Path) -> Any:
        """Evaluate a config module and return its exported value.

        Returns:
            The exported value, or None if the module exports nothing.

        Raises:
            FileNotFoundError: If the file does not exist.
            ModuleError: If the module fails to evaluate.
        """
        ...


@runtime_checkable
class ExecutorPort(Protocol):
    """Runs the I/O steps of a deferred search.

    The engine submits one zero-argument step at a time and resumes the
    search from the returned future's completion. A plain
    concurrent.futures executor satisfies this protocol.
    """

    def submit(self, step: Callable[[], Any]) -> Future[Any]:
        """Schedule step and return a future for its result.

        Raises:
            RuntimeError: If the executor no longer accepts work.
        """
        ...
