"""Convenience entry points for rcsearch.

This module builds explorers from keyword options and offers a one-shot
blocking lookup for scripts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rcsearch.core.models import SearchOptions
from rcsearch.core.services import Explorer


if TYPE_CHECKING:
    import os

    from rcsearch.core.models import SearchResult
    from rcsearch.core.ports import ExecutorPort, FilesystemPort
    from rcsearch.core.services import Transform


def create_explorer(
    module_name: str,
    *,
    fs: FilesystemPort | None = None,
    executor: ExecutorPort | None = None,
    transform: Transform | None = None,
    **options: Any,
) -> Explorer:
    """Create an Explorer for module_name.

    Args:
        module_name: Name used to derive the default filenames.
        fs: Filesystem adapter. Defaults to LocalFilesystem.
        executor: Executor for non-blocking searches. Defaults to a
            single-worker thread pool created on first use.
        transform: Hook applied to every result before it is cached.
        **options: Any other SearchOptions field.

    Returns:
        A configured Explorer.

    Example:
        >>> from rcsearch import create_explorer
        >>> explorer = create_explorer("foo", rc_extensions=True)
        >>> result = explorer.search()
    """
    return Explorer(
        SearchOptions(module_name=module_name, **options),
        fs=fs,
        executor=executor,
        transform=transform,
    )


def find_config(
    module_name: str,
    start_dir: str | os.PathLike[str] | None = None,
    **options: Any,
) -> SearchResult | None:
    """Find the configuration for module_name by walking up from start_dir.

    Searches each directory from start_dir (default: current directory)
    up to stop_dir (default: filesystem root) for, in priority order:
    1. package.json with a `module_name` key
    2. .{module_name}rc
    3. .{module_name}rc.json/.yaml/.yml/.js (with rc_extensions=True)
    4. {module_name}.config.js

    Args:
        module_name: Name used to derive the default filenames.
        start_dir: Directory to start searching from.
        **options: Any other SearchOptions field except sync.

    Returns:
        SearchResult for the first file holding configuration, or None.

    Example:
        >>> from rcsearch import find_config
        >>> result = find_config("foo")
        >>> settings = result.config if result else {}
    """
    explorer = create_explorer(module_name, **{**options, "cache": False})
    return explorer.search_sync(start_dir)
