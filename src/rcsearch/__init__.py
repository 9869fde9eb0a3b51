"""rcsearch - Find and load a tool's configuration, wherever the user put it.

This library searches upward from a directory for a module's configuration
in package.json, an rc file (YAML or JSON, optionally with an extension) or
a config module, and returns the first one it finds.

Example:
    >>> from rcsearch import create_explorer
    >>> explorer = create_explorer("foo", stop_dir="/home/me")
    >>> result = explorer.search("/home/me/project/src")
    >>> if result is not None:
    ...     print(result.filepath, result.config)
"""

from rcsearch.adapters import LocalFilesystem, SynchronousExecutor, ThreadPoolExecutorAdapter
from rcsearch.config import create_explorer, find_config
from rcsearch.core.exceptions import (
    ConfigFileNotFoundError,
    InputError,
    JSONError,
    ModuleError,
    ModuleSyntaxError,
    ParseError,
    RcSearchError,
    YAMLError,
)
from rcsearch.core.models import Candidate, FormatTag, SearchOptions, SearchResult
from rcsearch.core.ports import ExecutorPort, FilesystemPort
from rcsearch.core.services import Explorer


__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "ConfigFileNotFoundError",
    "ExecutorPort",
    "Explorer",
    "FilesystemPort",
    "FormatTag",
    "InputError",
    "JSONError",
    "LocalFilesystem",
    "ModuleError",
    "ModuleSyntaxError",
    "ParseError",
    "RcSearchError",
    "SearchOptions",
    "SearchResult",
    "SynchronousExecutor",
    "ThreadPoolExecutorAdapter",
    "YAMLError",
    "__version__",
    "create_explorer",
    "find_config",
]
