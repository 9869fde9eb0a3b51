"""Core domain module for rcsearch.

This module contains the search algorithm, its domain models and the
port definitions. Apart from parsing already-read text it has no I/O
dependencies and can be tested in isolation.
"""

from rcsearch.core.models import Candidate, FormatTag, SearchOptions, SearchResult
from rcsearch.core.ports import ExecutorPort, FilesystemPort


__all__ = [
    "Candidate",
    "ExecutorPort",
    "FilesystemPort",
    "FormatTag",
    "SearchOptions",
    "SearchResult",
]
