"""Filesystem and executor adapters."""

from rcsearch.adapters.executor import SynchronousExecutor, ThreadPoolExecutorAdapter
from rcsearch.adapters.filesystem import LocalFilesystem


__all__ = ["LocalFilesystem", "SynchronousExecutor", "ThreadPoolExecutorAdapter"]
