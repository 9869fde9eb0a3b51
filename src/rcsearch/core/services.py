"""Core domain services for rcsearch."""

import os
import threading
from collections.abc import Callable
from concurrent.futures import Future, wait
from pathlib import Path
from typing import TYPE_CHECKING

from rcsearch.core.engine import (
    load_steps,
    run_blocking,
    run_deferred,
    search_steps,
)
from rcsearch.core.models import SearchOptions, SearchResult, absolute_path
from rcsearch.core.ports import ExecutorPort, FilesystemPort


if TYPE_CHECKING:
    from rcsearch.adapters.executor import ThreadPoolExecutorAdapter


Transform = Callable[[SearchResult | None], SearchResult | None]
Outcome = SearchResult | None


class Explorer:
    """Finds and loads configuration for one module name.

    An Explorer holds the options, the filesystem and executor adapters,
    the optional transform hook and, when options.cache is set, the
    results of earlier searches and loads.
    """

    def __init__(
        self,
        options: SearchOptions,
        fs: FilesystemPort | None = None,
        executor: ExecutorPort | None = None,
        transform: Transform | None = None,
    ) -> None:
        if fs is None:
            from rcsearch.adapters.filesystem import LocalFilesystem

            fs = LocalFilesystem()
        self._options = options
        self._fs = fs
        self._executor = executor
        self._owned_executor: "ThreadPoolExecutorAdapter | None" = None
        self._transform = transform
        self._search_cache: dict[Path, Outcome] = {}
        self._load_cache: dict[Path, Outcome] = {}
        self._in_flight: set[Future[Outcome]] = set()
        self._lock = threading.Lock()

    @property
    def options(self) -> SearchOptions:
        """The options this explorer searches with."""
        return self._options

    def search(
        self, start_dir: str | os.PathLike[str] | None = None
    ) -> Outcome | Future[Outcome]:
        """Search upward from start_dir (default: current directory).

        Blocks and returns the outcome when options.sync is set, otherwise
        returns a Future. If options.config_path is set, that file is
        loaded instead and no directory is searched.
        """
        if self._options.sync:
            return self.search_sync(start_dir)
        return self.search_future(start_dir)

    def load(self, path: str | os.PathLike[str]) -> Outcome | Future[Outcome]:
        """Load exactly one file; blocking or deferred like search()."""
        if self._options.sync:
            return self.load_sync(path)
        return self.load_future(path)

    def search_sync(self, start_dir: str | os.PathLike[str] | None = None) -> Outcome:
        """Search upward from start_dir and block until done.

        Returns:
            The first SearchResult found, or None if there is no config.

        Raises:
            InputError: If a path on the way cannot be accessed.
            ParseError: If the first existing candidate is malformed.
        """
        if self._options.config_path is not None:
            return self.load_sync(self._options.config_path)

        start = self._start_path(start_dir)
        hit, cached = self._cached(self._search_cache, start)
        if hit:
            return cached
        outcome = self._finish(run_blocking(search_steps(start, self._options, self._fs)))
        self._remember(self._search_cache, start, outcome)
        return outcome

    def search_future(
        self, start_dir: str | os.PathLike[str] | None = None
    ) -> Future[Outcome]:
        """Search upward from start_dir without blocking the caller."""
        if self._options.config_path is not None:
            return self.load_future(self._options.config_path)

        start = self._start_path(start_dir)
        hit, cached = self._cached(self._search_cache, start)
        if hit:
            return _resolved(cached)
        steps = search_steps(start, self._options, self._fs)
        return self._chain(run_deferred(steps, self._get_executor()), self._search_cache, start)

    def load_sync(self, path: str | os.PathLike[str]) -> Outcome:
        """Load exactly one file and block until done.

        Raises:
            ConfigFileNotFoundError: If the file does not exist.
            ParseError: If the file is malformed.
        """
        filepath = absolute_path(path)
        hit, cached = self._cached(self._load_cache, filepath)
        if hit:
            return cached
        outcome = self._finish(run_blocking(load_steps(filepath, self._options, self._fs)))
        self._remember(self._load_cache, filepath, outcome)
        return outcome

    def load_future(self, path: str | os.PathLike[str]) -> Future[Outcome]:
        """Load exactly one file without blocking the caller."""
        filepath = absolute_path(path)
        hit, cached = self._cached(self._load_cache, filepath)
        if hit:
            return _resolved(cached)
        steps = load_steps(filepath, self._options, self._fs)
        return self._chain(run_deferred(steps, self._get_executor()), self._load_cache, filepath)

    def clear_search_cache(self) -> None:
        """Forget the results of earlier searches."""
        with self._lock:
            self._search_cache.clear()

    def clear_load_cache(self) -> None:
        """Forget the results of earlier loads."""
        with self._lock:
            self._load_cache.clear()

    def clear_caches(self) -> None:
        """Forget all cached results."""
        self.clear_search_cache()
        self.clear_load_cache()

    def close(self) -> None:
        """Release the worker thread if this explorer created one.

        Deferred searches and loads already in progress are allowed to
        finish first, so their Futures always resolve. A later deferred
        call starts a new worker.
        """
        with self._lock:
            in_flight = list(self._in_flight)
        wait(in_flight)
        if self._owned_executor is not None:
            self._owned_executor.close()
            self._owned_executor = None
            self._executor = None

    def __enter__(self) -> "Explorer":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def _start_path(self, start_dir: str | os.PathLike[str] | None) -> Path:
        return absolute_path(start_dir if start_dir is not None else Path.cwd())

    def _get_executor(self) -> ExecutorPort:
        if self._executor is None:
            from rcsearch.adapters.executor import ThreadPoolExecutorAdapter

            self._owned_executor = ThreadPoolExecutorAdapter(
                name=f"rcsearch-{self._options.module_name}"
            )
            self._executor = self._owned_executor
        return self._executor

    def _finish(self, outcome: Outcome) -> Outcome:
        if self._transform is None:
            return outcome
        return self._transform(outcome)

    def _cached(self, cache: dict[Path, Outcome], key: Path) -> tuple[bool, Outcome]:
        if not self._options.cache:
            return False, None
        with self._lock:
            if key in cache:
                return True, cache[key]
        return False, None

    def _remember(self, cache: dict[Path, Outcome], key: Path, outcome: Outcome) -> None:
        if self._options.cache:
            with self._lock:
                cache[key] = outcome

    def _chain(
        self, pending: Future[Outcome], cache: dict[Path, Outcome], key: Path
    ) -> Future[Outcome]:
        """Apply the transform and caching once a deferred run completes."""
        finished: Future[Outcome] = Future()
        with self._lock:
            self._in_flight.add(finished)
        finished.add_done_callback(self._settle)

        def on_done(done: Future[Outcome]) -> None:
            error = done.exception()
            if error is not None:
                finished.set_exception(error)
                return
            try:
                outcome = self._finish(done.result())
            except Exception as e:
                finished.set_exception(e)
                return
            self._remember(cache, key, outcome)
            finished.set_result(outcome)

        pending.add_done_callback(on_done)
        return finished

    def _settle(self, finished: Future[Outcome]) -> None:
        with self._lock:
            self._in_flight.discard(finished)


def _resolved(outcome: Outcome) -> Future[Outcome]:
    future: Future[Outcome] = Future()
    future.set_result(outcome)
    return future
