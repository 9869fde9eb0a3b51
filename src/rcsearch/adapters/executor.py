"""Executors that run the I/O steps of a deferred search.

The engine hands over one zero-argument step at a time and only submits
the next step once the previous one has finished, so neither executor
ever holds more than one step per search.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable


class SynchronousExecutor:
    """Runs each step in the calling thread.

    Steps come back as already-settled futures, so a search driven by this
    executor has finished by the time search_future() returns. There is no
    thread to release.
    """

    def submit(self, step: Callable[[], Any]) -> Future[Any]:
        """Run step now; its exception, if any, is stored on the future."""
        settled: Future[Any] = Future()
        try:
            settled.set_result(step())
        except Exception as e:
            settled.set_exception(e)
        return settled


class ThreadPoolExecutorAdapter:
    """Runs steps on a single named worker thread.

    One worker serves every search of an Explorer: concurrent searches
    interleave their steps on it in submission order. The worker is named
    after its owner (for example `rcsearch-foo_0`) so it can be told apart
    in thread dumps and log records.

    Once closed, submit() raises RuntimeError. The engine reports that on
    the search's Future instead of raising it.
    """

    def __init__(self, name: str = "rcsearch") -> None:
        """Create the adapter; the worker thread starts on the first submit.

        Args:
            name: Prefix for the worker thread's name.
        """
        self.name = name
        self._pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)

    def submit(self, step: Callable[[], Any]) -> Future[Any]:
        """Queue step for the worker.

        Raises:
            RuntimeError: If the adapter has been closed.
        """
        return self._pool.submit(step)

    def close(self, wait: bool = True) -> None:
        """Stop accepting steps.

        Args:
            wait: Block until steps already queued have run.
        """
        self._pool.shutdown(wait=wait)
