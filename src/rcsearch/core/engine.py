"""The search-and-resolve algorithm.

The algorithm is written once, as a generator that yields I/O steps
(zero-argument callables) and receives each step's result back, or has
the step's exception thrown in. Two drivers execute the steps:

- run_blocking() calls each step inline and returns the final result.
- run_deferred() submits each step to an ExecutorPort and resumes the
  generator from the step's completion callback, returning a Future.

Both drivers keep exactly one step in flight, so the probing order and
the outcome are identical in either mode.
"""

from __future__ import annotations

from concurrent.futures import Future
from functools import partial
from typing import TYPE_CHECKING, Any

from rcsearch.core.candidates import candidate_for_path, candidates_for
from rcsearch.core.exceptions import ConfigFileNotFoundError, InputError
from rcsearch.core.models import SearchResult, absolute_path
from rcsearch.core.parsing import parse_candidate
from rcsearch.core.walker import walk_up


if TYPE_CHECKING:
    import os
    from collections.abc import Callable, Generator
    from pathlib import Path

    from rcsearch.core.models import Candidate, SearchOptions
    from rcsearch.core.ports import ExecutorPort, FilesystemPort

    Step = Callable[[], Any]
    Steps = Generator[Step, Any, SearchResult | None]


def search_steps(
    start: str | os.PathLike[str], options: SearchOptions, fs: FilesystemPort
) -> Steps:
    """Search upward from start for the first existing candidate.

    Args:
        start: File or directory to start from. A path that is not a
            directory (or does not exist) starts the search at its parent.
        options: What to look for and where to stop.
        fs: Filesystem used for every probe.

    Returns:
        The SearchResult of the first candidate holding configuration, or
        None if every directory up to stop_dir was exhausted.

    Raises:
        InputError: If the start path or a candidate cannot be accessed.
        ParseError: If the first existing candidate cannot be parsed.
    """
    start_path = absolute_path(start)
    try:
        is_dir = yield partial(fs.is_directory, start_path)
    except FileNotFoundError:
        is_dir = False
    except OSError as e:
        raise InputError(
            f"Cannot access search path {start_path}: {e}", path=start_path, cause=e
        ) from e

    directory = start_path if is_dir else start_path.parent
    for current in walk_up(directory, options.stop_dir):
        for candidate in candidates_for(current, options):
            result = yield from _probe(candidate, options, fs)
            if result is not None:
                return result
    return None


def load_steps(
    path: str | os.PathLike[str], options: SearchOptions, fs: FilesystemPort
) -> Steps:
    """Load exactly one file, inferring its format from the extension.

    Returns:
        The SearchResult, or None if the file holds no configuration.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        InputError: If the file cannot be read.
        ParseError: If the file cannot be parsed.
    """
    candidate = candidate_for_path(absolute_path(path), options)
    try:
        return (yield from _probe(candidate, options, fs, missing_ok=False))
    except FileNotFoundError as e:
        raise ConfigFileNotFoundError(
            f"Config file not found: {candidate.path}", path=candidate.path, cause=e
        ) from e


def _probe(
    candidate: Candidate,
    options: SearchOptions,
    fs: FilesystemPort,
    missing_ok: bool = True,
) -> Steps:
    read = fs.load_module if candidate.tag.is_module else fs.read_text
    try:
        raw = yield partial(read, candidate.path)
    except FileNotFoundError:
        if missing_ok:
            return None
        raise
    except OSError as e:
        raise InputError(
            f"Cannot read {candidate.path}: {e}", path=candidate.path, cause=e
        ) from e

    config = parse_candidate(raw, candidate, options)
    if config is None:
        return None
    return SearchResult(config=config, filepath=candidate.path)


def run_blocking(steps: Steps) -> SearchResult | None:
    """Drive a step generator to completion in the calling thread."""
    value: Any = None
    error: Exception | None = None
    while True:
        try:
            step = steps.throw(error) if error is not None else steps.send(value)
        except StopIteration as stop:
            return stop.value
        try:
            value, error = step(), None
        except Exception as e:
            value, error = None, e


def run_deferred(steps: Steps, executor: ExecutorPort) -> Future[SearchResult | None]:
    """Drive a step generator by submitting each step to an executor.

    The generator resumes when the submitted step's future completes, so
    steps never overlap. Steps that complete before submit() returns are
    consumed in a loop rather than through nested callbacks.

    Returns:
        Future resolving to the search outcome, or failing with the error
        that ended the search. An executor that refuses a step (for
        example because it was closed) fails the Future with its error.
    """
    outcome: Future[SearchResult | None] = Future()

    def advance(value: Any, error: BaseException | None) -> None:
        while True:
            try:
                step = steps.throw(error) if error is not None else steps.send(value)
            except StopIteration as stop:
                outcome.set_result(stop.value)
                return
            except Exception as e:
                outcome.set_exception(e)
                return

            try:
                pending = executor.submit(step)
            except Exception as e:
                steps.close()
                outcome.set_exception(e)
                return
            if not pending.done():
                pending.add_done_callback(lambda done: advance(*_settled(done)))
                return
            value, error = _settled(pending)

    advance(None, None)
    return outcome


def _settled(future: Future[Any]) -> tuple[Any, BaseException | None]:
    error = future.exception()
    if error is not None:
        return None, error
    return future.result(), None
