"""Upward directory traversal."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def walk_up(start: Path, stop: Path | None = None) -> Iterator[Path]:
    """Yield start, then each ancestor up to and including stop.

    Ascent is pure path manipulation; the filesystem is never consulted.
    If stop is None or not on the ascent chain, the walk ends at the
    filesystem root.

    Args:
        start: Absolute directory to start from.
        stop: Absolute directory to stop after.

    Yields:
        Directories from start upward.
    """
    current = start
    while True:
        yield current
        parent = current.parent
        if current == stop or parent == current:
            return
        current = parent
