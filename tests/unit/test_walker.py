"""Tests for upward directory traversal."""

from pathlib import Path

import pytest

from rcsearch.core.walker import walk_up


@pytest.mark.core
@pytest.mark.tra("Domain.Walker")
@pytest.mark.tier(0)
class TestWalkUp:
    """Tests for walk_up generator."""

    def test_yields_start_then_ancestors_up_to_stop(self) -> None:
        """Stop directory is included and nothing above it is yielded."""
        dirs = list(walk_up(Path("/a/b/c/d"), Path("/a/b")))

        assert dirs == [Path("/a/b/c/d"), Path("/a/b/c"), Path("/a/b")]

    def test_start_equal_to_stop_yields_one_directory(self) -> None:
        """start == stop yields exactly that directory."""
        assert list(walk_up(Path("/a/b"), Path("/a/b"))) == [Path("/a/b")]

    def test_no_stop_walks_to_filesystem_root(self) -> None:
        """Without a stop directory the walk ends at the root."""
        dirs = list(walk_up(Path("/a/b")))

        assert dirs == [Path("/a/b"), Path("/a"), Path("/")]

    def test_stop_off_the_chain_walks_to_root(self) -> None:
        """A stop directory that is not an ancestor never ends the walk early."""
        dirs = list(walk_up(Path("/a/b"), Path("/elsewhere")))

        assert dirs == [Path("/a/b"), Path("/a"), Path("/")]

    def test_root_start_yields_root_once(self) -> None:
        """Starting at the root yields only the root."""
        assert list(walk_up(Path("/"))) == [Path("/")]

    def test_is_lazy(self) -> None:
        """Ancestors are produced one at a time on demand."""
        walker = walk_up(Path("/a/b/c"), Path("/a"))

        assert next(walker) == Path("/a/b/c")
        assert next(walker) == Path("/a/b")

    def test_is_restartable(self) -> None:
        """Calling walk_up again re-derives the same sequence."""
        first = list(walk_up(Path("/x/y/z"), Path("/x")))
        second = list(walk_up(Path("/x/y/z"), Path("/x")))

        assert first == second
