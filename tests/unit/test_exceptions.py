"""Unit tests for domain exception hierarchy."""

from pathlib import Path

import pytest


@pytest.mark.core
class TestRcSearchError:
    """Tests for base exception class."""

    def test_is_exception_subclass(self) -> None:
        """RcSearchError should be an Exception subclass."""
        from rcsearch.core.exceptions import RcSearchError

        assert issubclass(RcSearchError, Exception)

    def test_recovery_hint_returns_none_by_default(self) -> None:
        """Base exception should return None for recovery_hint."""
        from rcsearch.core.exceptions import RcSearchError

        err = RcSearchError("something went wrong")
        assert err.recovery_hint is None


@pytest.mark.core
class TestInputError:
    """Tests for InputError."""

    def test_is_rcsearch_error_subclass(self) -> None:
        """InputError should inherit from RcSearchError."""
        from rcsearch.core.exceptions import InputError, RcSearchError

        assert issubclass(InputError, RcSearchError)

    def test_stores_path_and_cause(self) -> None:
        """Exception should store the path and underlying error."""
        from rcsearch.core.exceptions import InputError

        cause = PermissionError("denied")
        err = InputError("Cannot read", path=Path("/x/.foorc"), cause=cause)

        assert err.path == Path("/x/.foorc")
        assert err.cause is cause
        assert str(err) == "Cannot read"

    def test_recovery_hint_names_path(self) -> None:
        """Recovery hint should point at the inaccessible path."""
        from rcsearch.core.exceptions import InputError

        err = InputError("Cannot read", path=Path("/x/.foorc"))

        assert "/x/.foorc" in err.recovery_hint


@pytest.mark.core
class TestConfigFileNotFoundError:
    """Tests for ConfigFileNotFoundError."""

    def test_is_input_error_subclass(self) -> None:
        """A missing explicit file is a kind of input error."""
        from rcsearch.core.exceptions import ConfigFileNotFoundError, InputError

        assert issubclass(ConfigFileNotFoundError, InputError)

    def test_recovery_hint_suggests_verifying_path(self) -> None:
        """Recovery hint should mention the missing file."""
        from rcsearch.core.exceptions import ConfigFileNotFoundError

        err = ConfigFileNotFoundError("Not found", path=Path("conf/app.yaml"))

        assert "exists" in err.recovery_hint
        assert "app.yaml" in err.recovery_hint


@pytest.mark.core
class TestParseError:
    """Tests for ParseError and its format-specific subclasses."""

    def test_stores_location(self) -> None:
        """Exception should store file, line, column and cause."""
        from rcsearch.core.exceptions import ParseError

        cause = ValueError("bad")
        err = ParseError("Broken", filepath=Path("/x/.foorc"), line=3, column=7, cause=cause)

        assert err.filepath == Path("/x/.foorc")
        assert err.line == 3
        assert err.column == 7
        assert err.cause is cause

    def test_recovery_hint_with_line(self) -> None:
        """Hint points at the line when one is known."""
        from rcsearch.core.exceptions import JSONError

        err = JSONError("Broken", filepath=Path("/x/package.json"), line=4)

        assert err.recovery_hint == "Check package.json at line 4"

    def test_recovery_hint_without_line(self) -> None:
        """Hint names the kind of error when no line is known."""
        from rcsearch.core.exceptions import ModuleError

        err = ModuleError("Broken", filepath=Path("/x/foo.config.js"))

        assert err.recovery_hint == "Check foo.config.js for module errors"

    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("ParseError", "parse"),
            ("JSONError", "json"),
            ("YAMLError", "yaml"),
            ("ModuleError", "module"),
            ("ModuleSyntaxError", "syntax"),
        ],
    )
    def test_kind(self, name: str, kind: str) -> None:
        """Each parse error class reports its kind."""
        from rcsearch.core import exceptions

        assert getattr(exceptions, name).kind == kind

    def test_hierarchy(self) -> None:
        """All parse errors can be caught together."""
        from rcsearch.core.exceptions import (
            JSONError,
            ModuleError,
            ModuleSyntaxError,
            ParseError,
            RcSearchError,
            YAMLError,
        )

        assert issubclass(ParseError, RcSearchError)
        for cls in (JSONError, YAMLError, ModuleError):
            assert issubclass(cls, ParseError)
        assert issubclass(ModuleSyntaxError, ModuleError)


@pytest.mark.core
def test_exceptions_exported_from_package() -> None:
    """All exceptions are importable from the top-level package."""
    import rcsearch

    for name in (
        "RcSearchError",
        "InputError",
        "ConfigFileNotFoundError",
        "ParseError",
        "JSONError",
        "YAMLError",
        "ModuleError",
        "ModuleSyntaxError",
    ):
        assert name in rcsearch.__all__
        assert hasattr(rcsearch, name)
