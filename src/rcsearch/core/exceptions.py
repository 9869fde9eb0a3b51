"""Domain exceptions for rcsearch.

All library errors inherit from RcSearchError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

A missing candidate file is never an error: the search simply moves on.
Only files that exist but cannot be read or interpreted end up here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class RcSearchError(Exception):
    """Base class for all rcsearch exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class InputError(RcSearchError):
    """Raised when a path cannot be accessed for a reason other than not existing.

    Covers permission problems, a directory where a file was expected and
    a file where a directory was expected.

    Attributes:
        path: The path that could not be accessed.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions on the path."""
        return f"Check that {self.path} is readable and of the expected type"


class ConfigFileNotFoundError(InputError):
    """Raised when an explicitly requested config file does not exist."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the config file exists: {self.path}"


class ParseError(RcSearchError):
    """Raised when a config file exists but cannot be interpreted.

    The search stops as soon as this happens; no other candidate is tried.

    Attributes:
        filepath: Path to the file that failed to parse.
        line: 1-based line number of the error (if available).
        column: 1-based column number of the error (if available).
        cause: The underlying parser exception, if any.
    """

    kind = "parse"

    def __init__(
        self,
        message: str,
        filepath: Path,
        line: int | None = None,
        column: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.filepath = filepath
        self.line = line
        self.column = column
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Point at the offending location in the file."""
        if self.line:
            return f"Check {self.filepath.name} at line {self.line}"
        return f"Check {self.filepath.name} for {self.kind} errors"


class JSONError(ParseError):
    """Raised when strict JSON content is malformed."""

    kind = "json"


class YAMLError(ParseError):
    """Raised when YAML (or lenient JSON) content is malformed."""

    kind = "yaml"


class ModuleError(ParseError):
    """Raised when a config module fails to evaluate."""

    kind = "module"


class ModuleSyntaxError(ModuleError):
    """Raised when a config module is not valid source code."""

    kind = "syntax"
