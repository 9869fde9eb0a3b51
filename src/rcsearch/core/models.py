"""Core domain models for rcsearch.

These models are pure Python dataclasses with no I/O dependencies.
They describe what to search for, what gets probed and what a search
returns.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Literal


FORMATS = ("json", "yaml", "js")


class FormatTag(Enum):
    """Which parser applies to a candidate file."""

    PACKAGE_JSON = "package.json"
    RC_PLAIN = "rc"
    RC_JSON = "rc.json"
    RC_YAML = "rc.yaml"
    RC_JS = "rc.js"
    CONFIG_JS = "config.js"

    @property
    def is_module(self) -> bool:
        """True for tags whose content is obtained by evaluating a module."""
        return self in (FormatTag.RC_JS, FormatTag.CONFIG_JS)


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Options supplied once per explorer.

    Attributes:
        module_name: Name used to derive the default filenames.
        stop_dir: Highest directory the search may inspect. None means the
            filesystem root.
        config_path: If set, the search is bypassed and exactly this file
            is loaded.
        rc_extensions: Also look for `.{name}rc.json`, `.yaml`, `.yml` and
            `.js` variants.
        rc_strict_json: Parse the extensionless rc file as strict JSON
            instead of YAML.
        package_prop: Key read from `package.json`. Defaults to module_name;
            False or "" skips `package.json` entirely.
        rc_name: Filename of the rc file. Defaults to `.{module_name}rc`;
            False or "" skips all rc files.
        js_name: Filename of the config module. Defaults to
            `{module_name}.config.js`; False or "" skips it.
        format: Force the parser ("json", "yaml" or "js") for explicitly
            loaded files instead of inferring it from the extension.
        sync: Explorer.search() and Explorer.load() block when True and
            return a Future when False.
        cache: Remember results per start directory and per loaded file.

    Example:
        >>> options = SearchOptions(module_name="foo")
        >>> options.rc_name
        '.foorc'
    """

    module_name: str
    stop_dir: Path | None = None
    config_path: Path | None = None
    rc_extensions: bool = False
    rc_strict_json: bool = False
    package_prop: str | Literal[False] | None = None
    rc_name: str | Literal[False] | None = None
    js_name: str | Literal[False] | None = None
    format: str | None = None
    sync: bool = True
    cache: bool = True

    def __post_init__(self) -> None:
        """Validate options and fill in derived defaults."""
        if not self.module_name:
            raise ValueError("module_name cannot be empty")
        if self.format is not None and self.format not in FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(FORMATS)}, got {self.format!r}"
            )

        if self.package_prop is None:
            object.__setattr__(self, "package_prop", self.module_name)
        if self.rc_name is None:
            object.__setattr__(self, "rc_name", f".{self.module_name}rc")
        if self.js_name is None:
            object.__setattr__(self, "js_name", f"{self.module_name}.config.js")
        if self.stop_dir is not None:
            object.__setattr__(self, "stop_dir", absolute_path(self.stop_dir))
        if self.config_path is not None:
            object.__setattr__(self, "config_path", Path(self.config_path))


@dataclass(frozen=True, slots=True)
class Candidate:
    """One file considered while probing a directory.

    Attributes:
        path: Absolute path of the file.
        tag: Which parser applies.
        extraction_key: For `package.json` only, the key holding the config.
    """

    path: Path
    tag: FormatTag
    extraction_key: str | None = None


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A successfully loaded configuration.

    Attributes:
        config: The parsed configuration mapping.
        filepath: Absolute path of the file it came from.
    """

    config: dict[str, Any]
    filepath: Path


def absolute_path(path: str | os.PathLike[str]) -> Path:
    """Make a path absolute and collapse `.`/`..` without resolving symlinks."""
    return Path(os.path.abspath(path))
