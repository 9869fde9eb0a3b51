"""Format dispatch for candidate content.

Parsing is always synchronous: by the time content reaches this module
the I/O step that produced it has already completed.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import yaml

from rcsearch.core.exceptions import JSONError, ModuleError, ParseError, YAMLError
from rcsearch.core.models import FormatTag


if TYPE_CHECKING:
    from pathlib import Path

    from rcsearch.core.models import Candidate, SearchOptions


def parse_json(text: str, filepath: Path) -> Any:
    """Parse strict JSON, raising JSONError with the error position."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise JSONError(
            f"Invalid JSON in {filepath}: {e.msg} (line {e.lineno}, column {e.colno})",
            filepath=filepath,
            line=e.lineno,
            column=e.colno,
            cause=e,
        ) from e


def parse_yaml(text: str, filepath: Path) -> Any:
    """Parse YAML (which also accepts JSON), raising YAMLError on failure."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        column = mark.column + 1 if mark is not None else None
        raise YAMLError(
            f"Invalid YAML in {filepath}: {e}",
            filepath=filepath,
            line=line,
            column=column,
            cause=e,
        ) from e


def parse_candidate(
    raw: Any, candidate: Candidate, options: SearchOptions
) -> dict[str, Any] | None:
    """Turn raw candidate content into a config mapping.

    Args:
        raw: File text, or the exported value for module candidates.
        candidate: The candidate the content came from.
        options: Search options (rc_strict_json affects the plain rc file).

    Returns:
        The config mapping, or None when the file holds no configuration
        (blank file, missing package.json key, module exporting nothing).
        None is treated exactly like a missing file.

    Raises:
        ParseError: If the content cannot be interpreted in its format.
    """
    tag = candidate.tag
    path = candidate.path

    if tag.is_module:
        return _require_mapping(raw, path, ModuleError)

    if not raw.strip():
        return None

    if tag is FormatTag.PACKAGE_JSON:
        document = parse_json(raw, path)
        if not isinstance(document, Mapping):
            raise JSONError(f"{path} must contain a JSON object", filepath=path)
        if candidate.extraction_key not in document:
            return None
        return _require_mapping(document[candidate.extraction_key], path, JSONError)

    if tag is FormatTag.RC_JSON or (tag is FormatTag.RC_PLAIN and options.rc_strict_json):
        return _require_mapping(parse_json(raw, path), path, JSONError)

    return _require_mapping(parse_yaml(raw, path), path, YAMLError)


def _require_mapping(
    value: Any, path: Path, error: type[ParseError]
) -> dict[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise error(
            f"Config in {path} must be a mapping, got {type(value).__name__}",
            filepath=path,
        )
    return dict(value)
