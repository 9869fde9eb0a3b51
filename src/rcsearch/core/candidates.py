"""Candidate enumeration.

Within a directory candidates are always tried in this order:

1. package.json (config under the package_prop key)
2. .{name}rc
3. .{name}rc.json, .{name}rc.yaml, .{name}rc.yml, .{name}rc.js
   (only with rc_extensions)
4. {name}.config.js
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rcsearch.core.models import Candidate, FormatTag


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from rcsearch.core.models import SearchOptions


PACKAGE_FILENAME = "package.json"

# (suffix, tag) pairs appended to rc_name when rc_extensions is enabled
RC_EXTENSIONS = [
    (".json", FormatTag.RC_JSON),
    (".yaml", FormatTag.RC_YAML),
    (".yml", FormatTag.RC_YAML),
    (".js", FormatTag.RC_JS),
]

_FORMAT_TAGS = {
    "json": FormatTag.RC_JSON,
    "yaml": FormatTag.RC_YAML,
    "js": FormatTag.RC_JS,
}

_SUFFIX_TAGS = dict(RC_EXTENSIONS)


def candidates_for(directory: Path, options: SearchOptions) -> Iterator[Candidate]:
    """Yield the candidates for one directory in precedence order.

    Args:
        directory: Absolute directory being searched.
        options: Search options naming the files to look for.

    Yields:
        Candidate for each file to probe.
    """
    if options.package_prop:
        yield Candidate(
            directory / PACKAGE_FILENAME,
            FormatTag.PACKAGE_JSON,
            extraction_key=options.package_prop,
        )

    if options.rc_name:
        yield Candidate(directory / options.rc_name, FormatTag.RC_PLAIN)
        if options.rc_extensions:
            for suffix, tag in RC_EXTENSIONS:
                yield Candidate(directory / f"{options.rc_name}{suffix}", tag)

    if options.js_name:
        yield Candidate(directory / options.js_name, FormatTag.CONFIG_JS)


def candidate_for_path(path: Path, options: SearchOptions) -> Candidate:
    """Build the single candidate for an explicitly requested file.

    The tag comes from options.format when set, otherwise from the file
    extension. Unknown extensions are read as YAML.
    """
    if options.format:
        return Candidate(path, _FORMAT_TAGS[options.format])
    return Candidate(path, _SUFFIX_TAGS.get(path.suffix, FormatTag.RC_YAML))
