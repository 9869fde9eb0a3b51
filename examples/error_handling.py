"""Error handling patterns with recovery hints.

A missing config is never an error: search() returns None. A config
file that exists but is broken stops the search with an exception, and
every exception carries a recovery_hint.
"""

from rcsearch import (
    ConfigFileNotFoundError,
    InputError,
    ParseError,
    RcSearchError,
    SearchResult,
    create_explorer,
)


explorer = create_explorer("myapp")


# Pattern 1: Report broken files with their location
def search_with_location(start_dir: str) -> SearchResult | None:
    """Search, printing where a malformed file went wrong."""
    try:
        return explorer.search_sync(start_dir)
    except ParseError as e:
        # kind is "json", "yaml", "module" or "syntax"
        print(f"Invalid {e.kind} in {e.filepath} (line {e.line}, column {e.column})")
        print(f"Hint: {e.recovery_hint}")
        raise


# Pattern 2: Treat a missing explicit file as "no config"
def load_optional(path: str) -> SearchResult | None:
    """Load path, returning None if it doesn't exist."""
    try:
        return explorer.load_sync(path)
    except ConfigFileNotFoundError as e:
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 3: Handle unreadable paths
def search_with_access_check(start_dir: str) -> SearchResult | None:
    """Search, handling permission errors gracefully."""
    try:
        return explorer.search_sync(start_dir)
    except InputError as e:
        print(f"Cannot access {e.path}: {e.cause}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 4: Catch all library errors
def search_safely(start_dir: str) -> SearchResult | None:
    """Search, catching any rcsearch error."""
    try:
        return explorer.search_sync(start_dir)
    except RcSearchError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return None
