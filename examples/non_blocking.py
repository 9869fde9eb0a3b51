"""Non-blocking lookups with futures.

With sync=False, search() and load() return a concurrent.futures.Future
and the file I/O runs on a worker thread. The explorer owns that thread,
so use it as a context manager (or call close()) when done. Leaving the
with block waits for lookups still in progress, so their callbacks run.
"""

from rcsearch import SearchResult, create_explorer


def add_defaults(result: SearchResult | None) -> SearchResult | None:
    """Transform hook: runs once per lookup, before caching."""
    if result is None:
        return None
    return SearchResult({"debug": False, **result.config}, result.filepath)


with create_explorer("myapp", sync=False, transform=add_defaults) as explorer:
    pending = explorer.search()

    # ... do other work while the search runs ...

    result = pending.result(timeout=10)
    print(result.config if result else "no config")

    # Callbacks work too
    explorer.search_future("..").add_done_callback(
        lambda done: print(f"Parent lookup finished: {done.result()}")
    )
