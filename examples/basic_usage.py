"""Basic configuration lookup example.

This example shows the simplest usage pattern: search upward from the
current directory for a tool's configuration and fall back to defaults
when there is none.
"""

from rcsearch import create_explorer, find_config


DEFAULTS = {"semi": True, "plugins": []}

# Option 1: One-shot lookup (recommended for scripts)
# Checks package.json["myapp"], .myapprc and myapp.config.js in every
# directory from here up to the filesystem root
result = find_config("myapp")
settings = {**DEFAULTS, **result.config} if result else DEFAULTS
print(f"Settings: {settings}")

# Option 2: An explorer (reuse across lookups)
# Results are cached per start directory and per file
explorer = create_explorer(
    "myapp",
    rc_extensions=True,  # also .myapprc.json/.yaml/.yml/.js
    stop_dir=".",  # never look above the working directory
)

result = explorer.search()
if result is not None:
    print(f"Loaded {result.filepath}")

# Load a file directly; the extension picks the parser
# result = explorer.load("config/myapp.yaml")

# Forget cached results after config files change
explorer.clear_caches()
