"""Filesystem adapter for reading candidates from local disk."""

from __future__ import annotations

import importlib.util
import logging
import os
import stat
import sys
import traceback
from pathlib import Path
from typing import Any

from rcsearch.core.exceptions import ModuleError, ModuleSyntaxError, ParseError


logger = logging.getLogger(__name__)

# Module-level name a config module assigns its configuration to
EXPORT_NAME = "config"


class LocalFilesystem:
    """Filesystem adapter for the local disk.

    Implements FilesystemPort. Missing entries surface as FileNotFoundError;
    every other OSError is passed through untouched for the engine to
    classify.

    Config modules (`.js`-named candidates) are evaluated as Python source
    in a fresh module namespace. The module exports its configuration by
    binding it to the module-level name `config`:

        config = {"semi": False, "plugins": ["a", "b"]}
    """

    def is_directory(self, path: Path) -> bool:
        """Return whether path is a directory.

        Raises:
            FileNotFoundError: If nothing exists at path.
        """
        return stat.S_ISDIR(os.stat(path).st_mode)

    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist.
            ParseError: If the file is not valid UTF-8.
        """
        logger.debug("Reading %s", path)
        try:
            return Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(
                f"{path} is not valid UTF-8 text", filepath=Path(path), cause=e
            ) from e

    def load_module(self, path: Path) -> Any:
        """Evaluate a config module and return the value bound to `config`.

        Args:
            path: Path to the module source.

        Returns:
            The module's `config` value, or None if it defines none.

        Raises:
            FileNotFoundError: If the file does not exist.
            ModuleSyntaxError: If the source does not compile.
            ModuleError: If evaluating the module raises.
        """
        path = Path(path)
        source = self.read_text(path)

        try:
            code = compile(source, str(path), "exec")
        except SyntaxError as e:
            raise ModuleSyntaxError(
                f"Syntax error in {path}: {e.msg}",
                filepath=path,
                line=e.lineno,
                column=e.offset,
                cause=e,
            ) from e

        # Generate a unique module name to avoid conflicts
        module_name = f"_rcsearch_config_{path.stem.replace('.', '_')}_{id(path)}"

        spec = importlib.util.spec_from_loader(module_name, loader=None, origin=str(path))
        if spec is None:
            msg = f"Could not create a module for {path}"
            raise ModuleError(msg, filepath=path)

        module = importlib.util.module_from_spec(spec)
        module.__file__ = str(path)
        sys.modules[module_name] = module

        logger.debug("Evaluating config module %s", path)
        try:
            exec(code, module.__dict__)  # noqa: S102
        except Exception as e:
            raise ModuleError(
                f"Error evaluating {path}: {type(e).__name__}: {e}",
                filepath=path,
                line=_error_line(e, path),
                cause=e,
            ) from e
        finally:
            # Clean up to avoid polluting sys.modules
            sys.modules.pop(module_name, None)

        return getattr(module, EXPORT_NAME, None)


def _error_line(error: BaseException, path: Path) -> int | None:
    """Find the innermost traceback line that belongs to path."""
    frames = [
        frame
        for frame in traceback.extract_tb(error.__traceback__)
        if frame.filename == str(path)
    ]
    return frames[-1].lineno if frames else None
