"""Helpers for resolving paths and reading source files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def get_absolute_path(path: PathLike) -> str:
    """Return the canonical absolute path of an existing file.

    Raises ``OSError`` (usually ``FileNotFoundError``) if it cannot be resolved.
    """
    resolved = os.path.realpath(os.fspath(path), strict=True)
    return resolved


def get_file_line(path: PathLike, line: int) -> Optional[str]:
    """Return line ``line`` (counted from 1) without its line ending, or None."""
    if line < 1:
        return None
    with open(path, "r", encoding="utf-8", newline="") as handle:
        for number, text in enumerate(handle, start=1):
            if number != line:
                continue
            if text.endswith(("\n", "\r")):
                text = text[:-1]
            if text.endswith("\r"):
                text = text[:-1]
            return text
    return None


def read_file_all(path: PathLike) -> str:
    """Return the whole content of a UTF-8 file, line endings untouched."""
    return Path(path).read_bytes().decode("utf-8")