#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- Path helpers
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Literal, overload

# region Common functions


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


def open_for_write(path: Path, **kwargs: Any) -> IO[str]:
    """Open ``path`` for text writing, creating missing parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "w", **kwargs)


def is_hidden_name(name: str) -> bool:
    """True for dot-files and dot-directories (``.git``, ``.cache``...)."""
    return name.startswith(".") and name not in (".", "..")


# endregion Common functions
