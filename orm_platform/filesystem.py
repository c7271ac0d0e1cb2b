"""Filesystem helpers.

Host errors (FileNotFoundError, PermissionError, IsADirectoryError, ...)
propagate unchanged.
"""

import asyncio
import os
from pathlib import Path

PathLike = str | os.PathLike[str]


def _as_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def exists(path: PathLike) -> bool:
    """Whether anything exists at the path (file or directory)."""
    return os.path.exists(path)


def read_bytes(path: PathLike) -> bytes:
    return Path(path).read_bytes()


def append(path: PathLike, data: str | bytes) -> None:
    """Append data to a file, creating it if needed. Text is written as UTF-8."""
    with open(path, "ab") as f:
        f.write(_as_bytes(data))


def _write(path: PathLike, data: str | bytes) -> None:
    Path(path).write_bytes(_as_bytes(data))


async def write(path: PathLike, data: str | bytes) -> None:
    """Replace a file's contents without blocking the event loop."""
    await asyncio.to_thread(_write, path, data)
