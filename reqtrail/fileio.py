"""Asynchronous helpers for reading and writing text files."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _append(path: PathLike, data: bytes) -> None:
    flags = os.O_WRONLY | os.O_APPEND | getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


async def read_from_file(path: PathLike) -> str:
    """Return the whole content of ``path`` decoded as UTF-8."""
    data = await asyncio.to_thread(Path(path).read_bytes)
    return data.decode("utf-8")


async def write_to_file(path: PathLike, content: str) -> None:
    """Replace the content of ``path`` with ``content``, creating it if needed."""
    await asyncio.to_thread(Path(path).write_bytes, content.encode("utf-8"))


async def append_to_file(path: PathLike, content: str) -> None:
    """Append ``content`` to an existing file; a missing file raises."""
    await asyncio.to_thread(_append, path, content.encode("utf-8"))