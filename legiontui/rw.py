"""Serialised reading and writing of small text files such as sysfs attributes."""

from __future__ import annotations

import os
import threading

_lock = threading.RLock()


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the first line of ``path``, without its line terminator."""
    with _lock:
        with open(path, encoding="utf-8", newline="") as handle:
            contents = handle.read()
    return contents.split("\n", 1)[0]


def read_files(*args: str | os.PathLike[str]) -> list[str]:
    """Return the first line of each given file, in the order given."""
    with _lock:
        return [read_file(path) for path in args]


def write_to_file(path: str | os.PathLike[str], content: str) -> None:
    """Replace the contents of ``path`` with ``content``, creating it if needed."""
    with _lock:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)