"""Small file helpers: existence, reading, writing, copying and line processing."""

from __future__ import annotations

import os
import shutil
from typing import Callable, Union

PathLike = Union[str, "os.PathLike[str]"]

LINE_BUFFER = 1024


def is_file(path: PathLike) -> bool:
    """Return whether ``path`` can be opened as a file for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def read_file(path: PathLike) -> str:
    """Return the whole content of a file, without newline translation."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def delete_file(path: PathLike) -> None:
    """Delete the file at ``path``."""
    os.remove(path)


def get_file_size(path: PathLike) -> int:
    """Return the size of a file in bytes."""
    with open(path, "rb") as handle:
        return handle.seek(0, os.SEEK_END)


def copy_file(dest: PathLike, src: PathLike) -> None:
    """Copy the content of ``src`` to ``dest``."""
    shutil.copyfile(src, dest)


def write_file(data: str, path: PathLike, preserve: bool = False) -> None:
    """Write ``data`` to a file, appending when ``preserve`` is true."""
    if not data:
        raise ValueError("no data to write")
    with open(path, "a" if preserve else "w", encoding="utf-8", newline="") as handle:
        handle.write(data)


def append_file(data: str, path: PathLike, newline: bool = False) -> None:
    """Append ``data`` to a file, after a newline when ``newline`` is true."""
    if newline:
        write_file("\n", path, True)
    write_file(data, path, True)


def process_file(process_line: Callable[[str], object], path: PathLike) -> None:
    """Call ``process_line`` on each line, in pieces of at most 1023 characters."""
    limit = LINE_BUFFER - 1
    with open(path, "r", encoding="utf-8") as handle:
        for line in handle:
            for start in range(0, len(line), limit):
                process_line(line[start : start + limit])