from __future__ import annotations

from pathlib import Path
from typing import Callable

LineTransform = Callable[[list[str]], bool]


def split_eol(line: str) -> tuple[str, str]:
    if line.endswith("\r"):
        return line[:-1], "\r"
    return line, ""


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read().split("\n")


def write_lines(path: Path, lines: list[str], encoding: str = "utf-8") -> None:
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write("\n".join(lines))


def rewrite_file(path: Path, transform: LineTransform, encoding: str = "utf-8") -> bool:
    """Apply ``transform`` to the lines of ``path`` in place.

    The file is written back only when ``transform`` reports a change, so
    untouched files are never opened for writing.
    """
    lines = read_lines(path, encoding)
    if not transform(lines):
        return False
    write_lines(path, lines, encoding)
    return True
