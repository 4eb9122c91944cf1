from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_EXTENSIONS = (".ts",)
DEFAULT_EXCLUDED_DIRS = frozenset({"node_modules", ".git"})


def iter_source_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Iterator[Path]:
    """Yield files under ``root`` whose name ends with one of ``extensions``.

    Directories whose base name is in ``excluded_dirs`` are never entered,
    at any depth. Symbolic links are skipped. Entries are visited in sorted
    order. An unreadable directory raises ``OSError`` and ends the walk.
    """
    wanted = tuple(extensions)
    excluded = frozenset(excluded_dirs)
    for path in sorted(root.iterdir()):
        if path.is_symlink():
            continue
        if path.is_dir():
            if path.name not in excluded:
                yield from iter_source_files(path, wanted, excluded)
        elif path.is_file() and path.name.endswith(wanted):
            yield path
