"""Center the title line of three-line region banners.

A region banner looks like::

    /******************************************************************************
                                      Constants
    ******************************************************************************/

The title is centered within the width of the top border line.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path

from .text import rewrite_file, split_eol

REGION_START = "/" + "*" * 78
REGION_END = "*" * 78 + "/"


def center_region_title(title_line: str, width: int) -> str | None:
    """Return ``title_line`` centered in ``width`` columns, or ``None`` to leave it alone.

    Blank titles and titles wider than the border are not touched. Odd
    leftover space goes to the right.
    """
    title = title_line.strip()
    if not title or len(title) > width:
        return None
    left = (width - len(title)) // 2
    right = width - len(title) - left
    return " " * left + title + " " * right


def center_region_lines(
    lines: list[str],
    region_start: str = REGION_START,
    region_end: str = REGION_END,
) -> bool:
    changed = False
    for i in range(len(lines) - 2):
        top, _ = split_eol(lines[i])
        bottom, _ = split_eol(lines[i + 2])
        if not (top.startswith(region_start) and bottom.startswith(region_end)):
            continue
        middle, eol = split_eol(lines[i + 1])
        centered = center_region_title(middle, len(top))
        if centered is None or centered == middle:
            continue
        lines[i + 1] = centered + eol
        changed = True
    return changed


def center_region_headers_in_file(
    path: Path,
    region_start: str = REGION_START,
    region_end: str = REGION_END,
    encoding: str = "utf-8",
) -> bool:
    transform = partial(center_region_lines, region_start=region_start, region_end=region_end)
    return rewrite_file(path, transform, encoding)
