"""Center the title of one-line dash banners such as ``// ---- Title ---- //``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from .text import rewrite_file, split_eol

LINE_COMMENT = "//"


@dataclass(frozen=True)
class SectionPattern:
    line_comment: str = LINE_COMMENT
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.line_comment:
            raise ValueError("line comment token must not be empty")
        token = re.escape(self.line_comment)
        # prefix, left dashes, title, right dashes, suffix
        pattern = re.compile(rf"(\s*{token}\s+)(-+)\s*(.+?)\s*(-+)(\s+{token}\s*)")
        object.__setattr__(self, "regex", pattern)

    def split(self, line: str) -> tuple[str, str, str, str, str] | None:
        match = self.regex.fullmatch(line)
        if match is None:
            return None
        prefix, left_dashes, title, right_dashes, suffix = match.groups()
        # plain divider such as "// -------- //": no title to center
        if not title.strip("-"):
            return None
        return prefix, left_dashes, title, right_dashes, suffix


DEFAULT_PATTERN = SectionPattern()


def center_section_line(line: str, pattern: SectionPattern = DEFAULT_PATTERN) -> str | None:
    parts = pattern.split(line)
    if parts is None:
        return None
    prefix, left_dashes, title, right_dashes, suffix = parts
    total_width = len(prefix) + len(left_dashes) + 2 + len(title) + len(right_dashes) + len(suffix)
    dash_space = total_width - len(prefix) - len(suffix) - len(title) - 2
    left = dash_space // 2
    right = dash_space - left
    return prefix + "-" * left + " " + title + " " + "-" * right + suffix


def center_section_lines(lines: list[str], pattern: SectionPattern = DEFAULT_PATTERN) -> bool:
    changed = False
    for i, raw in enumerate(lines):
        line, eol = split_eol(raw)
        centered = center_section_line(line, pattern)
        if centered is None or centered == line:
            continue
        lines[i] = centered + eol
        changed = True
    return changed


def center_section_headers_in_file(
    path: Path,
    pattern: SectionPattern = DEFAULT_PATTERN,
    encoding: str = "utf-8",
) -> bool:
    return rewrite_file(path, partial(center_section_lines, pattern=pattern), encoding)
