"""Banner comment centering passes."""

from __future__ import annotations

from .region import center_region_headers_in_file, center_region_lines, center_region_title
from .section import SectionPattern, center_section_headers_in_file, center_section_line, center_section_lines

__all__ = [
    "SectionPattern",
    "center_region_headers_in_file",
    "center_region_lines",
    "center_region_title",
    "center_section_headers_in_file",
    "center_section_line",
    "center_section_lines",
]
