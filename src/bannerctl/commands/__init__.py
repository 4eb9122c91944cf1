from __future__ import annotations

from .center import RunReport, center_file, center_tree, run_center

__all__ = ["RunReport", "center_file", "center_tree", "run_center"]
