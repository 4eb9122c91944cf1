from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..config.loader import BannerConfig
from ..core.context import RunContext
from ..core.runtime.logging import log_event
from ..core.scan import iter_source_files
from ..headers.region import center_region_headers_in_file
from ..headers.section import center_section_headers_in_file

Reporter = Callable[[Path], None]


@dataclass
class FileUpdate:
    path: Path
    passes: list[str] = field(default_factory=list)


@dataclass
class RunReport:
    root: Path
    files_scanned: int = 0
    updates: list[FileUpdate] = field(default_factory=list)

    @property
    def files_updated(self) -> int:
        return len(self.updates)

    def to_json(self, run_id: str) -> dict[str, object]:
        return {
            "schema_name": "bannerctl.center.v1",
            "schema_version": 1,
            "tool": "bannerctl",
            "status": "ok",
            "run_id": run_id,
            "root": str(self.root),
            "files_scanned": self.files_scanned,
            "files_updated": self.files_updated,
            "updated": [{"path": str(u.path), "passes": list(u.passes)} for u in self.updates],
        }


def print_updated(path: Path) -> None:
    print(f"Updated: {path}", flush=True)


def center_file(path: Path, config: BannerConfig, report_updated: Reporter | None = None) -> list[str]:
    """Run the region pass then the section pass on one file.

    Each pass reads the file on its own and writes only if it changed a
    line. ``report_updated`` is called once per pass that rewrote the file.
    Returns the names of those passes.
    """
    passes: list[str] = []
    if center_region_headers_in_file(path, config.region_start, config.region_end, config.encoding):
        passes.append("region")
        if report_updated is not None:
            report_updated(path)
    if center_section_headers_in_file(path, config.section_pattern, config.encoding):
        passes.append("section")
        if report_updated is not None:
            report_updated(path)
    return passes


def center_tree(ctx: RunContext, config: BannerConfig, report_updated: Reporter | None = None) -> RunReport:
    report = RunReport(root=ctx.root)
    for path in iter_source_files(ctx.root, config.extensions, config.exclude_dirs):
        report.files_scanned += 1
        log_event(ctx, "debug", "center", "scan", path=path)
        update = FileUpdate(path, center_file(path, config, report_updated))
        if update.passes:
            log_event(ctx, "info", "center", "file_updated", path=path, passes=",".join(update.passes))
            report.updates.append(update)
    return report


def run_center(ctx: RunContext, config: BannerConfig) -> RunReport:
    log_event(
        ctx,
        "info",
        "center",
        "start",
        root=ctx.root,
        extensions=",".join(config.extensions),
        config=config.source or "defaults",
    )
    reporter = None if ctx.as_json else print_updated
    report = center_tree(ctx, config, reporter)
    log_event(
        ctx,
        "info",
        "center",
        "finish",
        files_scanned=report.files_scanned,
        files_updated=report.files_updated,
    )
    return report
