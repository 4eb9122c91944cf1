from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

REGION_TOP = "/" + "*" * 78
REGION_BOTTOM = "*" * 78 + "/"


def region_block(title: str, top: str = REGION_TOP, bottom: str = REGION_BOTTOM) -> list[str]:
    return [top, title, bottom]


def centered(title: str, width: int) -> str:
    left = (width - len(title)) // 2
    return " " * left + title + " " * (width - len(title) - left)


def run_bannerctl(*args: str, cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    proc_env = os.environ.copy()
    proc_env["PYTHONPATH"] = str(ROOT / "src")
    proc_env.pop("BANNERCTL_CONFIG", None)
    proc_env.setdefault("RUN_ID", "pytest-run")
    if env:
        proc_env.update(env)
    return subprocess.run(
        [sys.executable, "-m", "bannerctl", *args],
        cwd=(cwd or ROOT),
        env=proc_env,
        text=True,
        capture_output=True,
        check=False,
    )
