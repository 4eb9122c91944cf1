"""Environment variables read by bannerctl."""

from __future__ import annotations

import os

ENV_CONFIG = "BANNERCTL_CONFIG"
ENV_RUN_ID = "RUN_ID"


def getenv(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name)
    return value if value else default


def config_path_from_env() -> str | None:
    return getenv(ENV_CONFIG)


def run_id_from_env() -> str | None:
    return getenv(ENV_RUN_ID)
