from __future__ import annotations

from .loader import BannerConfig, load_config

__all__ = ["BannerConfig", "load_config"]
