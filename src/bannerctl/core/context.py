from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .errors import ScriptError
from .exit_codes import ERR_USAGE
from .runtime.clock import utc_now
from .runtime.env import run_id_from_env

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    root: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        root: str | Path,
        run_id: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        resolved_root = Path(root)
        if not resolved_root.is_dir():
            raise ScriptError(f"root is not a directory: {resolved_root}", ERR_USAGE, kind="invalid_root")
        default_run = f"bannerctl-{utc_now().strftime('%Y%m%d-%H%M%S')}"
        return cls(
            run_id=run_id or run_id_from_env() or default_run,
            root=resolved_root,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )
