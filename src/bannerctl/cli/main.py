from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..commands.center import run_center
from ..config.loader import load_config
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import OK
from ..core.runtime.env import config_path_from_env
from .output import emit, render_error, resolve_output_format


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bannerctl",
        description="Re-center region and section banner comments in source files.",
    )
    p.add_argument("--version", action="version", version=f"bannerctl {__version__}")
    p.add_argument("root", nargs="?", help="directory to process (default: current working directory)")
    p.add_argument("--config", help="YAML or JSON config file (env: BANNERCTL_CONFIG)")
    p.add_argument("--ext", action="append", metavar="SUFFIX", help="file-name suffix to process; repeatable")
    p.add_argument("--exclude", action="append", metavar="NAME", help="extra directory name to skip; repeatable")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier for log lines (env: RUN_ID)")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    output_format = resolve_output_format(cli_json=ns.json, cli_format=ns.format)
    try:
        ctx = RunContext.from_args(
            ns.root if ns.root is not None else Path.cwd(),
            run_id=ns.run_id,
            output_format=output_format,  # type: ignore[arg-type]
            verbose=ns.verbose,
            quiet=ns.quiet,
            log_json=ns.log_json,
        )
        config = load_config(ns.config or config_path_from_env()).with_overrides(ns.ext, ns.exclude)
        report = run_center(ctx, config)
    except ScriptError as exc:
        print(
            render_error(as_json=(output_format == "json"), message=str(exc), code=exc.code, kind=exc.kind),
            file=sys.stderr,
        )
        return exc.code
    if ctx.as_json:
        payload = report.to_json(ctx.run_id)
        payload["config"] = config.to_json()
        emit(payload, as_json=True)
    return OK


if __name__ == "__main__":
    raise SystemExit(main())
