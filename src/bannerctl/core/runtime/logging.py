from __future__ import annotations

import inspect
import json
import sys
from typing import TYPE_CHECKING

from .clock import utc_now_iso

if TYPE_CHECKING:
    from ..context import RunContext

_LEVELS = ("debug", "info", "warning", "error")


def should_log(ctx: RunContext, level: str) -> bool:
    if level not in _LEVELS:
        raise ValueError(f"unknown log level: {level}")
    if level == "debug":
        return ctx.verbose
    if level == "info":
        return not ctx.quiet
    return True


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if not should_log(ctx, level):
        return
    caller = inspect.currentframe().f_back  # type: ignore[union-attr]
    payload = {
        "ts": utc_now_iso(),
        "level": level,
        "run_id": ctx.run_id,
        "component": component,
        "action": action,
        "file": caller.f_code.co_filename if caller else "",
        "line": caller.f_lineno if caller else 0,
        **fields,
    }
    if ctx.log_json:
        sys.stderr.write(json.dumps(payload, sort_keys=True, default=str) + "\n")
        return
    core = f"ts={payload['ts']} level={level} run_id={ctx.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
