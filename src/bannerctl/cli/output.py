"""CLI payload output helpers."""

from __future__ import annotations

import json
from typing import Any


def dumps_json(payload: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(payload, indent=2, sort_keys=True)
    return json.dumps(payload, sort_keys=True)


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def resolve_output_format(*, cli_json: bool, cli_format: str | None) -> str:
    if cli_json:
        return "json"
    return cli_format or "text"


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "bannerctl.error.v1",
                "schema_version": 1,
                "tool": "bannerctl",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
        )
    return f"bannerctl: {message}"
