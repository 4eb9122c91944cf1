from __future__ import annotations

import codecs
import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable

import jsonschema
import yaml

from ..core.errors import ScriptError
from ..core.exit_codes import ERR_CONFIG
from ..core.scan import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS
from ..headers.region import REGION_END, REGION_START
from ..headers.section import LINE_COMMENT, SectionPattern

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "bannerctl-config.schema.json"


@dataclass(frozen=True)
class BannerConfig:
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    region_start: str = REGION_START
    region_end: str = REGION_END
    line_comment: str = LINE_COMMENT
    encoding: str = "utf-8"
    source: str | None = field(default=None, compare=False)

    @property
    def section_pattern(self) -> SectionPattern:
        return SectionPattern(self.line_comment)

    @classmethod
    def from_mapping(cls, payload: dict[str, Any], source: str | None = None) -> "BannerConfig":
        defaults = cls()
        return cls(
            extensions=tuple(payload.get("extensions", defaults.extensions)),
            exclude_dirs=frozenset(payload.get("exclude_dirs", defaults.exclude_dirs)),
            region_start=payload.get("region_start", defaults.region_start),
            region_end=payload.get("region_end", defaults.region_end),
            line_comment=payload.get("line_comment", defaults.line_comment),
            encoding=payload.get("encoding", defaults.encoding),
            source=source,
        )

    def with_overrides(
        self,
        extensions: Iterable[str] | None = None,
        exclude_dirs: Iterable[str] | None = None,
    ) -> "BannerConfig":
        out = self
        if extensions:
            out = replace(out, extensions=tuple(extensions))
        if exclude_dirs:
            out = replace(out, exclude_dirs=out.exclude_dirs | frozenset(exclude_dirs))
        return out

    def to_json(self) -> dict[str, object]:
        return {
            "extensions": list(self.extensions),
            "exclude_dirs": sorted(self.exclude_dirs),
            "region_start": self.region_start,
            "region_end": self.region_end,
            "line_comment": self.line_comment,
            "encoding": self.encoding,
            "source": self.source,
        }


def _load_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def _load_any(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def validate_config_payload(payload: Any) -> list[str]:
    validator = jsonschema.Draft202012Validator(_load_schema())
    errors = []
    for err in sorted(validator.iter_errors(payload), key=lambda e: [str(part) for part in e.absolute_path]):
        where = "/".join(str(part) for part in err.absolute_path) or "<root>"
        errors.append(f"{where}: {err.message}")
    return errors


def load_config(path: str | Path | None = None) -> BannerConfig:
    """Load a config file, or return the defaults when ``path`` is ``None``.

    YAML (``.yaml``/``.yml``) and JSON files are accepted. An empty YAML file
    yields the defaults.
    """
    if path is None:
        return BannerConfig()
    cfg_path = Path(path)
    if not cfg_path.is_file():
        raise ScriptError(f"config file not found: {cfg_path}", ERR_CONFIG, kind="config_error")
    try:
        payload = _load_any(cfg_path)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ScriptError(f"failed to parse config {cfg_path}: {exc}", ERR_CONFIG, kind="config_error") from exc
    if payload is None:
        payload = {}
    errors = validate_config_payload(payload)
    if errors:
        raise ScriptError(
            f"invalid config {cfg_path}: " + "; ".join(errors),
            ERR_CONFIG,
            kind="config_error",
        )
    try:
        codecs.lookup(payload.get("encoding", "utf-8"))
    except LookupError as exc:
        raise ScriptError(f"invalid config {cfg_path}: unknown encoding", ERR_CONFIG, kind="config_error") from exc
    return BannerConfig.from_mapping(payload, source=str(cfg_path))
