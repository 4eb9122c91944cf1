from __future__ import annotations

import json
from pathlib import Path

import pytest

from bannerctl.config.loader import SCHEMA_PATH, BannerConfig, load_config, validate_config_payload
from bannerctl.core.errors import ScriptError
from bannerctl.core.exit_codes import ERR_CONFIG
from tests.helpers import REGION_BOTTOM, REGION_TOP


def test_defaults_without_a_file() -> None:
    cfg = load_config(None)
    assert cfg == BannerConfig()
    assert cfg.extensions == (".ts",)
    assert cfg.exclude_dirs == {"node_modules", ".git"}
    assert cfg.region_start == REGION_TOP
    assert cfg.region_end == REGION_BOTTOM
    assert cfg.line_comment == "//"
    assert cfg.source is None


def test_schema_file_is_bundled() -> None:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    assert schema["additionalProperties"] is False


def test_yaml_config(tmp_path: Path) -> None:
    path = tmp_path / "bannerctl.yaml"
    path.write_text(
        "extensions: ['.py', '.pyi']\n"
        "exclude_dirs: ['.venv']\n"
        "region_start: '####'\n"
        "region_end: '####'\n"
        "line_comment: '#'\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.extensions == (".py", ".pyi")
    assert cfg.exclude_dirs == {".venv"}
    assert cfg.region_start == "####"
    assert cfg.section_pattern.line_comment == "#"
    assert cfg.source == str(path)


def test_json_config_keeps_unset_defaults(tmp_path: Path) -> None:
    path = tmp_path / "bannerctl.json"
    path.write_text(json.dumps({"extensions": [".js"]}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.extensions == (".js",)
    assert cfg.exclude_dirs == BannerConfig().exclude_dirs
    assert cfg.line_comment == "//"


def test_empty_yaml_is_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == BannerConfig()


@pytest.mark.parametrize(
    "body,fragment",
    [
        ("unknown_key: 1\n", "Additional properties"),
        ("extensions: []\n", "extensions"),
        ("extensions: '.ts'\n", "extensions"),
        ("line_comment: ''\n", "line_comment"),
        ("- a\n- b\n", "<root>"),
    ],
)
def test_schema_violations_raise_config_error(tmp_path: Path, body: str, fragment: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ScriptError) as excinfo:
        load_config(path)
    assert excinfo.value.code == ERR_CONFIG
    assert excinfo.value.kind == "config_error"
    assert fragment in str(excinfo.value)


def test_unparsable_files_raise_config_error(tmp_path: Path) -> None:
    bad_yaml = tmp_path / "bad.yaml"
    bad_yaml.write_text("extensions: [\n", encoding="utf-8")
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{", encoding="utf-8")
    for path in (bad_yaml, bad_json):
        with pytest.raises(ScriptError) as excinfo:
            load_config(path)
        assert excinfo.value.code == ERR_CONFIG
        assert "failed to parse" in str(excinfo.value)


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as excinfo:
        load_config(tmp_path / "missing.yaml")
    assert excinfo.value.code == ERR_CONFIG
    assert "not found" in str(excinfo.value)


def test_unknown_encoding_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "c.yaml"
    path.write_text("encoding: not-a-codec\n", encoding="utf-8")
    with pytest.raises(ScriptError, match="unknown encoding"):
        load_config(path)


def test_validate_payload_ok() -> None:
    assert validate_config_payload({"extensions": [".ts"], "encoding": "latin-1"}) == []


def test_overrides_replace_extensions_and_extend_exclusions() -> None:
    cfg = BannerConfig().with_overrides([".js"], ["dist"])
    assert cfg.extensions == (".js",)
    assert cfg.exclude_dirs == {"node_modules", ".git", "dist"}
    assert BannerConfig().with_overrides(None, None) == BannerConfig()


def test_to_json_is_serializable() -> None:
    payload = BannerConfig().to_json()
    assert json.loads(json.dumps(payload))["exclude_dirs"] == [".git", "node_modules"]
