from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings

from tests.helpers import REGION_BOTTOM, REGION_TOP

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("bannerctl", deadline=None, max_examples=150)
settings.load_profile("bannerctl")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    (root / "src/models").mkdir(parents=True)
    (root / "node_modules/lib").mkdir(parents=True)
    (root / ".git").mkdir()
    (root / "src/models/User.ts").write_text(
        "\n".join(
            [
                "const a = 1;",
                REGION_TOP,
                "Constants",
                REGION_BOTTOM,
                "// -- Helpers ------ //",
                "",
            ]
        ),
        encoding="utf-8",
    )
    (root / "src/clean.ts").write_text("export const x = 1;\n", encoding="utf-8")
    (root / "src/notes.md").write_text("// -- Helpers ------ //\n", encoding="utf-8")
    (root / "node_modules/lib/index.ts").write_text("// -- Helpers ------ //\n", encoding="utf-8")
    (root / ".git/hook.ts").write_text("// -- Helpers ------ //\n", encoding="utf-8")
    return root
