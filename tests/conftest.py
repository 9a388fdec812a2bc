"""Shared pytest configuration, marker assignment and build fixtures."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

TEMPLATE = """<!doctype html>
<html>
<head>
<title>{{TITLE}}</title>
</head>
<body>
<main></main>
</body>
</html>
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_build(tmp_path: Path) -> SimpleNamespace:
    """Write a template and a small bundle the way a bundler would.

    Attributes: ``root``, ``output_dir``, ``template`` and ``manifest``.
    """
    output_dir = tmp_path / "dist"
    output_dir.mkdir()
    (output_dir / "main.js").write_text("\n  console.log('main');\n", encoding="utf-8")
    (output_dir / "chunk-a1b2.js").write_text("export const a = 1;", encoding="utf-8")
    (output_dir / "main.css").write_text("body{margin:0}", encoding="utf-8")
    (output_dir / "main.js.map").write_text("{}", encoding="utf-8")

    template = tmp_path / "src" / "main.html"
    template.parent.mkdir()
    template.write_text(TEMPLATE, encoding="utf-8")

    manifest = {
        "main.js": {"isEntry": True},
        "main.css": {},
        "chunk-a1b2.js": {"isEntry": False},
        "main.js.map": {},
    }
    return SimpleNamespace(
        root=tmp_path,
        output_dir=output_dir,
        template=template,
        manifest=manifest,
    )
