#!/usr/bin/env python3
"""Example: run the post-build hook against a freshly written build."""

from __future__ import annotations

import tempfile
from pathlib import Path

from html_template.plugin import html_template

TEMPLATE = """<!doctype html>
<html>
<head>
  <title>{{TITLE}}</title>
</head>
<body>
  <div id="app"></div>
</body>
</html>
"""


def _write_fake_build(root: Path) -> dict[str, dict[str, bool]]:
    """Stand in for the bundler: write output files and return its manifest."""
    dist = root / "dist"
    dist.mkdir()
    (dist / "main.js").write_text("console.log('hello');\n", encoding="utf-8")
    (dist / "vendor.js").write_text("window.vendor = true;\n", encoding="utf-8")
    (dist / "main.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    return {
        "main.js": {"isEntry": True},
        "vendor.js": {"isEntry": False},
        "main.css": {},
    }


def example_referenced_scripts(root: Path, manifest: dict[str, dict[str, bool]]) -> None:
    """Write site/app/index.html pointing back into dist/."""
    plugin = html_template(
        template=root / "main.html",
        target=root / "site" / "app" / "index",
        attrs=["defer"],
        replace_vars={"{{TITLE}}": "Referenced"},
    )
    result = plugin.write_bundle({"dir": root / "dist"}, manifest)
    print(result.output_path.read_text(encoding="utf-8"))


def example_embedded_scripts(root: Path, manifest: dict[str, dict[str, bool]]) -> None:
    """Write dist/index.html with script bodies inlined."""
    plugin = html_template(
        template=root / "main.html",
        target=root / "dist" / "index.html",
        embed_content=True,
        replace_vars={"{{TITLE}}": "Embedded"},
    )
    result = plugin.write_bundle({"dir": root / "dist"}, manifest)
    print(result.output_path.read_text(encoding="utf-8"))


def main() -> None:
    """Run both examples in a scratch directory."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "main.html").write_text(TEMPLATE, encoding="utf-8")
        manifest = _write_fake_build(root)
        example_referenced_scripts(root, manifest)
        example_embedded_scripts(root, manifest)


if __name__ == "__main__":
    main()
