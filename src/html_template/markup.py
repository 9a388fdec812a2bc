"""Render ``<link>`` and ``<script>`` markup for classified bundle files."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from html_template.application.ports import AssetReader
from html_template.errors import AssetReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedAsset:
    """Markup rendered for a single manifest entry."""

    file_name: str
    markup: str


def _open_script_tag(attrs: Sequence[str], *extra: str) -> str:
    tokens = [*attrs, *extra]
    if not tokens:
        return "<script>"
    return f"<script {' '.join(tokens)}>"


def render_style_links(styles: Sequence[str], prefix: str = "") -> list[RenderedAsset]:
    """Render one stylesheet link per style file, ``href`` = prefix + name."""
    return [
        RenderedAsset(
            file_name=name,
            markup=f'<link rel="stylesheet" type="text/css" href="{prefix}{name}">\n',
        )
        for name in styles
    ]


def render_script_tags(
    scripts: Sequence[str],
    asset_path_prefix: str = "",
    prefix: str = "",
    attrs: Sequence[str] = (),
) -> list[RenderedAsset]:
    """Render ``src``-referencing script tags with caller attributes first."""
    return [
        RenderedAsset(
            file_name=name,
            markup=(
                _open_script_tag(attrs, f'src="{asset_path_prefix}{prefix}{name}"')
                + "</script>\n"
            ),
        )
        for name in scripts
    ]


def inline_asset_path(output_dir: Path, prefix: str, file_name: str) -> Path:
    """Location of an emitted file under the bundle output directory."""
    return Path(f"{output_dir}{os.sep}{prefix}{file_name}")


def render_inline_script_tags(
    scripts: Sequence[str],
    contents: Sequence[bytes],
    attrs: Sequence[str] = (),
) -> list[RenderedAsset]:
    """Render script tags whose body is the trimmed file content.

    Raises
    ------
    AssetReadError
        If a script is not valid UTF-8.
    """
    rendered: list[RenderedAsset] = []
    for name, raw in zip(scripts, contents, strict=True):
        try:
            body = raw.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise AssetReadError(f"Unable to decode asset '{name}': {exc}") from exc
        rendered.append(
            RenderedAsset(
                file_name=name,
                markup=f"{_open_script_tag(attrs)}{body}</script>\n",
            )
        )
    return rendered


def build_script_markup(
    scripts: Sequence[str],
    *,
    output_dir: Path,
    asset_path_prefix: str,
    prefix: str,
    attrs: Sequence[str],
    embed_content: bool,
    reader: AssetReader,
) -> list[RenderedAsset]:
    """Render script markup, inlining file contents when ``embed_content`` is set.

    Parameters
    ----------
    scripts : Sequence[str]
        Script file names in manifest order.
    output_dir : Path
        Bundle output directory; inlined files are always read from here.
    asset_path_prefix : str
        Relative path from the document to ``output_dir``.
    prefix : str
        Literal URL prefix option.
    attrs : Sequence[str]
        Attribute tokens inserted verbatim into every tag.
    embed_content : bool
        Whether to inline script bodies instead of referencing them.
    reader : AssetReader
        Batch reader used for inlining.

    Returns
    -------
    list[RenderedAsset]
        Rendered tags in ``scripts`` order.
    """
    if not embed_content:
        return render_script_tags(scripts, asset_path_prefix, prefix, attrs)

    paths = [inline_asset_path(output_dir, prefix, name) for name in scripts]
    logger.debug("inlining %d scripts from %s", len(paths), output_dir)
    contents = reader.read_assets(paths)
    return render_inline_script_tags(scripts, contents, attrs)
