"""Inject bundler output into HTML templates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from html_template.types import RawManifest

if TYPE_CHECKING:
    from html_template.plugin import HtmlTemplatePlugin

__version__ = "0.1.0"


def inject_html_template(
    manifest: RawManifest,
    *,
    template: Path | str | None = None,
    target: Path | str | None = None,
    output_dir: Path | str | None = None,
    output_file: Path | str | None = None,
    prefix: str | None = None,
    attrs: Iterable[str] | None = None,
    embed_content: bool = False,
    replace_vars: Mapping[str, str] | None = None,
) -> Path:
    """Inject ``<link>``/``<script>`` markup for a finished bundle into a template.

    Parameters
    ----------
    manifest : Mapping[str, object]
        Emitted file name mapped to metadata carrying ``isEntry``.
    template : Path | str, optional
        Source HTML template; names the output when ``target`` is omitted.
    target : Path | str, optional
        Destination document path; may live outside the output directory.
    output_dir : Path | str, optional
        Directory the bundler wrote into.
    output_file : Path | str, optional
        Single bundler output file; its directory is used when
        ``output_dir`` is not given.
    prefix : str, optional
        Literal string prepended to every asset URL.
    attrs : Iterable[str], optional
        Attribute tokens inserted verbatim into every ``<script>`` tag.
    embed_content : bool, default=False
        Inline script bodies instead of referencing them by ``src``.
    replace_vars : Mapping[str, str], optional
        Literal substring replacements applied to the template in order.

    Returns
    -------
    Path
        Path of the written document.
    """
    from .api import inject_html_template as _impl

    return _impl(
        manifest,
        template=template,
        target=target,
        output_dir=output_dir,
        output_file=output_file,
        prefix=prefix,
        attrs=attrs,
        embed_content=embed_content,
        replace_vars=replace_vars,
    )


def get_entry_points(manifest: RawManifest | None) -> list[str]:
    """Return manifest keys flagged ``isEntry``, in manifest order."""
    from .manifest import get_entry_points as _impl

    return _impl(manifest)


def html_template(
    *,
    template: Path | str | None = None,
    target: Path | str | None = None,
    prefix: str | None = None,
    attrs: tuple[str, ...] | list[str] | None = None,
    embed_content: bool = False,
    replace_vars: Mapping[str, str] | None = None,
) -> HtmlTemplatePlugin:
    """Create the post-build hook via lazy plugin import."""
    from .plugin import html_template as _impl

    return _impl(
        template=template,
        target=target,
        prefix=prefix,
        attrs=attrs,
        embed_content=embed_content,
        replace_vars=replace_vars,
    )


__all__ = [
    "inject_html_template",
    "get_entry_points",
    "html_template",
]
