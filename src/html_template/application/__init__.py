"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from html_template.application.options import InjectionOptions
from html_template.application.ports import AssetReader, DocumentWriter, TemplateReader
from html_template.application.results import InjectionResult


def build_injection_options(
    *,
    template: Path | str | None = None,
    target: Path | str | None = None,
    prefix: str | None = None,
    attrs: tuple[str, ...] | list[str] | None = None,
    embed_content: bool = False,
    replace_vars: Mapping[str, str] | None = None,
) -> InjectionOptions:
    """Build typed injection options via lazy use-case import."""
    from html_template.application.use_cases import build_injection_options as _impl

    return _impl(
        template=template,
        target=target,
        prefix=prefix,
        attrs=attrs,
        embed_content=embed_content,
        replace_vars=replace_vars,
    )


def inject_template(
    *,
    output: object,
    manifest: Mapping[str, object] | None,
    options: InjectionOptions,
    template_reader: TemplateReader | None = None,
    asset_reader: AssetReader | None = None,
    writer: DocumentWriter | None = None,
) -> InjectionResult:
    """Inject bundle markup into the template via lazy use-case import."""
    from html_template.application.use_cases import inject_template as _impl

    return _impl(
        output=output,
        manifest=manifest,
        options=options,
        template_reader=template_reader,
        asset_reader=asset_reader,
        writer=writer,
    )


__all__ = [
    "InjectionOptions",
    "InjectionResult",
    "build_injection_options",
    "inject_template",
]
