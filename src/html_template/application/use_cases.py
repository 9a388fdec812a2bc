"""Application use-case orchestrating template injection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from html_template.application.options import InjectionOptions
from html_template.application.ports import AssetReader, DocumentWriter, TemplateReader
from html_template.application.results import InjectionResult
from html_template.compositor import compose_document, decode_template
from html_template.errors import ConfigurationError, TemplateReadError
from html_template.infrastructure.filesystem import FileSystemReader, FileSystemWriter
from html_template.manifest import classify_manifest
from html_template.markup import build_script_markup, render_style_links
from html_template.paths import resolve_target_paths
from html_template.schemas import BuildOutputConfig, InjectionConfig
from html_template.types import RawManifest

logger = logging.getLogger(__name__)


def _validate_options(options: InjectionOptions) -> InjectionConfig:
    try:
        return InjectionConfig(
            template=options.template,
            target=options.target,
            prefix=options.prefix,
            attrs=options.attrs,
            embed_content=options.embed_content,
            replace_vars=dict(options.replace_vars) if options.replace_vars else None,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid injection options: {exc}") from exc


def _validate_output(output: object) -> BuildOutputConfig:
    try:
        if isinstance(output, Mapping):
            return BuildOutputConfig.model_validate(dict(output))
        return BuildOutputConfig.model_validate(output)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid build output configuration: {exc}") from exc


def inject_template(
    *,
    output: BuildOutputConfig | Mapping[str, object] | object,
    manifest: RawManifest | None,
    options: InjectionOptions,
    template_reader: TemplateReader | None = None,
    asset_reader: AssetReader | None = None,
    writer: DocumentWriter | None = None,
) -> InjectionResult:
    """Use-case: inject bundle references into the template and write it.

    Must run after every bundle file has been written to disk; inlined
    scripts are read back from the output directory.

    Parameters
    ----------
    output : BuildOutputConfig | Mapping | object
        Bundler output settings exposing ``dir`` or ``file``.
    manifest : Mapping[str, object] | None
        Emitted file name mapped to entry metadata.
    options : InjectionOptions
        Injection options.

    Returns
    -------
    InjectionResult
        Written path and the classified bundle files.
    """
    config = _validate_options(options)
    build_output = _validate_output(output)

    output_dir = build_output.output_dir
    paths = resolve_target_paths(config.template, config.target, output_dir)
    classified = classify_manifest(manifest)

    if config.template is None:
        raise TemplateReadError(
            f"No template configured for target {paths.target_path}."
        )

    fs_reader = FileSystemReader()
    template_reader = template_reader or fs_reader
    asset_reader = asset_reader or fs_reader
    writer = writer or FileSystemWriter()

    template = decode_template(
        template_reader.read_template(config.template), config.template
    )
    styles = render_style_links(classified.styles, config.prefix)
    scripts = build_script_markup(
        classified.scripts,
        output_dir=output_dir,
        asset_path_prefix=paths.asset_path_prefix,
        prefix=config.prefix,
        attrs=config.attrs,
        embed_content=config.embed_content,
        reader=asset_reader,
    )

    document = compose_document(
        template,
        [asset.markup for asset in styles],
        [asset.markup for asset in scripts],
        replace_vars=config.replace_vars,
    )
    out_path = writer.write(paths.target_path, document)
    logger.info(
        "injected %d styles and %d scripts into %s",
        len(styles),
        len(scripts),
        out_path,
    )
    return InjectionResult(
        output_path=out_path,
        styles=classified.styles,
        scripts=classified.scripts,
    )


def build_injection_options(
    *,
    template: Path | str | None = None,
    target: Path | str | None = None,
    prefix: str | None = None,
    attrs: tuple[str, ...] | list[str] | None = None,
    embed_content: bool = False,
    replace_vars: Mapping[str, str] | None = None,
) -> InjectionOptions:
    """Build typed option object from hook/API/CLI params."""
    return InjectionOptions(
        template=Path(template) if template else None,
        target=Path(target) if target else None,
        prefix=prefix,
        attrs=tuple(attrs or ()),
        embed_content=embed_content,
        replace_vars=dict(replace_vars) if replace_vars is not None else None,
    )
