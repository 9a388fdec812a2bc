"""Post-build hook handed to the bundler."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path

from html_template.application.options import InjectionOptions
from html_template.application.results import InjectionResult
from html_template.application.use_cases import build_injection_options, inject_template
from html_template.types import RawManifest


class HtmlTemplatePlugin:
    """Inject the finished bundle into an HTML template.

    Notes
    -----
    ``write_bundle`` must be called once, after the bundler has written every
    output file; inlined scripts are read back from disk, so running earlier
    would miss files or embed stale ones.
    """

    name = "html-template"

    def __init__(self, options: InjectionOptions) -> None:
        self.options = options

    def write_bundle(
        self,
        output_options: Mapping[str, object] | object,
        bundle: RawManifest | None,
    ) -> InjectionResult:
        """Run the injection for one finished build.

        Parameters
        ----------
        output_options : Mapping[str, object] | object
            Bundler output settings exposing ``dir`` or ``file``.
        bundle : Mapping[str, object] | None
            Emitted file name mapped to chunk metadata carrying ``isEntry``.

        Returns
        -------
        InjectionResult
            Written document path and the injected bundle files.
        """
        return inject_template(
            output=output_options,
            manifest=bundle,
            options=self.options,
        )

    async def write_bundle_async(
        self,
        output_options: Mapping[str, object] | object,
        bundle: RawManifest | None,
    ) -> InjectionResult:
        """Await ``write_bundle`` on a worker thread for async build loops."""
        return await asyncio.to_thread(self.write_bundle, output_options, bundle)


def html_template(
    *,
    template: Path | str | None = None,
    target: Path | str | None = None,
    prefix: str | None = None,
    attrs: tuple[str, ...] | list[str] | None = None,
    embed_content: bool = False,
    replace_vars: Mapping[str, str] | None = None,
) -> HtmlTemplatePlugin:
    """Create the post-build hook from keyword options."""
    return HtmlTemplatePlugin(
        build_injection_options(
            template=template,
            target=target,
            prefix=prefix,
            attrs=attrs,
            embed_content=embed_content,
            replace_vars=replace_vars,
        )
    )
