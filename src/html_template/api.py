"""Public keyword API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Mapping
from typing import Optional

from html_template.application.use_cases import build_injection_options
from html_template.application.use_cases import inject_template


def inject_html_template(
    manifest: Mapping[str, object],
    *,
    template: Optional[Path | str] = None,
    target: Optional[Path | str] = None,
    output_dir: Optional[Path | str] = None,
    output_file: Optional[Path | str] = None,
    prefix: Optional[str] = None,
    attrs: Optional[Iterable[str]] = None,
    embed_content: bool = False,
    replace_vars: Optional[Mapping[str, str]] = None,
) -> Path:
    """Inject a finished bundle into an HTML template and return the written path."""
    options = build_injection_options(
        template=template,
        target=target,
        prefix=prefix,
        attrs=tuple(attrs or ()),
        embed_content=embed_content,
        replace_vars=replace_vars,
    )
    result = inject_template(
        output={"dir": output_dir, "file": output_file},
        manifest=manifest,
        options=options,
    )
    return result.output_path
