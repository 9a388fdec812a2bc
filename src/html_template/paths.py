"""Resolve where the generated document goes and how it reaches the bundle."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from html_template.errors import INVALID_ARGS_ERROR, ConfigurationError

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"
_CURRENT_DIR = Path(".")


@dataclass(frozen=True)
class TargetPaths:
    """Resolved output location for the generated HTML document.

    Parameters
    ----------
    target_dir : Path
        Directory that receives the document.
    target_file_name : str
        Document file name, always ending in ``.html``.
    asset_path_prefix : str
        Relative path from ``target_dir`` to the bundle output directory,
        with a trailing ``/``, or ``""`` when both are the same directory.
    """

    target_dir: Path
    target_file_name: str
    asset_path_prefix: str

    @property
    def target_path(self) -> Path:
        return self.target_dir / self.target_file_name


def target_file_name(source: Path) -> str:
    """Return the basename of ``source`` with a ``.html`` suffix ensured."""
    name = source.name
    if Path(name).suffix != HTML_SUFFIX:
        return f"{name}{HTML_SUFFIX}"
    return name


def relative_asset_prefix(target_dir: Path, output_dir: Path) -> str:
    """Compute the URL path prefix leading from ``target_dir`` to ``output_dir``."""
    relative = Path(os.path.relpath(output_dir, target_dir)).as_posix()
    if relative in {"", "."}:
        return ""
    return f"{relative}/"


def resolve_target_paths(
    template: Path | None,
    target: Path | None,
    output_dir: Path,
) -> TargetPaths:
    """Resolve target directory, file name and asset prefix.

    Parameters
    ----------
    template : Path | None
        Template path; names the document when ``target`` is absent.
    target : Path | None
        Destination path, possibly outside the output directory.
    output_dir : Path
        Directory the bundler wrote its files into.

    Returns
    -------
    TargetPaths
        Resolved document location.

    Raises
    ------
    ConfigurationError
        If neither ``template`` nor ``target`` is provided.
    """
    if target is None and template is None:
        raise ConfigurationError(INVALID_ARGS_ERROR)

    target_dir = output_dir
    asset_path_prefix = ""
    if target is not None and target.parent != _CURRENT_DIR:
        target_dir = target.parent
        asset_path_prefix = relative_asset_prefix(target_dir, output_dir)

    name_source = target if target is not None else template
    assert name_source is not None
    paths = TargetPaths(
        target_dir=target_dir,
        target_file_name=target_file_name(name_source),
        asset_path_prefix=asset_path_prefix,
    )
    logger.debug(
        "resolved target %s (asset prefix %r)", paths.target_path, asset_path_prefix
    )
    return paths
