#!/usr/bin/env python3
"""
html_template.cli.cli

Typer-based CLI for injecting a finished bundle into an HTML template.

The bundler (or a build script) writes its output files and a JSON manifest
mapping each emitted file name to ``{"isEntry": bool}``; this CLI then
produces the final HTML document.

Examples
--------
Reference the bundle from ``dist/index.html``:

    html-template inject --manifest dist/manifest.json --output-dir dist \
        --template src/index.html

Inline scripts into a document outside the output directory:

    html-template inject --manifest dist/manifest.json --output-dir dist \
        --template src/index.html --target site/app/index.html --embed-content
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Any

import typer

from html_template.errors import InjectionError

app = typer.Typer(
    name="html-template",
    help="Inject bundler output into an HTML template.",
    no_args_is_help=True,
)

MANIFEST_HELP = 'JSON manifest mapping emitted file names to {"isEntry": bool}.'


def _print_injection_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly injection error.

    Parameters
    ----------
    exc : Exception
        Exception raised during injection.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_replace_vars(var_items: list[str] | None) -> dict[str, str]:
    """Parse repeated PATTERN=REPLACEMENT entries, keeping their order."""
    parsed: dict[str, str] = {}
    for item in var_items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid variable entry '{item}'. Use PATTERN=REPLACEMENT format."
            )
        pattern, replacement = item.split("=", 1)
        if not pattern:
            raise typer.BadParameter("Variable pattern cannot be empty.")
        parsed[pattern] = replacement
    return parsed


def _load_manifest(manifest_path: Path, debug: bool) -> dict[str, object]:
    from html_template.infrastructure.manifest_file import load_manifest_file

    try:
        return load_manifest_file(manifest_path)
    except InjectionError as exc:
        raise typer.Exit(code=_print_injection_error(exc, debug))


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("inject")
def inject_cmd(
    ctx: typer.Context,
    manifest: Path = typer.Option(
        ...,
        "--manifest",
        exists=True,
        readable=True,
        dir_okay=False,
        help=MANIFEST_HELP,
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Directory the bundler wrote into."
    ),
    output_file: Path | None = typer.Option(
        None,
        "--output-file",
        help="Single bundler output file (its directory is used).",
    ),
    template: Path | None = typer.Option(
        None, "--template", help="Source HTML template."
    ),
    target: Path | None = typer.Option(
        None,
        "--target",
        help="Destination HTML path (defaults to the template name in the output dir).",
    ),
    prefix: str | None = typer.Option(
        None, "--prefix", help="Literal string prepended to every asset URL."
    ),
    attr: list[str] | None = typer.Option(
        None, "--attr", help="Attribute token added to every <script> tag (repeatable)."
    ),
    embed_content: bool = typer.Option(
        False, "--embed-content", help="Inline script bodies instead of src references."
    ),
    var: list[str] | None = typer.Option(
        None,
        "--var",
        help="Literal PATTERN=REPLACEMENT applied to the template (repeatable, in order).",
    ),
) -> None:
    """Write the HTML document for a finished build.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    manifest : Path
        JSON manifest of emitted files.
    output_dir : Path | None
        Bundle output directory.
    output_file : Path | None
        Bundle output file, used when ``output_dir`` is not given.

    Notes
    -----
    - Run only after the bundler has written every output file.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    replace_vars = _parse_replace_vars(var)
    bundle = _load_manifest(manifest, debug)

    try:
        from html_template.api import inject_html_template

        kwargs: dict[str, Any] = {
            "template": template,
            "target": target,
            "output_dir": output_dir,
            "output_file": output_file,
        }
        if prefix:
            kwargs["prefix"] = prefix
        if attr:
            kwargs["attrs"] = tuple(attr)
        if embed_content:
            kwargs["embed_content"] = True
        if replace_vars:
            kwargs["replace_vars"] = replace_vars

        out = inject_html_template(bundle, **kwargs)
        typer.echo(f"[green]✓ Saved:[/green] {out}")
    except InjectionError as exc:
        raise typer.Exit(code=_print_injection_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_injection_error(exc, debug))


@app.command("entries")
def entries_cmd(
    ctx: typer.Context,
    manifest: Path = typer.Option(
        ...,
        "--manifest",
        exists=True,
        readable=True,
        dir_okay=False,
        help=MANIFEST_HELP,
    ),
) -> None:
    """Print the entry-point files of a manifest, one per line."""
    debug: bool = bool(ctx.obj.get("debug", False))

    bundle = _load_manifest(manifest, debug)
    try:
        from html_template.manifest import get_entry_points

        for name in get_entry_points(bundle):
            typer.echo(name)
    except InjectionError as exc:
        raise typer.Exit(code=_print_injection_error(exc, debug))


if __name__ == "__main__":
    app()
