"""Text stages that turn a template into the final document."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from html_template.errors import TemplateReadError
from html_template.types import ReplaceVars

HEAD_CLOSE_TAG = "</head>"
BODY_CLOSE_TAG = "</body>"


def decode_template(raw: bytes, source: object = "template") -> str:
    """Decode template bytes as UTF-8."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateReadError(f"Template {source} is not valid UTF-8: {exc}") from exc


def apply_replace_vars(text: str, replace_vars: ReplaceVars | None) -> str:
    """Replace every literal occurrence of each pattern, one pair at a time.

    Pairs are applied in mapping order and each pass sees the output of the
    previous one, so ``{"a": "b", "b": "c"}`` turns ``"a"`` into ``"c"``.
    """
    for pattern, replacement in (replace_vars or {}).items():
        text = text.replace(pattern, replacement)
    return text


def splice_before_last(text: str, marker: str, fragments: Iterable[str]) -> str:
    """Insert ``fragments`` right before the last ``marker``.

    Returns ``text`` unchanged when ``marker`` does not occur.
    """
    index = text.rfind(marker)
    if index < 0:
        return text
    return "".join([text[:index], *fragments, text[index:]])


def compose_document(
    template: str,
    style_markup: Sequence[str],
    script_markup: Sequence[str],
    replace_vars: ReplaceVars | None = None,
) -> str:
    """Apply substitutions, then splice styles into head and scripts into body."""
    substituted = apply_replace_vars(template, replace_vars)
    with_styles = splice_before_last(substituted, HEAD_CLOSE_TAG, style_markup)
    return splice_before_last(with_styles, BODY_CLOSE_TAG, script_markup)
