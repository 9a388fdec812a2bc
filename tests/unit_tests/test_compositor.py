"""Unit tests for template text stages."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from html_template.compositor import (
    apply_replace_vars,
    compose_document,
    decode_template,
    splice_before_last,
)
from html_template.errors import TemplateReadError


def test_replace_vars_substitutes_every_occurrence() -> None:
    """Replace all literal occurrences of a pattern."""
    text = "<title>{{TITLE}}</title><h1>{{TITLE}}</h1>"
    assert apply_replace_vars(text, {"{{TITLE}}": "App"}) == (
        "<title>App</title><h1>App</h1>"
    )


def test_replace_vars_are_sequential() -> None:
    """Feed each replacement the output of the previous one."""
    assert apply_replace_vars("a", {"a": "b", "b": "c"}) == "c"
    assert apply_replace_vars("a", {"b": "c", "a": "b"}) == "b"


def test_replace_vars_treat_metacharacters_literally() -> None:
    """Match regex metacharacters and back-references as plain text."""
    text = "x $(a).* y [a] z"
    replaced = apply_replace_vars(text, {"$(a).*": r"\1$&", "[a]": "."})
    assert replaced == r"x \1$& y . z"


def test_replace_vars_none_is_identity() -> None:
    """Leave text untouched without replacements."""
    assert apply_replace_vars("<p>{{X}}</p>", None) == "<p>{{X}}</p>"


def test_splice_targets_last_occurrence() -> None:
    """Insert before the final marker only."""
    text = "<body><!-- </body> --></body>"
    assert splice_before_last(text, "</body>", ["S1", "S2"]) == (
        "<body><!-- </body> -->S1S2</body>"
    )


def test_splice_without_marker_drops_fragments() -> None:
    """Return the text unchanged when the marker is absent."""
    assert splice_before_last("<div></div>", "</body>", ["S"]) == "<div></div>"


def test_compose_places_styles_and_scripts() -> None:
    """Put links before </head> and scripts before </body> after substitution."""
    template = "<head><title>T</title></head><body>{{B}}</body>"
    document = compose_document(
        template,
        ["<link a>\n"],
        ["<script b></script>\n"],
        replace_vars={"{{B}}": "body"},
    )
    assert document == (
        "<head><title>T</title><link a>\n</head>"
        "<body>body<script b></script>\n</body>"
    )


def test_compose_without_head_keeps_scripts() -> None:
    """Drop styles silently but still inject scripts."""
    document = compose_document("<body></body>", ["<link>\n"], ["<script></script>\n"])
    assert document == "<body><script></script>\n</body>"


def test_compose_without_body_keeps_styles() -> None:
    """Drop scripts silently but still inject styles."""
    document = compose_document("<head></head>", ["<link>\n"], ["<script></script>\n"])
    assert document == "<head><link>\n</head>"


def test_replacement_can_introduce_closing_tags() -> None:
    """Locate closing tags after substitution has run."""
    document = compose_document("{{END}}", [], ["S"], replace_vars={"{{END}}": "</body>"})
    assert document == "S</body>"


def test_decode_template_rejects_invalid_utf8() -> None:
    """Report undecodable templates as read failures."""
    with pytest.raises(TemplateReadError, match="not valid UTF-8"):
        decode_template(b"\xff<html>", "main.html")


@given(st.text(), st.text(min_size=1))
def test_self_replacement_is_identity(text: str, pattern: str) -> None:
    """Replacing a pattern with itself never changes the text."""
    assert apply_replace_vars(text, {pattern: pattern}) == text
