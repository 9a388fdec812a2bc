"""Unit tests for manifest classification and entry-point lookup."""

from __future__ import annotations

from types import SimpleNamespace

from hypothesis import given
from hypothesis import strategies as st

from html_template.manifest import (
    classify_manifest,
    get_entry_points,
    normalize_manifest,
)
from html_template.schemas import ManifestEntry


def test_classify_preserves_manifest_order() -> None:
    """Split styles and scripts without reordering either."""
    manifest = {
        "b.js": {},
        "theme.css": {},
        "a.js": {},
        "a.js.map": {},
        "reset.css": {},
        "logo.svg": {},
    }
    classified = classify_manifest(manifest)
    assert classified.styles == ("theme.css", "reset.css")
    assert classified.scripts == ("b.js", "a.js")


def test_classify_is_case_sensitive() -> None:
    """Ignore upper-case extensions."""
    classified = classify_manifest({"APP.JS": {}, "STYLE.CSS": {}})
    assert classified.styles == ()
    assert classified.scripts == ()


def test_classify_handles_nested_names() -> None:
    """Classify names that include directories."""
    classified = classify_manifest({"assets/app.css": {}, "chunks/vendor.js": {}})
    assert classified.styles == ("assets/app.css",)
    assert classified.scripts == ("chunks/vendor.js",)


def test_classify_empty_manifest() -> None:
    """Return empty sequences for a missing manifest."""
    classified = classify_manifest(None)
    assert classified.styles == ()
    assert classified.scripts == ()


def test_entry_points_filter_in_order() -> None:
    """Return only entries flagged true, keeping their relative order."""
    manifest = {
        "polyfills.js": {"isEntry": True},
        "chunk.js": {"isEntry": False},
        "style.css": {},
        "main.js": {"isEntry": True},
    }
    assert get_entry_points(manifest) == ["polyfills.js", "main.js"]


def test_entry_points_accept_objects_and_models() -> None:
    """Read flags from attributes, snake_case keys and prebuilt entries."""
    manifest = {
        "a.js": SimpleNamespace(isEntry=True, code="..."),
        "b.js": SimpleNamespace(type="asset"),
        "c.js": {"is_entry": True},
        "d.js": ManifestEntry(file_name="d.js", is_entry=True),
        "e.js": None,
    }
    assert get_entry_points(manifest) == ["a.js", "c.js", "d.js"]


def test_entry_points_of_empty_manifest() -> None:
    """Treat a missing manifest as having no entries."""
    assert get_entry_points(None) == []
    assert get_entry_points({}) == []


def test_non_boolean_flag_is_not_an_entry() -> None:
    """Count only flags that are exactly ``True`` as entry points."""
    manifest = {
        "a.js": {"isEntry": 1},
        "b.js": {"isEntry": True},
        "c.js": {"isEntry": "yes"},
        "": {"isEntry": True},
    }
    assert get_entry_points(manifest) == ["b.js", ""]
    assert normalize_manifest({"a.js": {"isEntry": 1}})["a.js"].is_entry is False


def test_normalize_ignores_extra_metadata() -> None:
    """Drop bundler metadata other than the entry flag."""
    entries = normalize_manifest({"main.js": {"isEntry": True, "type": "chunk"}})
    assert entries == {"main.js": ManifestEntry(file_name="main.js", is_entry=True)}


_stems = st.text(alphabet="abcdefghij0123456789-_", min_size=1, max_size=8)
_names = st.tuples(_stems, st.sampled_from([".js", ".css", ".map", ".svg", ""])).map(
    "".join
)


@given(st.lists(_names, unique=True, max_size=20))
def test_classified_names_map_one_to_one(names: list[str]) -> None:
    """Every .css/.js key appears exactly once, in manifest order."""
    classified = classify_manifest({name: {} for name in names})
    assert list(classified.styles) == [n for n in names if n.endswith(".css")]
    assert list(classified.scripts) == [n for n in names if n.endswith(".js")]
