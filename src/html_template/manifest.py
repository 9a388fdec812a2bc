"""Classify bundle manifest entries by asset type."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath

from html_template.schemas import ManifestEntry
from html_template.types import ManifestValue, RawManifest

logger = logging.getLogger(__name__)

STYLE_EXTENSION = ".css"
SCRIPT_EXTENSION = ".js"
_ENTRY_FLAG_KEYS = ("isEntry", "is_entry")


@dataclass(frozen=True)
class ClassifiedManifest:
    """Style and script file names in manifest order."""

    styles: tuple[str, ...]
    scripts: tuple[str, ...]


def _entry_flag(value: ManifestValue) -> bool:
    """Return ``True`` only when the entry flag is exactly ``True``."""
    if value is None:
        return False
    if isinstance(value, Mapping):
        lookup = value.get
    else:
        def lookup(key: str) -> object:
            return getattr(value, key, None)

    for key in _ENTRY_FLAG_KEYS:
        flag = lookup(key)
        if flag is not None:
            return flag is True
    return False


def normalize_manifest(manifest: RawManifest | None) -> dict[str, ManifestEntry]:
    """Coerce raw bundler metadata into manifest entries.

    Parameters
    ----------
    manifest : Mapping[str, object] | None
        Emitted file name mapped to a ``ManifestEntry``, a mapping carrying
        ``isEntry``, or any object exposing an ``isEntry``/``is_entry``
        attribute. Other keys are ignored; a flag other than ``True`` marks
        the file as a non-entry.

    Returns
    -------
    dict[str, ManifestEntry]
        Entries keyed by file name, in manifest iteration order.
    """
    entries: dict[str, ManifestEntry] = {}
    for file_name, value in (manifest or {}).items():
        if isinstance(value, ManifestEntry):
            entries[file_name] = value
            continue
        entries[file_name] = ManifestEntry(
            file_name=file_name, is_entry=_entry_flag(value)
        )
    return entries


def _extension(file_name: str) -> str:
    return PurePosixPath(file_name).suffix


def classify_manifest(manifest: RawManifest | None) -> ClassifiedManifest:
    """Partition manifest keys into ``.css`` styles and ``.js`` scripts."""
    names = list(manifest or {})
    classified = ClassifiedManifest(
        styles=tuple(n for n in names if _extension(n) == STYLE_EXTENSION),
        scripts=tuple(n for n in names if _extension(n) == SCRIPT_EXTENSION),
    )
    logger.debug(
        "classified %d styles and %d scripts out of %d manifest entries",
        len(classified.styles),
        len(classified.scripts),
        len(names),
    )
    return classified


def get_entry_points(manifest: RawManifest | None) -> list[str]:
    """Return manifest keys flagged as entry points, in manifest order."""
    return [
        name
        for name, entry in normalize_manifest(manifest).items()
        if entry.is_entry
    ]
