"""Shared type aliases and protocols for injection modules."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, TypeAlias

PathLike: TypeAlias = str | Path
ReplaceVars: TypeAlias = Mapping[str, str]


class ManifestEntryLike(Protocol):
    """Marker protocol for bundler chunk/asset metadata objects."""


ManifestValue: TypeAlias = Mapping[str, object] | ManifestEntryLike | None
RawManifest: TypeAlias = Mapping[str, ManifestValue]
