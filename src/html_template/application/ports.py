"""Application ports for filesystem boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class TemplateReader(Protocol):
    """Read raw template bytes."""

    def read_template(self, template_path: Path) -> bytes:
        """Return template content; raise ``TemplateReadError`` on failure."""


class AssetReader(Protocol):
    """Read a batch of emitted bundle files."""

    def read_assets(self, paths: Sequence[Path]) -> list[bytes]:
        """Return contents in ``paths`` order; raise ``AssetReadError`` if any read fails."""


class DocumentWriter(Protocol):
    """Persist the generated document."""

    def write(self, target_path: Path, document: str) -> Path:
        """Overwrite ``target_path`` with ``document``; raise ``WriteError`` on failure."""
