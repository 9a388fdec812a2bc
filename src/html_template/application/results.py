"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InjectionResult:
    """Structured injection outcome."""

    output_path: Path
    styles: tuple[str, ...] = ()
    scripts: tuple[str, ...] = ()
