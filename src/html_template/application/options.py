"""Typed option objects for template injection."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InjectionOptions:
    """Options fixed when the post-build hook is constructed."""

    template: Path | None = None
    target: Path | None = None
    prefix: str | None = None
    attrs: tuple[str, ...] = ()
    embed_content: bool = False
    replace_vars: Mapping[str, str] | None = None
