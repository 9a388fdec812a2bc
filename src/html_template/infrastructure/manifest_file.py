"""Load a bundle manifest from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from html_template.errors import ConfigurationError


def load_manifest_file(manifest_path: Path) -> dict[str, object]:
    """Read ``{"file name": {"isEntry": bool, ...}}`` preserving key order.

    Raises
    ------
    ConfigurationError
        If the file cannot be read or does not hold a JSON object.
    """
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(
            f"Unable to load manifest {manifest_path}: {exc}"
        ) from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(
            f"Manifest {manifest_path} must contain a JSON object of file names."
        )
    return payload
