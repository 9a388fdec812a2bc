"""Filesystem reader and writer adapters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent import futures
from pathlib import Path

from html_template.errors import AssetReadError, TemplateReadError, WriteError

logger = logging.getLogger(__name__)


class FileSystemReader:
    """Read templates and emitted bundle files from disk.

    Asset batches are read concurrently on a thread pool and joined before
    returning; the first failure cancels whatever has not started yet.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        self._max_workers = max_workers

    def read_template(self, template_path: Path) -> bytes:
        """Read the template file.

        Raises
        ------
        TemplateReadError
            If the file is missing or unreadable.
        """
        try:
            return template_path.read_bytes()
        except OSError as exc:
            raise TemplateReadError(
                f"Unable to read template {template_path}: {exc}"
            ) from exc

    def read_assets(self, paths: Sequence[Path]) -> list[bytes]:
        """Read every path concurrently and return contents in input order.

        Raises
        ------
        AssetReadError
            If any single file cannot be read.
        """
        if not paths:
            return []

        pool = futures.ThreadPoolExecutor(max_workers=self._max_workers)
        try:
            pending = [(path, pool.submit(path.read_bytes)) for path in paths]
            contents: list[bytes] = []
            for path, future in pending:
                try:
                    contents.append(future.result())
                except OSError as exc:
                    raise AssetReadError(
                        f"Unable to read asset {path} for inlining: {exc}"
                    ) from exc
        finally:
            pool.shutdown(wait=True, cancel_futures=True)
        logger.debug("read %d assets", len(contents))
        return contents


class FileSystemWriter:
    """Write the generated document, creating parent directories."""

    def write(self, target_path: Path, document: str) -> Path:
        """Overwrite ``target_path`` with the UTF-8 encoded document.

        Raises
        ------
        WriteError
            If the directory or file cannot be created.
        """
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_bytes(document.encode("utf-8"))
        except OSError as exc:
            raise WriteError(f"Unable to write {target_path}: {exc}") from exc
        logger.info("wrote HTML document %s", target_path)
        return target_path
