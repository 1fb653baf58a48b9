# infra/file_saver.py
from __future__ import annotations

import logging
from pathlib import Path

from infra.path import user_data_dir

logger = logging.getLogger(__name__)


class DirectoryFileSaver:
    """Writes export payloads into one directory (default: <user data>/exports)."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self._directory = Path(directory) if directory is not None else user_data_dir() / "exports"

    @property
    def directory(self) -> Path:
        return self._directory

    def save(self, filename: str, payload: bytes) -> Path:
        name = Path(filename).name
        if not name or name != filename:
            raise OSError(f"Refusing to write outside the export directory: {filename!r}")
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._directory / name
        target.write_bytes(payload)
        logger.info("Saved %d byte(s) to %s", len(payload), target)
        return target


__all__ = ["DirectoryFileSaver"]
