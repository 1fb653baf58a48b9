from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from core.domain import EntityKind


@dataclass(frozen=True)
class ExportContext:
    kind: EntityKind
    columns: tuple[str, ...]
    rows: tuple[dict[str, Any], ...]
    generated_at: datetime


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    payload: bytes
    media_type: str
    row_count: int


__all__ = ["ExportContext", "ExportArtifact"]
