# reporting/exporters.py
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Iterable, Sequence

from core.domain import Budget, EntityKind, Project
from core.exceptions import ValidationError
from core.reporting.contexts import ExportArtifact, ExportContext
from core.reporting.renderers.excel import ExcelViewRenderer

EXPORTABLE_KINDS: dict[EntityKind, type] = {
    EntityKind.BUDGET: Budget,
    EntityKind.PROJECT: Project,
}

JSON_MEDIA_TYPE = "application/json"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def record_to_row(record: Any) -> dict[str, Any]:
    """Dataclass record -> JSON-ready dict with camelCase keys."""
    if not is_dataclass(record):
        raise ValidationError(f"Cannot export {type(record).__name__}.", code="EXPORT_RECORD_INVALID")
    return {camel_case(f.name): _plain(getattr(record, f.name)) for f in fields(record)}


def export_filename(kind: EntityKind, extension: str) -> str:
    return f"{kind.value}-export.{extension}"


def build_context(kind: EntityKind | str, records: Iterable[Any]) -> ExportContext:
    kind = _exportable_kind(kind)
    record_type = EXPORTABLE_KINDS[kind]
    rows: list[dict[str, Any]] = []
    for record in records:
        if not isinstance(record, record_type):
            raise ValidationError(
                f"{kind.value} export received a {type(record).__name__}.",
                code="EXPORT_RECORD_INVALID",
            )
        rows.append(record_to_row(record))
    columns = tuple(camel_case(f.name) for f in fields(record_type))
    return ExportContext(kind=kind, columns=columns, rows=tuple(rows), generated_at=datetime.now(timezone.utc))


def export_json(kind: EntityKind | str, records: Sequence[Any]) -> ExportArtifact:
    ctx = build_context(kind, records)
    text = json.dumps(list(ctx.rows), indent=2, ensure_ascii=False)
    return ExportArtifact(
        filename=export_filename(ctx.kind, "json"),
        payload=text.encode("utf-8"),
        media_type=JSON_MEDIA_TYPE,
        row_count=len(ctx.rows),
    )


def export_excel(kind: EntityKind | str, records: Sequence[Any]) -> ExportArtifact:
    ctx = build_context(kind, records)
    return ExportArtifact(
        filename=export_filename(ctx.kind, "xlsx"),
        payload=ExcelViewRenderer().render(ctx),
        media_type=XLSX_MEDIA_TYPE,
        row_count=len(ctx.rows),
    )


def _exportable_kind(kind: EntityKind | str) -> EntityKind:
    try:
        resolved = EntityKind(kind)
    except ValueError:
        resolved = None
    if resolved not in EXPORTABLE_KINDS:
        raise ValidationError(f"Export is not available for '{kind}'.", code="EXPORT_KIND_UNSUPPORTED")
    return resolved


__all__ = [
    "EXPORTABLE_KINDS",
    "camel_case",
    "record_to_row",
    "export_filename",
    "build_context",
    "export_json",
    "export_excel",
]
