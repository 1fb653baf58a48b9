from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from core.reporting.contexts import ExportContext


class ExcelViewRenderer:
    """Writes one filtered view as a single worksheet with a styled header row."""

    def render(self, ctx: ExportContext) -> bytes:
        wb = Workbook()

        header_font = Font(bold=True)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")

        ws = wb.active
        ws.title = ctx.kind.value.title()

        for col, name in enumerate(ctx.columns, start=1):
            cell = ws.cell(row=1, column=col, value=name)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = thin_border

        for row_idx, row in enumerate(ctx.rows, start=2):
            for col, name in enumerate(ctx.columns, start=1):
                cell = ws.cell(row=row_idx, column=col, value=row.get(name))
                cell.border = thin_border

        for col, name in enumerate(ctx.columns, start=1):
            longest = max([len(str(name))] + [len(str(r.get(name) or "")) for r in ctx.rows])
            ws.column_dimensions[get_column_letter(col)].width = min(60, max(12, longest + 2))
        ws.freeze_panes = "A2"

        ws_meta = wb.create_sheet("Export")
        ws_meta["A1"] = "Generated (UTC)"
        ws_meta["B1"] = ctx.generated_at.isoformat()
        ws_meta["A2"] = "Rows"
        ws_meta["B2"] = len(ctx.rows)
        ws_meta["A1"].font = header_font
        ws_meta["A2"].font = header_font
        ws_meta.column_dimensions["A"].width = 20
        ws_meta.column_dimensions["B"].width = 34

        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
