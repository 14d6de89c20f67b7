#!/usr/bin/env python3
"""
Utility helpers for writing parse reports as Excel workbooks.

Thin wrappers around openpyxl: a header row, auto-width columns, a striped
table over the data and an optional yellow fill on rows a predicate flags
(round-trip failures in the parse report).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo


RowPredicate = Callable[[Sequence[Any]], bool]

MAX_COLUMN_WIDTH = 60


@dataclass(frozen=True)
class ExcelSheetData:
    """
    Describes a sheet to be written to the workbook.

    Attributes:
        name: Sheet/tab name.
        headers: Ordered list of column headers.
        rows: Row values already ordered to match headers.
        highlight_row: Optional predicate; matching rows get a yellow fill.
        as_table: Whether to wrap the data in a styled Excel table.
    """

    name: str
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    highlight_row: Optional[RowPredicate] = None
    as_table: bool = True


def _write_excel_sheet(ws, sheet: ExcelSheetData) -> None:
    """Render a single sheet: bold headers, data rows, widths, table."""
    ws.title = sheet.name

    headers = list(sheet.headers)
    header_font = Font(bold=True)
    for col_idx, header in enumerate(headers, 1):
        ws.cell(row=1, column=col_idx, value=header).font = header_font

    yellow_fill = PatternFill(start_color="FFFF00", end_color="FFFF00", fill_type="solid")

    for row_idx, row in enumerate(sheet.rows, 2):
        highlight = sheet.highlight_row is not None and sheet.highlight_row(row)
        for col_idx, value in enumerate(row, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if highlight:
                cell.fill = yellow_fill

    for col_idx in range(1, len(headers) + 1):
        col_letter = get_column_letter(col_idx)
        max_length = len(headers[col_idx - 1])

        for cell in ws[col_letter]:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))

        ws.column_dimensions[col_letter].width = min(max_length + 2, MAX_COLUMN_WIDTH)

    if sheet.as_table and sheet.rows:
        last_col = get_column_letter(len(headers))
        table = Table(
            displayName=sheet.name.replace(" ", "") + "Table",
            ref=f"A1:{last_col}{len(sheet.rows) + 1}",
        )
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9",
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        ws.add_table(table)


def write_excel_workbook(output_path: Path | str, sheets: Sequence[ExcelSheetData]) -> Path:
    """
    Write a workbook consisting of the provided sheets.

    Args:
        output_path: Destination path for the workbook.
        sheets: Ordered sheet definitions to render.

    Returns:
        Path to the written workbook.
    """
    if not sheets:
        raise ValueError("At least one sheet must be provided to write a workbook.")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    for idx, sheet in enumerate(sheets):
        ws = wb.active if idx == 0 else wb.create_sheet()
        _write_excel_sheet(ws, sheet)

    wb.save(output_path)
    return output_path


def read_excel_column(
    input_path: Path | str,
    column: str,
    sheet_name: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Read the non-empty values of a named column (header matched case-insensitively).

    Raises:
        ValueError: If the sheet or the column cannot be found.
    """
    wb = load_workbook(input_path, read_only=True)
    try:
        if sheet_name:
            if sheet_name not in wb.sheetnames:
                raise ValueError(f"Could not find '{sheet_name}' sheet in Excel file. Sheets present: {wb.sheetnames}")
            ws = wb[sheet_name]
        else:
            ws = wb.active

        if ws is None:
            raise ValueError("Excel file has no usable worksheet")

        header_row = next(ws.iter_rows(min_row=1, max_row=1, values_only=True), ())
        headers = [str(header).strip().lower() if header is not None else "" for header in header_row]
        if column.lower() not in headers:
            raise ValueError(f"Could not find '{column}' column in Excel file")
        col_idx = headers.index(column.lower())

        values: List[str] = []
        for row in ws.iter_rows(min_row=2, values_only=True):
            if row and col_idx < len(row) and row[col_idx] is not None and str(row[col_idx]) != "":
                values.append(str(row[col_idx]))
                if limit and len(values) >= limit:
                    break
        return values
    finally:
        wb.close()
