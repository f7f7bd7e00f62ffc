"""
Write path: ``Workbook`` → ``.xlsx``.

Each sheet is laid out by the ``SheetWriter`` and copied cell by cell into a
new openpyxl worksheet.  The document title property is set to the
workbook's name.
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Any, List, Tuple, Union

import openpyxl

from dto.workbook import Sheet, Workbook
from errors import ConversionError
from writers.sheet import SheetWriter, sheet_title

logger = logging.getLogger(__name__)


def _excel_value(value: Any) -> Any:
    """Nested JSON values have no cell type of their own; store them as JSON text."""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return value


def _sheet_rows(writer: SheetWriter, sheet: Sheet) -> List[List[Any]]:
    try:
        return writer.write(sheet)
    except Exception as exc:
        logger.error("Failed to lay out sheet '%s'", sheet.get_name())
        raise ConversionError(str(exc), unit="sheet", name=sheet.get_name()) from exc


def write_grids(workbook: Workbook) -> List[Tuple[str, List[List[Any]]]]:
    """``(tab title, rows)`` for every sheet, in order."""
    writer = SheetWriter()
    return [
        (sheet_title(sheet.get_name(), position), _sheet_rows(writer, sheet))
        for position, sheet in enumerate(workbook.get_sheets())
    ]


def write_workbook(workbook: Workbook) -> openpyxl.Workbook:
    """
    Build an openpyxl workbook holding every sheet of *workbook*.

    Raises ``ConversionError`` when the workbook has no sheets, when two
    sheets end up with the same tab title, or when a sheet cannot be written.
    """
    if not workbook.get_sheets():
        raise ConversionError("workbook has no sheets", unit="workbook")

    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    wb.properties.title = workbook.get_name()

    writer = SheetWriter()
    titles = set()
    for position, sheet in enumerate(workbook.get_sheets()):
        title = sheet_title(sheet.get_name(), position)
        # Excel tab titles are case-insensitive
        if title.lower() in titles:
            raise ConversionError(
                f"duplicate sheet title '{title}'", unit="sheet", name=sheet.get_name()
            )
        titles.add(title.lower())

        logger.info("Writing sheet: %s", title)
        rows = _sheet_rows(writer, sheet)
        try:
            ws = wb.create_sheet(title=title)
            for r, row in enumerate(rows, start=1):
                for c, value in enumerate(row, start=1):
                    if value is None:
                        continue
                    cell = ws.cell(row=r, column=c, value=_excel_value(value))
                    if isinstance(value, str) and value.startswith("="):
                        # literal text, not a formula
                        cell.data_type = "s"
        except Exception as exc:
            logger.error("Failed to write sheet '%s'", sheet.get_name())
            raise ConversionError(str(exc), unit="sheet", name=sheet.get_name()) from exc

    return wb


def workbook_to_bytes(workbook: Workbook) -> bytes:
    """Return *workbook* as raw ``.xlsx`` bytes."""
    wb = write_workbook(workbook)
    buf = io.BytesIO()
    wb.save(buf)
    wb.close()

    xlsx_bytes = buf.getvalue()
    logger.info("  Workbook '%s': %d bytes", workbook.get_name(), len(xlsx_bytes))
    return xlsx_bytes


def save_workbook(workbook: Workbook, path: Union[str, Path]) -> None:
    Path(path).write_bytes(workbook_to_bytes(workbook))
