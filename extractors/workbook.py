"""
Read path: ``.xlsx`` → ``Workbook``.

Loads the file with openpyxl, turns every worksheet into a raw row grid and
hands each grid to the ``SheetExtractor``.  The workbook's ``name`` comes
from the document title property, falling back to the class default.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO, Dict, Mapping, Optional, Type, TypeVar, Union

import openpyxl

from dto.span import Grid
from dto.workbook import Workbook
from errors import ConversionError
from extractors.cell_reader import read_sheet_rows
from extractors.sheet import SheetExtractor

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=Workbook)

Source = Union[bytes, bytearray, BinaryIO, str, Path]


def load_xlsx(source: Source) -> openpyxl.Workbook:
    """Open *source* (bytes, a binary file object or a path) with openpyxl."""
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    return openpyxl.load_workbook(source, data_only=True)


def read_grids(
    grids: Mapping[str, Grid],
    name: Optional[str] = None,
    workbook_cls: Type[W] = Workbook,
) -> W:
    """
    Build a workbook from already-decoded sheets: ``{sheet name: rows}``, in
    sheet order.
    """
    extractor = SheetExtractor()
    sheets = []
    for sheet_name, grid in grids.items():
        logger.info("Processing sheet: %s", sheet_name)
        sheet = extractor.extract(sheet_name, grid)
        logger.info("  -> %d block(s)", len(sheet.blocks))
        sheets.append(sheet)

    fields: Dict[str, Any] = {"sheets": sheets}
    if name:
        fields["name"] = name
    return workbook_cls(**fields)


def read_workbook(source: Source, workbook_cls: Type[W] = Workbook) -> W:
    """
    Parse an ``.xlsx`` document and return a ``Workbook`` (or an instance of
    *workbook_cls*).

    Raises ``ConversionError`` if the file cannot be opened or any sheet
    fails to convert.
    """
    logger.info("Loading workbook")
    try:
        wb = load_xlsx(source)
    except Exception as exc:
        logger.error("Failed to open workbook")
        raise ConversionError(str(exc), unit="workbook") from exc

    try:
        grids = {ws.title: read_sheet_rows(ws) for ws in wb.worksheets}
        title = wb.properties.title
    except Exception as exc:
        raise ConversionError(str(exc), unit="workbook") from exc
    finally:
        wb.close()

    try:
        return read_grids(grids, name=title, workbook_cls=workbook_cls)
    except ConversionError:
        raise
    except Exception as exc:
        raise ConversionError(str(exc), unit="workbook") from exc
