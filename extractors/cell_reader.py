"""
Cell reading utilities — turn an openpyxl worksheet into a raw row grid of
cell values.

The workbook is expected to be opened with ``data_only=True`` so formula
cells carry Excel's cached result rather than the formula text.
"""

from __future__ import annotations

import logging
from datetime import time, timedelta
from typing import Any, List

from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Cell reading
# ------------------------------------------------------------------

def read_cell_value(value: Any) -> Any:
    """
    Map an openpyxl cell value onto a grid value.

    Date cells stay ``date``/``datetime`` objects so the header rule can tell
    them from text; ``utils.coercion`` turns them into epoch millis or
    ISO-8601 strings.  Times and durations become text.
    """
    if isinstance(value, time):
        return value.isoformat(timespec="seconds")
    if isinstance(value, timedelta):
        return str(value)
    return value


def read_sheet_rows(ws: Worksheet) -> List[List[Any]]:
    """
    Read every row from ``A1`` to the sheet's last used row and column,
    blank rows included.
    """
    rows: List[List[Any]] = []
    for row in ws.iter_rows(
        min_row=1,
        min_col=1,
        max_row=ws.max_row,
        max_col=ws.max_column,
        values_only=True,
    ):
        rows.append([read_cell_value(v) for v in row])
    logger.debug(
        "  Read %d row(s) x %d column(s) from '%s'", len(rows), ws.max_column, ws.title
    )
    return rows
