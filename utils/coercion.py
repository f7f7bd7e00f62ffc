"""
Cell value coercion shared by the reader and the writer.

The only typing signal a sheet carries is its labels: a table header or a
list key containing ``"epoch"`` marks a column / value holding epoch
milliseconds, which is stored in the sheet as a date string.

  read   ISO-8601 string under an epoch label        -> epoch millis
         ``MM/dd/yyyy`` string under any other header -> epoch millis (tables only)
  write  number under an epoch header                -> ``yyyy-MM-dd'T'HH:mm:ssXXX``
         number under an epoch key                   -> ``yyyy-MM-dd HH:mm:ss``

Date cells (openpyxl ``date``/``datetime``) become epoch millis under an
epoch label and ISO-8601 text elsewhere.  Other non-string cells are never
touched on read.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from utils.constants import (
    DEFAULT_PRINT_PATTERN,
    EPOCH_MARKER,
    TABLE_DATE_PATTERN,
    TABLE_EPOCH_PATTERN,
)
from utils.dates import (
    format_date,
    format_iso,
    is_iso_datetime,
    localize,
    parse_date,
    parse_iso,
    to_epoch_millis,
)


def is_epoch_label(label: Any) -> bool:
    return isinstance(label, str) and EPOCH_MARKER in label


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def cell_text(value: Any) -> str:
    """Text of a cell used as a label: dates as ISO-8601, the rest via ``str``."""
    if isinstance(value, date):
        return format_iso(value)
    return str(value)


def _read_date(label: Any, value: date) -> Any:
    if is_epoch_label(label):
        return to_epoch_millis(localize(value))
    return format_iso(value)


# ---------------------------------------------------------------------------
# Read direction
# ---------------------------------------------------------------------------


def read_table_cell(label: Any, cell: Any) -> Any:
    """Coerce a table body cell read from the sheet, given its header label."""
    if isinstance(cell, date):
        return _read_date(label, cell)
    if not isinstance(cell, str):
        return cell

    text = cell.strip()
    if is_epoch_label(label):
        return parse_iso(text) if is_iso_datetime(text) else cell

    millis = parse_date(text, TABLE_DATE_PATTERN)
    return millis if millis is not None else cell


def read_item_value(key: Any, value: Any) -> Any:
    """Coerce a list item value read from the sheet, given its key."""
    if isinstance(value, date):
        return _read_date(key, value)
    if is_epoch_label(key) and isinstance(value, str):
        text = value.strip()
        if is_iso_datetime(text):
            return parse_iso(text)
    return value


# ---------------------------------------------------------------------------
# Write direction
# ---------------------------------------------------------------------------


def write_table_cell(label: Any, value: Any) -> Any:
    if is_epoch_label(label) and is_number(value):
        return format_date(value, TABLE_EPOCH_PATTERN)
    return value


def write_item_value(key: Any, value: Any) -> Any:
    if is_epoch_label(key) and is_number(value):
        return format_date(value, DEFAULT_PRINT_PATTERN)
    return value
