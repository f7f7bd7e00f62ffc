"""
Exceptions raised by the converter and the document model.

  - ``ConversionError`` — a sheet, table or list could not be converted.
  - ``RangeError``      — an index (or a sheet name on removal) is out of range.

Usage errors (wrong key type handed to a lookup) are plain ``TypeError``.
"""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """
    A unit of the workbook (``workbook``, ``sheet``, ``table`` or ``list``)
    failed to convert.  The message carries the unit and the cause, e.g.
    ``Invalid Input Table 'Prices' : <cause>``.
    """

    def __init__(self, cause: str, unit: str = "workbook", name: Optional[str] = None):
        self.unit = unit
        self.name = name
        self.cause = cause
        label = unit.capitalize() if name is None else f"{unit.capitalize()} '{name}'"
        super().__init__(f"Invalid Input {label} : {cause}")


class RangeError(IndexError):
    """Index out of bounds, or ``remove_sheet`` with an unknown name."""
