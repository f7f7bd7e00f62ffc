"""
Write path: Workbook → raw row grids / .xlsx.
"""

from writers.sheet import SheetWriter, sheet_title
from writers.workbook import workbook_to_bytes, write_grids, write_workbook

__all__ = [
    "SheetWriter",
    "sheet_title",
    "workbook_to_bytes",
    "write_grids",
    "write_workbook",
]
