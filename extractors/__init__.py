"""
Read path: .xlsx / raw row grids → Workbook.
"""

from extractors.sheet import SheetExtractor
from extractors.workbook import read_grids, read_workbook

__all__ = [
    "SheetExtractor",
    "read_grids",
    "read_workbook",
]
