"""
SheetWriter — lays a ``Sheet`` out as a raw row grid, the inverse of the
``SheetExtractor``.

Every block starts at column A:

    table   [name] / header / data rows
    list    [name] / [key, value] per item

and is followed by two blank rows.  Epoch-tagged numbers are printed as
dates on the way out (see ``utils.coercion``).
"""

from __future__ import annotations

import logging
from typing import Any, List

from dto.blocks import Block, ListBlock, TableBlock
from dto.workbook import Sheet
from utils.coercion import write_item_value, write_table_cell
from utils.constants import BLOCK_SPACING, MAX_SHEET_TITLE

logger = logging.getLogger(__name__)


def sheet_title(name: str, position: int = 0) -> str:
    """
    Tab title for a sheet: the part of *name* after its last ``.``, cut to
    its last 31 characters.  Falls back to ``sheet_<position>`` when empty.
    """
    title = name.split(".")[-1][-MAX_SHEET_TITLE:]
    return title or f"sheet_{position}"


class SheetWriter:

    @staticmethod
    def _table_rows(table: TableBlock) -> List[List[Any]]:
        header = table.get_header()
        rows: List[List[Any]] = [[table.get_name()], list(header)]
        for row in table.get_rows():
            rows.append(
                [
                    write_table_cell(header[i] if i < len(header) else None, value)
                    for i, value in enumerate(row)
                ]
            )
        return rows

    @staticmethod
    def _list_rows(block: ListBlock) -> List[List[Any]]:
        rows: List[List[Any]] = [[block.get_name()]]
        for item in block.get_items():
            rows.append([item.key, write_item_value(item.key, item.value)])
        return rows

    def _block_rows(self, block: Block) -> List[List[Any]]:
        if isinstance(block, TableBlock):
            return self._table_rows(block)
        if isinstance(block, ListBlock):
            return self._list_rows(block)
        raise TypeError(f"Unsupported block type: {type(block).__name__}")

    def write(self, sheet: Sheet) -> List[List[Any]]:
        """Return the sheet's rows, top to bottom, blank rows as ``[]``."""
        rows: List[List[Any]] = []
        for block in sheet.get_blocks():
            rows.extend(self._block_rows(block))
            rows.extend([] for _ in range(BLOCK_SPACING))
        logger.debug("  sheet '%s': %d row(s)", sheet.get_name(), len(rows))
        return rows
