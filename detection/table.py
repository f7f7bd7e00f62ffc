"""
Detector for table blocks.

Layout of a table span:

    row begin       name
    row begin + 1   header labels
    row begin + 2…  data rows

Rules:
  - Only string cells of the header row become labels (stripped); anything
    else on that row (numbers, date cells) is skipped, so the header may be
    shorter than the row.
  - Each data row is read up to the header length; string and date cells go
    through the coercion rules keyed on their column label, other cells are
    kept.
  - This is the **default / fallback** detector — any span the other
    detectors pass on is a table.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from detection.base import Detector
from dto.blocks import Block, TableBlock
from dto.span import BlockSpan
from errors import ConversionError
from utils.coercion import read_table_cell

logger = logging.getLogger(__name__)


class TableDetector(Detector):

    @staticmethod
    def _read_header(cells: List[Any]) -> List[str]:
        return [cell.strip() for cell in cells if isinstance(cell, str)]

    @staticmethod
    def _read_row(header: List[str], cells: List[Any]) -> List[Any]:
        values: List[Any] = []
        for j, label in enumerate(header):
            cell = cells[j] if j < len(cells) else None
            values.append(read_table_cell(label, cell))
        return values

    def detect(self, span: BlockSpan) -> Optional[Block]:
        name = span.name
        try:
            header_row = span.begin + 1
            header = self._read_header(span.row_at(header_row))
            rows = [
                self._read_row(header, span.row_at(r))
                for r in range(header_row + 1, span.end + 1)
            ]
            block = TableBlock(name=name, header=header, rows=rows)
        except Exception as exc:
            logger.error("Failed to parse table %r (rows %d-%d)", name, span.begin, span.end)
            raise ConversionError(str(exc), unit="table", name=name) from exc

        logger.debug(
            "  table %r: %d column(s), %d row(s)", name, len(block.header), len(block.rows)
        )
        return block
