"""
BlockSpan: the data packet every detector receives.

A span is one run of consecutive non-blank rows of a sheet, as found by the
segmenter.  It bundles the rows together with their (0-based, inclusive)
bounds so detectors can address cells by absolute row index.

Raw rows come in three shapes — a sequence of cell values, a
``{column index: value}`` mapping, or ``None`` for an absent row — and are
normalised to plain lists here.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

RawRow = Union[Sequence[Any], Mapping[int, Any], None]
Grid = Sequence[RawRow]


def normalize_row(row: RawRow) -> List[Any]:
    """Return *row* as a positional list; missing columns become ``None``."""
    if row is None:
        return []
    if isinstance(row, Mapping):
        if not row:
            return []
        values: List[Any] = [None] * (max(row) + 1)
        for col, value in row.items():
            values[col] = value
        return values
    return list(row)


def is_blank_row(row: RawRow) -> bool:
    """A row is blank when every cell it has is ``None``."""
    return all(cell is None for cell in normalize_row(row))


class BlockSpan(BaseModel):
    """Rows ``begin..end`` (inclusive, 0-based) of a sheet."""

    begin: int
    end: int
    rows: List[List[Any]] = []

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    @property
    def num_rows(self) -> int:
        return self.end - self.begin + 1

    @property
    def name(self) -> Any:
        """Column 0 of the first row: the block name."""
        return self.cell_at(self.begin, 0)

    def row_at(self, row: int) -> List[Any]:
        """Cells of absolute row *row*; empty when outside the span."""
        if not self.begin <= row <= self.end:
            return []
        offset = row - self.begin
        return self.rows[offset] if offset < len(self.rows) else []

    def cell_at(self, row: int, col: int) -> Optional[Any]:
        cells = self.row_at(row)
        return cells[col] if col < len(cells) else None
