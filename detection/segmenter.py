"""
Block segmentation — splits a sheet's rows into spans separated by blank rows.

Single forward pass over the rows:
  - a span opens on a non-blank row that follows a blank row (or starts the
    sheet);
  - a span closes on the row before a blank row that follows a non-blank row;
  - a span still open at the end of the sheet runs to the last row.

Runs of blank rows collapse into one boundary, so no empty span is ever
produced and every non-blank row lands in exactly one span.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from dto.span import BlockSpan, Grid, is_blank_row, normalize_row

logger = logging.getLogger(__name__)

_NO_ROW = object()


def find_spans(grid: Grid) -> List[Tuple[int, int]]:
    """Return ``(begin, end)`` row bounds (inclusive) of every block in *grid*."""
    spans: List[Tuple[int, int]] = []
    previous: object = _NO_ROW
    begin: Optional[int] = None
    end: Optional[int] = None

    for index, current in enumerate(grid):
        current_blank = is_blank_row(current)
        previous_blank = previous is _NO_ROW or is_blank_row(previous)

        if previous_blank and not current_blank:
            begin = index
        if not previous_blank and current_blank:
            end = index - 1

        if begin is not None and end is not None:
            spans.append((begin, end))
            begin = end = None

        previous = current

    if begin is not None:
        spans.append((begin, len(grid) - 1))

    return spans


def segment(grid: Grid) -> List[BlockSpan]:
    """Split *grid* into ``BlockSpan``s carrying their (normalised) rows."""
    spans = [
        BlockSpan(
            begin=begin,
            end=end,
            rows=[normalize_row(grid[r]) for r in range(begin, end + 1)],
        )
        for begin, end in find_spans(grid)
    ]
    logger.debug("  %d row(s) -> %d span(s)", len(grid), len(spans))
    return spans
