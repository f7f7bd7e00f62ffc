"""
SheetExtractor — the per-sheet orchestrator of the read path.

Responsibilities:
  1. Split the sheet's raw rows into spans at blank rows.
  2. Check each span starts with a textual block name.
  3. Run the detector chain (List → Table) on each span.
  4. Return the blocks, in row order, as a ``Sheet``.

Any failure is reported as a ``ConversionError``; a sheet is converted
completely or not at all.
"""

from __future__ import annotations

import logging
from typing import List

from detection import ListDetector, TableDetector, segment
from detection.base import Detector
from dto.blocks import Block
from dto.span import BlockSpan, Grid
from dto.workbook import Sheet
from errors import ConversionError

logger = logging.getLogger(__name__)


class SheetExtractor:
    """
    Extracts all blocks from a single sheet's raw rows.

    Usage::

        extractor = SheetExtractor()
        sheet = extractor.extract("Summary", rows)
    """

    # The canonical detector chain, evaluated in this order.
    # The first detector that returns a Block wins.
    _DETECTORS: List[Detector] = [
        ListDetector(),
        TableDetector(),
    ]

    def _run_detection(self, span: BlockSpan) -> Block:
        name = span.name
        if not isinstance(name, str):
            raise ValueError(
                f"block name in row {span.begin + 1} must be text, got {name!r}"
            )

        for detector in self._DETECTORS:
            block = detector.detect(span)
            if block is not None:
                return block

        raise ValueError(f"no detector matched block {name!r}")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, sheet_name: str, grid: Grid) -> Sheet:
        """
        Convert one sheet.

        Args:
            sheet_name: The sheet (tab) title; becomes ``Sheet.name``.
            grid: The sheet's rows, top to bottom, blank rows included.
        """
        try:
            blocks = [self._run_detection(span) for span in segment(grid)]
            return Sheet(name=sheet_name, blocks=blocks)
        except ConversionError:
            raise
        except Exception as exc:
            logger.error("Failed to process sheet '%s'", sheet_name)
            raise ConversionError(str(exc), unit="sheet", name=sheet_name) from exc
