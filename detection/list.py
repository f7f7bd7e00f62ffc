"""
Detector for list (key-value) blocks.

A span is a list when its name ends with ``"list"`` (case-insensitive).
This is a naming convention, not a type tag: a table named "Price List"
is read as a list.

Layout of a list span:

    row begin       label row (name, possibly more cells)
    row begin + 1…  key | value

Rules:
  - The label row is concatenated into a label that is only logged.
  - A row becomes an ``Item`` only when both its key and value cells are
    non-null; other rows are skipped without error.
  - An ISO-8601 value under a key containing ``"epoch"`` becomes epoch
    milliseconds.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from detection.base import Detector
from dto.blocks import Block, ListBlock
from dto.item import Item
from dto.span import BlockSpan
from errors import ConversionError
from utils.coercion import cell_text, read_item_value
from utils.constants import LIST_SUFFIX

logger = logging.getLogger(__name__)


def _is_list_name(name: str) -> bool:
    return name.lower().endswith(LIST_SUFFIX)


class ListDetector(Detector):

    def detect(self, span: BlockSpan) -> Optional[Block]:
        name = span.name
        if not _is_list_name(name):
            return None

        try:
            label = "".join(
                "" if cell is None else cell_text(cell) for cell in span.row_at(span.begin)
            )
            logger.debug("  list label row: %r", label)

            items: List[Item] = []
            skipped = 0
            for r in range(span.begin + 1, span.end + 1):
                key = span.cell_at(r, 0)
                value = span.cell_at(r, 1)
                if key is None or value is None:
                    skipped += 1
                    continue
                key = cell_text(key)
                items.append(Item(key, read_item_value(key, value)))

            block = ListBlock(name=name, items=items)
        except Exception as exc:
            logger.error("Failed to parse list %r (rows %d-%d)", name, span.begin, span.end)
            raise ConversionError(str(exc), unit="list", name=name) from exc

        logger.debug("  list %r: %d item(s), %d row(s) skipped", name, len(items), skipped)
        return block
