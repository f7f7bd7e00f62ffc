"""
Base class for all block-type detectors.

Each detector answers one question about a ``BlockSpan``: is this span my
kind of block?  If yes it returns the fully-parsed block DTO, otherwise
``None``.  The sheet extractor runs the detectors in order and the first
block returned wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from dto.blocks import Block
from dto.span import BlockSpan


class Detector(ABC):
    """Interface that every block-type detector must implement."""

    @abstractmethod
    def detect(self, span: BlockSpan) -> Optional[Block]:
        """
        Returns the parsed block if the span matches this detector's type,
        or ``None`` if it does not.

        Raises ``ConversionError`` when the span is this detector's type
        but cannot be parsed.
        """
        ...
