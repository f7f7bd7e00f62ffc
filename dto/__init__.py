"""
Document model: Workbook → Sheet → Block (TableBlock | ListBlock).
"""

from dto.blocks import Block, Column, ListBlock, TableBlock
from dto.entity import EntityType
from dto.item import Item
from dto.workbook import Sheet, Workbook

__all__ = [
    "Block",
    "Column",
    "EntityType",
    "Item",
    "ListBlock",
    "Sheet",
    "TableBlock",
    "Workbook",
]
