"""
Block DTOs: the two kinds of block a sheet is made of.

  - ``TableBlock`` — a header row and data rows.
  - ``ListBlock``  — ordered key/value ``Item``s.

Blocks are told apart by their ``@entity`` discriminator when the document is
loaded from JSON.  List items have two wire shapes, selected by the
serialization ``version`` passed through the pydantic context:

    version None or >= 6   [{"a": 1}, {"b": 2}]
    version < 6 (legacy)   [["a", 1], ["b", 2]]
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    SerializationInfo,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from dto.entity import Entity, EntityType, JSONValue, check_index, check_name
from dto.item import Item
from errors import RangeError
from utils.constants import LEGACY_ITEMS_VERSION

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Items wire shapes
# -------------------------------------------------------------------


def is_legacy_version(version: Optional[int]) -> bool:
    return version is not None and version < LEGACY_ITEMS_VERSION


def context_version(context: Optional[Dict[str, Any]]) -> Optional[int]:
    if not context:
        return None
    return context.get("version")


def dump_items(items: Iterable[Item], version: Optional[int] = None) -> List[Any]:
    if is_legacy_version(version):
        return [[item.key, item.value] for item in items]
    return [{item.key: item.value} for item in items]


def load_items(raw: Any, version: Optional[int] = None) -> List[Item]:
    """
    Build ``Item``s from either wire shape.  Entries that do not have the
    shape *version* asks for are dropped.
    """
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        logger.warning("List items are not an array (%s) — ignoring", type(raw).__name__)
        return []

    legacy = is_legacy_version(version)
    items: List[Item] = []
    for entry in raw:
        if isinstance(entry, Item):
            items.append(entry)
        elif legacy:
            if isinstance(entry, (list, tuple)) and len(entry) == 2:
                items.append(Item(entry[0], entry[1]))
        elif isinstance(entry, dict) and entry:
            key, value = next(iter(entry.items()))
            items.append(Item(key, value))
    return items


# -------------------------------------------------------------------
# Column (read-only view over a table)
# -------------------------------------------------------------------


class Column(BaseModel):
    header: str
    values: List[JSONValue] = []

    def get_column_header(self) -> str:
        return self.header


# -------------------------------------------------------------------
# Concrete block types
# -------------------------------------------------------------------


def _at(rows: list, index: Any) -> int:
    index = check_index(index)
    if not 0 <= index < len(rows):
        raise RangeError(f"Index out of bounds: {index}")
    return index


class TableBlock(Entity):
    entity: Literal["table"] = Field(default="table", alias="@entity", frozen=True)
    name: str = Field(default=EntityType.TABLE.value, frozen=True)
    header: List[str] = []
    rows: List[List[JSONValue]] = []

    def get_header(self) -> List[str]:
        return self.header

    def set_header(self, header: List[str]) -> None:
        self.header = header

    def get_rows(self) -> List[List[JSONValue]]:
        return self.rows

    def get_row(self, index: int) -> List[JSONValue]:
        """A copy of the row at *index*."""
        return list(self.rows[_at(self.rows, index)])

    def add_row(self, row: List[JSONValue]) -> None:
        self.rows.append(row)

    def add_rows(self, rows: Iterable[List[JSONValue]]) -> None:
        self.rows.extend(rows)

    def pop_row(self) -> None:
        if self.rows:
            self.rows.pop()

    def replace_row(self, index: int, row: List[JSONValue]) -> None:
        """Replace the row at *index*; past the end, the row is appended."""
        index = check_index(index)
        if index < 0:
            index = max(len(self.rows) + index, 0)
        self.rows[index:index + 1] = [row]

    def remove_row(self, index: int) -> None:
        del self.rows[_at(self.rows, index)]

    def get_columns(self) -> List[Column]:
        return [
            Column(
                header=label,
                values=[row[i] if i < len(row) else None for row in self.rows],
            )
            for i, label in enumerate(self.header)
        ]

    def length(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return self.length()


class ListBlock(Entity):
    entity: Literal["list"] = Field(default="list", alias="@entity", frozen=True)
    name: str = Field(default=EntityType.LIST.value, frozen=True)
    items: List[Item] = []

    @field_validator("items", mode="before")
    @classmethod
    def _load_items(cls, value: Any, info: ValidationInfo) -> List[Item]:
        return load_items(value, context_version(info.context))

    @field_serializer("items")
    def _dump_items(self, items: List[Item], info: SerializationInfo) -> List[Any]:
        return dump_items(items, context_version(info.context))

    def get_items(self) -> List[Item]:
        return self.items

    def get_item(self, key: str) -> Optional[Item]:
        """First item whose key matches *key* case-insensitively."""
        wanted = check_name(key).lower()
        for item in self.items:
            if item.key.lower() == wanted:
                return item
        return None

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def add_items(self, items: Iterable[Item]) -> None:
        self.items.extend(items)

    def replace_item(self, item: Item) -> None:
        """Swap in *item* for the first item with exactly the same key."""
        for i, existing in enumerate(self.items):
            if existing.key == item.key:
                self.items[i] = item
                return

    def remove_item(self, index: int) -> None:
        """Remove by position; negative positions count from the end."""
        index = check_index(index)
        if -len(self.items) <= index < len(self.items):
            del self.items[index]

    def remove_item_by_key(self, key: str) -> None:
        """Remove every item whose key matches *key* case-insensitively."""
        wanted = check_name(key).lower()
        self.items = [item for item in self.items if item.key.lower() != wanted]

    def length(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return self.length()


# -------------------------------------------------------------------
# Discriminated union  (for serialisation / Pydantic parsing)
# -------------------------------------------------------------------

Block = Annotated[Union[TableBlock, ListBlock], Field(discriminator="entity")]
