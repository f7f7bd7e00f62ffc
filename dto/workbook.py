"""
Top-level DTOs of the document model.

    Workbook
      └─ sheets: List[Sheet]
           └─ blocks: List[Block]      (TableBlock | ListBlock)

``Workbook.to_json`` / ``Workbook.from_json`` are the JSON interchange entry
points; ``version`` selects the list-items wire shape (see ``dto.blocks``).
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from dto.blocks import Block
from dto.entity import (
    Entity,
    EntityType,
    at_index,
    find_index_by_name,
)
from errors import RangeError


class Sheet(Entity):
    """A worksheet: an ordered list of blocks.  ``name`` is the tab title."""

    entity: Literal["sheet"] = Field(default="sheet", alias="@entity", frozen=True)
    name: str = Field(default=EntityType.SHEET.value, frozen=True)
    blocks: List[Block] = []

    def get_blocks(self) -> List[Block]:
        return self.blocks

    def get_block_by_index(self, index: int) -> Block:
        return at_index(self.blocks, index)

    def get_block(self, name: str) -> Optional[Block]:
        i = find_index_by_name(self.blocks, name)
        return None if i is None else self.blocks[i]

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)

    def replace_block(self, block: Block) -> None:
        i = find_index_by_name(self.blocks, block.get_name())
        if i is not None:
            self.blocks[i] = block

    def remove_block(self, name: str) -> None:
        i = find_index_by_name(self.blocks, name)
        if i is not None:
            del self.blocks[i]

    def length(self) -> int:
        return len(self.blocks)

    def __len__(self) -> int:
        return self.length()


class Workbook(Entity):
    """Top-level document: an ordered list of sheets."""

    entity: Literal["workbook"] = Field(default="workbook", alias="@entity", frozen=True)
    name: str = Field(default=EntityType.WORKBOOK.value, frozen=True)
    sheets: List[Sheet] = []

    def get_sheets(self) -> List[Sheet]:
        return self.sheets

    def get_sheet_by_index(self, index: int) -> Sheet:
        return at_index(self.sheets, index)

    def get_sheet(self, name: str) -> Optional[Sheet]:
        i = find_index_by_name(self.sheets, name)
        return None if i is None else self.sheets[i]

    def add_sheet(self, sheet: Sheet) -> None:
        self.sheets.append(sheet)

    def replace_sheet(self, sheet: Sheet) -> None:
        i = find_index_by_name(self.sheets, sheet.get_name())
        if i is not None:
            self.sheets[i] = sheet

    def remove_sheet(self, name: str) -> None:
        i = find_index_by_name(self.sheets, name)
        if i is None:
            raise RangeError(f"Sheet with name '{name}' not found")
        del self.sheets[i]

    def length(self) -> int:
        return len(self.sheets)

    def __len__(self) -> int:
        return self.length()

    # ------------------------------------------------------------------
    # JSON interchange
    # ------------------------------------------------------------------

    def to_json(self, version: Optional[int] = None) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, context={"version": version})

    def to_json_string(self, version: Optional[int] = None, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_json(version), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, data: Dict[str, Any], version: Optional[int] = None) -> "Workbook":
        return cls.model_validate(data, context={"version": version})

    @classmethod
    def from_json_string(cls, text: Union[str, bytes], version: Optional[int] = None) -> "Workbook":
        return cls.from_json(json.loads(text), version)

    # ------------------------------------------------------------------
    # XLSX
    # ------------------------------------------------------------------

    @classmethod
    def from_xlsx(cls, source: Any) -> "Workbook":
        """Read an ``.xlsx`` (bytes, file object or path) into a workbook."""
        from extractors.workbook import read_workbook

        return read_workbook(source, workbook_cls=cls)

    @staticmethod
    def to_xlsx(workbook: "Workbook") -> bytes:
        """Write *workbook* out as ``.xlsx`` bytes."""
        from writers.workbook import workbook_to_bytes

        return workbook_to_bytes(workbook)
