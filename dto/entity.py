"""
Base DTO shared by every node of the document model.

Each entity carries:
  - ``@entity``  — the kind discriminator (``workbook``, ``sheet``, ``table``,
                   ``list``); fixed per class.
  - ``name``     — a label, fixed once the entity is built.  Defaults to the
                   entity kind.
  - ``metadata`` — an open JSON object that round-trips untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from errors import RangeError

JSONValue = Any


class EntityType(str, Enum):
    WORKBOOK = "workbook"
    SHEET = "sheet"
    BLOCK = "block"
    TABLE = "table"
    LIST = "list"


class Entity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entity: str = Field(default=EntityType.BLOCK.value, alias="@entity", frozen=True)
    name: str = Field(default=EntityType.BLOCK.value, frozen=True)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _default_metadata(cls, value: Any) -> Any:
        return {} if value is None else value

    def get_name(self) -> str:
        return self.name

    def get_entity(self) -> str:
        return self.entity

    def get_metadata(self) -> Dict[str, Any]:
        return self.metadata

    def set_metadata(self, value: Dict[str, Any]) -> None:
        self.metadata = value


# ---------------------------------------------------------------------------
# Lookup helpers (shared by Workbook / Sheet)
# ---------------------------------------------------------------------------

E = TypeVar("E", bound=Entity)


def check_index(index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Expected an integer index, got {type(index).__name__}")
    return index


def check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Expected a string name, got {type(name).__name__}")
    return name


def at_index(entities: list, index: Any) -> Any:
    """``entities[index]`` for ``0 <= index < len``, ``RangeError`` otherwise."""
    index = check_index(index)
    if 0 <= index < len(entities):
        return entities[index]
    raise RangeError(f"Index out of bounds: {index}")


def find_index_by_name(entities: Iterable[E], name: Any) -> Optional[int]:
    """Position of the first entity whose name matches case-insensitively."""
    wanted = check_name(name).lower()
    for i, entity in enumerate(entities):
        if entity is not None and entity.get_name().lower() == wanted:
            return i
    return None
