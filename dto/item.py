from __future__ import annotations

import json
import math
from typing import Any

from pydantic import BaseModel


def _strict_equal(a: Any, b: Any) -> bool:
    # bool is an int subclass; True must not equal 1.
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


class Item(BaseModel):
    """A single key → value entry of a list block."""

    key: str
    value: Any = None

    def __init__(self, key: str, value: Any = None, **data: Any) -> None:
        super().__init__(key=key, value=value, **data)

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> Any:
        return self.value

    def get_boolean_value(self) -> bool:
        return bool(self.value)

    def get_number_value(self) -> float:
        """The value as a float, ``nan`` when it does not convert."""
        value = self.value
        if value is None:
            return 0.0
        if isinstance(value, str) and not value.strip():
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            return math.nan

    def get_string_value(self) -> str:
        value = self.value
        if value is None or isinstance(value, (bool, dict, list)):
            return json.dumps(value)
        return str(value)

    def __eq__(self, other: object) -> bool:
        """Keys compare case-insensitively, values strictly."""
        if not isinstance(other, Item):
            return NotImplemented
        return self.key.lower() == other.key.lower() and _strict_equal(
            self.value, other.value
        )
