"""
Runtime settings read from the environment (and a ``.env`` file, if any).

  - ``SHEETBOOK_TIMEZONE``      — IANA zone used to parse and print dates
                                  (default ``UTC``)
  - ``SHEETBOOK_ITEMS_VERSION`` — default wire version for list items in the
                                  CLI (unset = current ``{key: value}`` shape)
  - ``SHEETBOOK_LOG_LEVEL``     — CLI log level (default ``INFO``)
"""

from __future__ import annotations

import os
from datetime import timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

import dotenv

dotenv.load_dotenv()


def get_timezone() -> tzinfo:
    name = os.getenv("SHEETBOOK_TIMEZONE", "UTC").strip()
    if name.upper() in ("", "UTC", "Z"):
        return timezone.utc
    return ZoneInfo(name)


def get_items_version() -> Optional[int]:
    raw = os.getenv("SHEETBOOK_ITEMS_VERSION", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SHEETBOOK_ITEMS_VERSION must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    return os.getenv("SHEETBOOK_LOG_LEVEL", "INFO").upper()
