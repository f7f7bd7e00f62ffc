from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import openpyxl
import pytest


@pytest.fixture(autouse=True)
def _utc(monkeypatch):
    """Dates are read and printed in UTC unless a test says otherwise."""
    monkeypatch.delenv("SHEETBOOK_TIMEZONE", raising=False)
    monkeypatch.delenv("SHEETBOOK_ITEMS_VERSION", raising=False)


@pytest.fixture
def make_xlsx(tmp_path: Path):
    """Factory for creating XLSX files with openpyxl from row lists."""

    def _make(
        sheets: Dict[str, List[List[Any]]],
        filename: str = "test.xlsx",
        title: str | None = None,
    ) -> Path:
        wb = openpyxl.Workbook()
        wb.remove(wb.active)
        if title is not None:
            wb.properties.title = title
        for sheet_name, rows in sheets.items():
            ws = wb.create_sheet(sheet_name)
            for r, row in enumerate(rows, start=1):
                for c, value in enumerate(row, start=1):
                    if value is not None:
                        ws.cell(row=r, column=c, value=value)
        path = tmp_path / filename
        wb.save(str(path))
        wb.close()
        return path

    return _make
