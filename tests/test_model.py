"""Tests for the document model: items, blocks, sheets and workbooks."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from dto import Column, Item, ListBlock, Sheet, TableBlock, Workbook
from errors import RangeError


class TestItem:
    def test_positional_construction(self):
        item = Item("a", 1)
        assert item.get_key() == "a"
        assert item.get_value() == 1

    def test_keys_compare_case_insensitively(self):
        assert Item("Mode", "fast") == Item("mode", "fast")

    def test_values_compare_strictly(self):
        assert Item("a", 1) != Item("a", True)
        assert Item("a", 0) != Item("a", False)
        assert Item("a", "1") != Item("a", 1)
        assert Item("a", {"x": [1]}) == Item("A", {"x": [1]})

    def test_number_value(self):
        assert Item("a", "2.5").get_number_value() == 2.5
        assert Item("a", 3).get_number_value() == 3.0
        assert Item("a", None).get_number_value() == 0.0
        assert math.isnan(Item("a", "abc").get_number_value())

    def test_string_value(self):
        assert Item("a", 3).get_string_value() == "3"
        assert Item("a", "x").get_string_value() == "x"
        assert Item("a", None).get_string_value() == "null"
        assert Item("a", True).get_string_value() == "true"
        assert Item("a", [1, 2]).get_string_value() == "[1, 2]"

    def test_boolean_value(self):
        assert Item("a", 1).get_boolean_value() is True
        assert Item("a", "").get_boolean_value() is False


class TestListBlock:
    @pytest.fixture
    def block(self):
        return ListBlock(
            name="Settings List",
            items=[Item("mode", "fast"), Item("Retries", 3), Item("mode", "slow")],
        )

    def test_defaults(self):
        block = ListBlock()
        assert block.get_entity() == "list"
        assert block.get_name() == "list"
        assert block.get_metadata() == {}
        assert len(block) == 0

    def test_get_item_is_case_insensitive_first_match(self, block):
        assert block.get_item("MODE").value == "fast"
        assert block.get_item("retries").value == 3
        assert block.get_item("missing") is None

    def test_get_item_needs_text_key(self, block):
        with pytest.raises(TypeError):
            block.get_item(0)

    def test_add_items(self, block):
        block.add_item(Item("x", 1))
        block.add_items([Item("y", 2), Item("z", 3)])
        assert block.length() == 6
        assert block.items[-1] == Item("z", 3)

    def test_replace_item_matches_exact_key(self, block):
        block.replace_item(Item("retries", 9))
        assert block.get_item("retries").value == 3
        block.replace_item(Item("Retries", 9))
        assert block.items[1].value == 9

    def test_replace_missing_item_is_noop(self, block):
        block.replace_item(Item("nope", 1))
        assert block.length() == 3

    def test_remove_item_by_index(self, block):
        block.remove_item(-1)
        assert [i.value for i in block.items] == ["fast", 3]
        block.remove_item(10)
        assert block.length() == 2

    def test_remove_item_by_key_removes_all_matches(self, block):
        block.remove_item_by_key("MODE")
        assert block.items == [Item("retries", 3)]

    def test_name_is_fixed(self, block):
        with pytest.raises(ValidationError):
            block.name = "Other List"

    def test_metadata_is_settable(self, block):
        block.set_metadata({"source": "import"})
        assert block.get_metadata() == {"source": "import"}


class TestTableBlock:
    @pytest.fixture
    def table(self):
        return TableBlock(
            name="People",
            header=["name", "age"],
            rows=[["Ann", 31], ["Bob", 4]],
        )

    def test_defaults(self):
        table = TableBlock()
        assert table.get_entity() == "table"
        assert table.get_name() == "table"
        assert table.get_header() == []
        assert table.get_rows() == []

    def test_get_row_returns_copy(self, table):
        row = table.get_row(0)
        row.append("extra")
        assert table.get_row(0) == ["Ann", 31]

    def test_get_row_out_of_bounds(self, table):
        with pytest.raises(RangeError):
            table.get_row(2)
        with pytest.raises(RangeError):
            table.get_row(-1)

    def test_get_row_needs_integer(self, table):
        with pytest.raises(TypeError):
            table.get_row("0")

    def test_add_and_pop_rows(self, table):
        table.add_row(["Cid", 7])
        table.add_rows([["Dee", 8], ["Eve", 9]])
        assert len(table) == 5
        table.pop_row()
        assert table.get_row(3) == ["Dee", 8]
        TableBlock().pop_row()

    def test_replace_row(self, table):
        table.replace_row(1, ["Bo", 5])
        assert table.rows == [["Ann", 31], ["Bo", 5]]

    def test_replace_row_past_end_appends(self, table):
        table.replace_row(10, ["Zed", 1])
        assert table.rows[-1] == ["Zed", 1]
        assert len(table) == 3

    def test_replace_row_negative_counts_from_end(self, table):
        table.replace_row(-1, ["Last", 0])
        assert table.rows == [["Ann", 31], ["Last", 0]]

    def test_remove_row(self, table):
        table.remove_row(0)
        assert table.rows == [["Bob", 4]]
        with pytest.raises(RangeError):
            table.remove_row(5)

    def test_set_header(self, table):
        table.set_header(["who", "years"])
        assert table.get_header() == ["who", "years"]

    def test_columns(self):
        table = TableBlock(header=["a", "b"], rows=[[1, 2], [3]])
        columns = table.get_columns()
        assert columns == [
            Column(header="a", values=[1, 3]),
            Column(header="b", values=[2, None]),
        ]
        assert columns[1].get_column_header() == "b"


class TestSheet:
    @pytest.fixture
    def sheet(self):
        return Sheet(
            name="Summary",
            blocks=[TableBlock(name="Tab1"), ListBlock(name="Pairs List")],
        )

    def test_lookup_by_name(self, sheet):
        assert sheet.get_block("tab1").name == "Tab1"
        assert sheet.get_block("PAIRS LIST").entity == "list"
        assert sheet.get_block("missing") is None

    def test_lookup_by_index(self, sheet):
        assert sheet.get_block_by_index(1).name == "Pairs List"
        with pytest.raises(RangeError):
            sheet.get_block_by_index(5)

    def test_wrong_key_types(self, sheet):
        with pytest.raises(TypeError):
            sheet.get_block(0)
        with pytest.raises(TypeError):
            sheet.get_block_by_index("0")

    def test_replace_block_by_name(self, sheet):
        sheet.replace_block(TableBlock(name="TAB1", header=["x"]))
        assert sheet.get_block_by_index(0).header == ["x"]
        sheet.replace_block(TableBlock(name="Other"))
        assert sheet.length() == 2

    def test_remove_block(self, sheet):
        sheet.remove_block("missing")
        assert len(sheet) == 2
        sheet.remove_block("tab1")
        assert [b.name for b in sheet.get_blocks()] == ["Pairs List"]

    def test_add_block(self, sheet):
        sheet.add_block(TableBlock(name="Extra"))
        assert sheet.get_block_by_index(2).name == "Extra"


class TestWorkbook:
    @pytest.fixture
    def workbook(self):
        return Workbook(name="Book", sheets=[Sheet(name="One"), Sheet(name="Two")])

    def test_defaults(self):
        wb = Workbook()
        assert wb.get_entity() == "workbook"
        assert wb.get_name() == "workbook"
        assert wb.get_sheets() == []

    def test_lookup(self, workbook):
        assert workbook.get_sheet("two").name == "Two"
        assert workbook.get_sheet("three") is None
        assert workbook.get_sheet_by_index(0).name == "One"
        with pytest.raises(RangeError):
            workbook.get_sheet_by_index(2)

    def test_remove_unknown_sheet_raises(self, workbook):
        with pytest.raises(RangeError):
            workbook.remove_sheet("three")
        workbook.remove_sheet("ONE")
        assert [s.name for s in workbook.sheets] == ["Two"]

    def test_add_and_replace_sheet(self, workbook):
        workbook.add_sheet(Sheet(name="Three"))
        workbook.replace_sheet(Sheet(name="two", blocks=[TableBlock(name="T")]))
        assert len(workbook) == 3
        assert workbook.get_sheet_by_index(1).get_block("t") is not None
