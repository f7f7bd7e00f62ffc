"""Tests for blank-row segmentation."""

from __future__ import annotations

from detection.segmenter import find_spans, segment
from dto.span import BlockSpan, is_blank_row, normalize_row


class TestBlankRows:
    def test_none_row_is_blank(self):
        assert is_blank_row(None)

    def test_empty_row_is_blank(self):
        assert is_blank_row([])
        assert is_blank_row({})

    def test_all_null_cells_are_blank(self):
        assert is_blank_row([None, None, None])
        assert is_blank_row({2: None})

    def test_any_value_makes_row_non_blank(self):
        assert not is_blank_row([None, 0])
        assert not is_blank_row(["", None])
        assert not is_blank_row({3: False})

    def test_mapping_row_is_positional(self):
        assert normalize_row({2: "c", 0: "a"}) == ["a", None, "c"]


class TestFindSpans:
    def test_blank_run_collapses_into_one_boundary(self):
        grid = [["T1"], ["h1"], [1], [], [], ["T2"], ["h2"], [2]]
        assert find_spans(grid) == [(0, 2), (5, 7)]

    def test_leading_and_trailing_blank_rows(self):
        grid = [None, [], ["T"], ["h"], [None], None]
        assert find_spans(grid) == [(2, 3)]

    def test_span_open_at_end_runs_to_last_row(self):
        grid = [["T"], ["h"], [1]]
        assert find_spans(grid) == [(0, 2)]

    def test_single_row_spans(self):
        grid = [["A"], [], ["B"], [], ["C"]]
        assert find_spans(grid) == [(0, 0), (2, 2), (4, 4)]

    def test_empty_and_all_blank_grids(self):
        assert find_spans([]) == []
        assert find_spans([[], None, [None]]) == []

    def test_mapping_rows(self):
        grid = [{0: "T"}, {1: "h"}, {}, {0: None}, {0: "U"}]
        assert find_spans(grid) == [(0, 1), (4, 4)]

    def test_every_non_blank_row_in_exactly_one_span(self):
        grid = [[], ["a"], ["b"], [], ["c"], [], [], ["d"], ["e"], []]
        spans = find_spans(grid)
        covered = [r for begin, end in spans for r in range(begin, end + 1)]
        non_blank = [i for i, row in enumerate(grid) if not is_blank_row(row)]
        assert covered == non_blank


class TestSegment:
    def test_spans_carry_their_rows(self):
        grid = [["T1", None], ["h1"], [], ["T2"], {1: "x"}]
        spans = segment(grid)
        assert [(s.begin, s.end) for s in spans] == [(0, 1), (3, 4)]
        assert spans[0].rows == [["T1", None], ["h1"]]
        assert spans[1].rows == [["T2"], [None, "x"]]

    def test_span_addresses_cells_by_absolute_row(self):
        span = segment([[], [], ["Name"], ["a", "b"]])[0]
        assert span.name == "Name"
        assert span.num_rows == 2
        assert span.cell_at(3, 1) == "b"
        assert span.cell_at(3, 5) is None
        assert span.row_at(0) == []


class TestBlockSpan:
    def test_name_is_first_cell(self):
        span = BlockSpan(begin=4, end=4, rows=[[7, "x"]])
        assert span.name == 7

    def test_name_of_empty_first_cell_is_none(self):
        span = BlockSpan(begin=0, end=0, rows=[[None, "x"]])
        assert span.name is None
