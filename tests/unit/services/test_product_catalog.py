"""Tests for product catalog parsing."""

import pytest

from cotacao.core.exceptions import EmptyCatalogError
from cotacao.core.services.product_catalog import coerce_cell, parse_rows


class TestCoerceCell:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            ("  P1 ", "P1"),
            (7891000000011, "7891000000011"),
            (7891000000011.0, "7891000000011"),
            (1.5, "1.5"),
        ],
    )
    def test_coerce(self, value, expected):
        assert coerce_cell(value) == expected


class TestParseRows:
    def test_valid_rows(self):
        products = parse_rows(
            [
                ["P1", "Widget", "111"],
                ["P2", "Gadget", "222"],
            ]
        )
        assert [p.internal_code for p in products] == ["P1", "P2"]
        assert products[1].description == "Gadget"

    def test_incomplete_row_dropped(self):
        products = parse_rows(
            [
                ["P1", "Widget", "111"],
                ["P2", "", "222"],
            ]
        )
        assert [p.internal_code for p in products] == ["P1"]

    def test_short_and_none_rows_dropped(self):
        products = parse_rows(
            [
                ["P1"],
                [None, "Gadget", "222"],
                ["P3", "Thing", "333"],
            ]
        )
        assert [p.internal_code for p in products] == ["P3"]

    def test_extra_cells_ignored(self):
        products = parse_rows([["P1", "Widget", "111", "ignored", 42]])
        assert products[0].barcode == "111"

    def test_cells_are_trimmed(self):
        products = parse_rows([["  P1 ", " Widget ", " 111 "]])
        assert products[0].internal_code == "P1"
        assert products[0].description == "Widget"
        assert products[0].barcode == "111"

    def test_whitespace_only_cell_counts_as_missing(self):
        with pytest.raises(EmptyCatalogError):
            parse_rows([["P1", "   ", "111"]])

    def test_duplicate_code_keeps_first(self):
        products = parse_rows(
            [
                ["P1", "Widget", "111"],
                ["P1", "Other", "999"],
            ]
        )
        assert len(products) == 1
        assert products[0].description == "Widget"

    def test_numeric_cells(self):
        products = parse_rows([[101.0, "Widget", 7891000000011]])
        assert products[0].internal_code == "101"
        assert products[0].barcode == "7891000000011"

    def test_no_valid_rows(self):
        with pytest.raises(EmptyCatalogError) as exc_info:
            parse_rows([["P1", "", ""], ["", "", ""]])
        assert exc_info.value.details["rows_received"] == 2

    def test_empty_input(self):
        with pytest.raises(EmptyCatalogError):
            parse_rows([])
