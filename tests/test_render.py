"""
Tests for console and JSON table rendering.
"""

import json

from proplogic.config import TruthTableConfig
from proplogic.render import render_json, render_table, table_document
from proplogic.truth_table import TruthTable


class TestRenderTable:
    """Test the console table layout."""

    def test_two_propositions(self):
        table = TruthTable.parse_expression_str("A & B")
        assert render_table(table) == "\n".join([
            "A B │ Result",
            "────┼───────",
            "0 0 │      F",
            "1 0 │      F",
            "0 1 │      F",
            "1 1 │      T",
        ])

    def test_single_proposition(self):
        table = TruthTable.parse_expression_str("!A")
        assert render_table(table).splitlines() == [
            "A │ Result",
            "──┼───────",
            "0 │      T",
            "1 │      F",
        ]

    def test_divider_junction_under_separator(self):
        table = TruthTable.parse_expression_str("A | B | C | D")
        lines = render_table(table).splitlines()
        assert lines[0].index("│") == lines[1].index("┼") == 8
        assert len(lines) == 2 + 16

    def test_custom_glyphs(self):
        config = TruthTableConfig(true_glyph="1", false_glyph="0")
        table = TruthTable.parse_expression_str("A")
        assert render_table(table, config).splitlines()[2:] == ["0 │      0", "1 │      1"]


class TestRenderJson:
    """Test the JSON document."""

    def test_document_without_expression(self):
        table = TruthTable.parse_expression_str("A")
        doc = table_document(table)
        assert "expression" not in doc
        assert doc["rows"] == [
            {"permutation": 0, "values": [0], "result": False},
            {"permutation": 1, "values": [1], "result": True},
        ]

    def test_json_with_expression(self):
        table = TruthTable.parse_rows("01, 10")
        doc = json.loads(render_json(table, table.to_expression_str()))
        assert doc["propositions"] == ["A"]
        assert doc["expression"] == "()"
