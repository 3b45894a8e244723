"""
Console and JSON renderings of a TruthTable.

Console layout for two propositions::

    A B │ Result
    ────┼───────
    0 0 │      F
    1 0 │      F
    0 1 │      F
    1 1 │      T

Rows follow ascending permutation order, so A (bit 0) alternates fastest.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .config import TruthTableConfig
from .truth_table import TruthTable

RESULT_HEADER = "Result"
VERTICAL = "│"
HORIZONTAL = "─"
JUNCTION = "┼"
# Result glyph column under the header, measured from the separator
RESULT_PADDING = 6


def render_table(table: TruthTable, config: Optional[TruthTableConfig] = None) -> str:
    config = config or TruthTableConfig()
    lines: List[str] = []

    header = "".join(f"{p} " for p in table.propositions)
    lines.append(f"{header}{VERTICAL} {RESULT_HEADER}")
    lines.append(HORIZONTAL * len(header) + JUNCTION + HORIZONTAL * (len(RESULT_HEADER) + 1))

    for _, values, result in table.rows():
        bits = "".join(f"{int(v)} " for v in values)
        glyph = config.true_glyph if result else config.false_glyph
        lines.append(f"{bits}{VERTICAL}{' ' * RESULT_PADDING}{glyph}")

    return "\n".join(lines)


def table_document(table: TruthTable, expression: Optional[str] = None) -> Dict[str, Any]:
    doc = table.to_dict()
    if expression is not None:
        doc["expression"] = expression
    return doc


def render_json(table: TruthTable, expression: Optional[str] = None, indent: int = 2) -> str:
    return json.dumps(table_document(table, expression), indent=indent)
