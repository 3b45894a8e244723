"""
Truth tables for expressions over up to four propositions.

Permutations of proposition values are packed into a small integer where
bit i holds the value of identifier i (A = bit 0). A table maps every
permutation to the result of evaluating the expression for it, in ascending
permutation order.

A table can be built two ways:
- from an Expression, by evaluating every permutation;
- from literal rows such as ``"001, 011, 101, 111"``, where each row lists
  the proposition bits (A first) followed by the result bit.

``to_expression_str`` goes the other way and reconstructs a sum-of-products
expression from the true rows.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Sequence, Tuple

from .errors import PropositionValidationError, RowFormatError
from .expression import Expression
from .identifiers import MAX_PROPOSITIONS, PropositionIdentifier, canonical_identifiers

logger = logging.getLogger(__name__)

MIN_ROW_LENGTH = 2
MAX_ROW_LENGTH = MAX_PROPOSITIONS + 1
DEFAULT_ROW_SEPARATOR = ","


class TruthTable:
    """Mapping from packed permutation to result for the propositions in play."""

    def __init__(self, propositions: List[PropositionIdentifier], values_and_results: Dict[int, bool]):
        self.propositions = propositions
        self.values_and_results = dict(sorted(values_and_results.items()))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_expression(cls, expression: Expression) -> "TruthTable":
        """
        Evaluate ``expression`` for every permutation of its propositions.

        Raises:
            PropositionValidationError: If the expression's propositions are
                not a contiguous prefix of A, B, C, D (e.g. one parsed with
                ``validate=False``).
        """
        if not expression.table.validate():
            found = ", ".join(sorted(str(p) for p in expression.table)) or "none"
            raise PropositionValidationError(
                f"Cannot tabulate non-contiguous propositions (found: {found})"
            )

        count = expression.proposition_count
        propositions = canonical_identifiers(count)

        values_and_results: Dict[int, bool] = {}
        for permutation in get_bit_permutations(count):
            values_and_results[permutation] = expression.evaluate_permutation(permutation)

        logger.debug(f"Built truth table: {len(values_and_results)} row(s) over {count} proposition(s)")
        return cls(propositions, values_and_results)

    @classmethod
    def parse_expression_str(cls, expression: str) -> "TruthTable":
        """Parse expression text (with contiguity validation) and tabulate it."""
        return cls.from_expression(Expression.parse(expression, validate=True))

    @classmethod
    def parse_rows(cls, rows: str, separator: str = DEFAULT_ROW_SEPARATOR) -> "TruthTable":
        """
        Parse literal rows into a truth table.

        Args:
            rows: Rows joined by ``separator``; each row is the proposition
                bits (A first) followed by one result bit, e.g. ``"101"``
                means A=1, B=0, result true.
            separator: Row delimiter. Whitespace around rows is ignored.

        Raises:
            RowFormatError: On non-binary characters, inconsistent or
                out-of-range row lengths, or a duplicate/missing permutation.
        """
        split_rows = [row.strip() for row in rows.split(separator)]
        validate_rows(split_rows)

        count = len(split_rows[0]) - 1
        propositions = canonical_identifiers(count)
        values_and_results = rows_to_value_map(split_rows)

        expected = set(get_bit_permutations(count))
        missing = sorted(expected - set(values_and_results))
        if missing:
            raise RowFormatError(
                "Truth table is missing row(s) for: "
                + ", ".join(format_permutation(p, count) for p in missing)
            )

        logger.debug(f"Parsed {len(values_and_results)} row(s) over {count} proposition(s)")
        return cls(propositions, values_and_results)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def proposition_count(self) -> int:
        return len(self.propositions)

    def __len__(self) -> int:
        return len(self.values_and_results)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TruthTable):
            return NotImplemented
        return (self.propositions == other.propositions
            and self.values_and_results == other.values_and_results)

    def __repr__(self) -> str:
        props = "".join(str(p) for p in self.propositions)
        return f"TruthTable({props}, {self.results()})"

    def rows(self) -> Iterator[Tuple[int, Tuple[bool, ...], bool]]:
        """Yield ``(permutation, proposition values, result)`` in ascending order."""
        for permutation, result in self.values_and_results.items():
            values = tuple(p.mask(permutation) for p in self.propositions)
            yield permutation, values, result

    def results(self) -> List[bool]:
        return list(self.values_and_results.values())

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_expression_str(self, minterm: bool = False) -> str:
        """
        Reconstruct an expression as a disjunction of one conjunction per true row.

        By default each conjunction lists only the propositions that are set,
        so a true all-zero row yields ``()`` and a table with no true rows
        yields ``""``. With ``minterm=True`` every proposition appears
        (negated when unset), which gives the canonical sum of products.
        """
        conjunctions = [
            encode_conjunction(permutation, self.proposition_count, minterm=minterm)
            for permutation, result in self.values_and_results.items()
            if result
        ]
        return " | ".join(conjunctions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "propositions": [str(p) for p in self.propositions],
            "rows": [
                {
                    "permutation": permutation,
                    "values": [int(v) for v in values],
                    "result": result,
                }
                for permutation, values, result in self.rows()
            ],
        }


# ============================================================================
# Row parsing helpers
# ============================================================================

def validate_rows(rows: Sequence[str]) -> None:
    """Check rows for binary content and a consistent length in [2, 5]."""
    if not rows or not rows[0]:
        raise RowFormatError("No truth table rows given")

    for row in rows:
        for c in row:
            if c not in "01":
                raise RowFormatError(f"Invalid character {c!r} found in row {row!r}")

    row_size = len(rows[0])
    if not MIN_ROW_LENGTH <= row_size <= MAX_ROW_LENGTH:
        raise RowFormatError(
            f"Row size must be between {MIN_ROW_LENGTH} and {MAX_ROW_LENGTH}, representing "
            f"up to {MAX_PROPOSITIONS} proposition columns and one result column (got {row_size})"
        )

    for row in rows:
        if len(row) != row_size:
            raise RowFormatError(f"All rows must be the same length: {row!r} is not {row_size} characters")


def rows_to_value_map(rows: Sequence[str]) -> Dict[int, bool]:
    """Decode validated rows into a permutation -> result map, rejecting duplicates."""
    values_and_results: Dict[int, bool] = {}
    for row in rows:
        permutation = decode_permutation_str(row)
        if permutation in values_and_results:
            raise RowFormatError(f"Duplicate row for permutation {row[:-1]!r}")
        values_and_results[permutation] = row[-1] == "1"
    return values_and_results


def decode_permutation_str(row: str) -> int:
    """
    Decode a row's proposition bits into a packed permutation.

    The last character is the result and is ignored. The leftmost
    proposition column is A (bit 0):

    >>> decode_permutation_str("101")
    1
    >>> decode_permutation_str("0111")
    6
    """
    permutation = 0
    for index, c in enumerate(row[:-1]):
        if c == "1":
            permutation |= 1 << index
    return permutation


def format_permutation(permutation: int, count: int) -> str:
    """Render a permutation as row text without the result column (A first)."""
    return "".join("1" if p.mask(permutation) else "0" for p in canonical_identifiers(count))


def encode_conjunction(permutation: int, proposition_count: int, minterm: bool = False) -> str:
    """Encode one permutation as a parenthesised conjunction, e.g. ``(A & C)``."""
    literals = []
    for proposition in canonical_identifiers(proposition_count):
        if proposition.mask(permutation):
            literals.append(proposition.to_char())
        elif minterm:
            literals.append(f"!{proposition.to_char()}")
    return "(" + " & ".join(literals) + ")"


def get_bit_permutations(bits: int) -> range:
    """All packed permutations of ``bits`` propositions, ascending."""
    if not 0 <= bits <= MAX_PROPOSITIONS:
        raise ValueError(f"Bit count must be between 0 and {MAX_PROPOSITIONS}, got {bits}")
    return range(1 << bits)
