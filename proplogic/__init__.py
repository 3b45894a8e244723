"""Propositional expression parsing and truth tables over A-D."""

from .errors import (
    ConfigError,
    ExpressionParseError,
    InternalInvariantError,
    PropositionValidationError,
    RowFormatError,
    TruthTableError,
)
from .identifiers import MAX_PROPOSITIONS, PropositionIdentifier, canonical_identifiers
from .table import PropositionTable
from .expression import Expression, ExpressionElement, Operator, extract_subexpression
from .truth_table import TruthTable, get_bit_permutations
