"""
Exception hierarchy for proplogic.

User-facing failures derive from ``TruthTableError`` so callers (and the CLI)
can catch bad input in one place. ``InternalInvariantError`` does not derive
from it: it signals a defect in the library, never malformed input.
"""

from __future__ import annotations


class TruthTableError(Exception):
    """Base class for errors caused by user-supplied input or configuration."""
    pass


class ExpressionParseError(TruthTableError, ValueError):
    """
    Raised when expression text cannot be parsed.

    Covers unmatched parentheses, invalid characters, and a mismatch between
    the number of elements and operators (e.g. ``"A &"`` or ``"A & | B"``).
    """
    pass


class PropositionValidationError(TruthTableError, ValueError):
    """Raised when a top-level expression skips a proposition letter (e.g. ``A & C``)."""
    pass


class RowFormatError(TruthTableError, ValueError):
    """Raised when literal truth-table rows are malformed or incomplete."""
    pass


class ConfigError(TruthTableError):
    """Raised when the configuration file is missing or malformed."""
    pass


class InternalInvariantError(RuntimeError):
    """
    Raised when an internal invariant is broken.

    Examples: evaluating a proposition before values were assigned, or
    extracting a sub-expression from text that does not start with ``(``.
    Valid input must never trigger this.
    """
    pass
