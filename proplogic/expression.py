"""
Recursive expression trees for propositional formulas over A..D.

An ``Expression`` is a flat, left-to-right chain of elements joined by
operators::

    element0 op0 element1 op1 element2 ...

Each element is either a single proposition or a parenthesised
sub-expression, optionally negated. Conjunction and disjunction have the same
precedence: ``A | B & C`` evaluates as ``(A | B) & C``.

Accepted markers:
- negation:     ! / ~ ¬
- conjunction:  & * ∧
- disjunction:  | + ∨
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .errors import (
    ExpressionParseError,
    InternalInvariantError,
    PropositionValidationError,
)
from .identifiers import MAX_PROPOSITIONS, PropositionIdentifier, is_proposition_char
from .table import PropositionTable

logger = logging.getLogger(__name__)

NEGATION_CHARS = ("!", "/", "~", "¬")
AND_CHARS = ("&", "*", "∧")
OR_CHARS = ("|", "+", "∨")


class Operator(enum.Enum):
    AND = "&"
    OR = "|"

    def apply(self, left: bool, right: bool) -> bool:
        if self is Operator.AND:
            return left and right
        return left or right


@dataclass
class ExpressionElement:
    """A proposition or nested expression, plus whether it is negated."""

    token: Union[PropositionIdentifier, "Expression"]
    negated: bool = False

    @property
    def is_subexpression(self) -> bool:
        return isinstance(self.token, Expression)

    def __str__(self) -> str:
        prefix = "!" if self.negated else ""
        if isinstance(self.token, Expression):
            return f"{prefix}({self.token})"
        return f"{prefix}{self.token}"


@dataclass
class Expression:
    """
    A parsed expression node.

    ``table`` holds the truth values of the propositions that appear anywhere
    within this node's text; nested nodes keep their own tables.
    """

    elements: List[ExpressionElement]
    operators: List[Operator]
    table: PropositionTable = field(compare=False, repr=False)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, validate: bool = True) -> "Expression":
        """
        Recursively parse ``text`` into an Expression.

        Args:
            text: Expression source, e.g. ``"!(A & B) | C"``.
            validate: Require the propositions to be a contiguous prefix of
                A, B, C, D. Only the top-level call validates; nested
                sub-expressions may use any subset of the outer propositions.

        Raises:
            ExpressionParseError: On unmatched parentheses, invalid characters
                or a mismatched element/operator count.
            PropositionValidationError: If ``validate`` is set and the
                propositions are not contiguous.
        """
        elements: List[ExpressionElement] = []
        operators: List[Operator] = []
        negated = False

        i = 0
        while i < len(text):
            c = text[i]
            if is_proposition_char(c):
                elements.append(ExpressionElement(PropositionIdentifier.from_char(c), negated))
                negated = False
            elif c == "(":
                inner = extract_subexpression(text[i:])
                close = i + len(inner) + 1
                if close >= len(text) or text[close] != ")":
                    raise ExpressionParseError(f"Unmatched '(' at position {i} in expression {text!r}")
                elements.append(ExpressionElement(cls.parse(inner, validate=False), negated))
                negated = False
                i = close
            elif c == ")":
                raise ExpressionParseError(f"Unmatched ')' at position {i} in expression {text!r}")
            elif c in NEGATION_CHARS:
                negated = True
            elif c in AND_CHARS:
                operators.append(Operator.AND)
            elif c in OR_CHARS:
                operators.append(Operator.OR)
            elif c.isspace():
                pass
            else:
                raise ExpressionParseError(f"Invalid character {c!r} at position {i} in expression {text!r}")
            i += 1

        if len(elements) != len(operators) + 1:
            raise ExpressionParseError(
                f"Mismatched proposition/operator count in expression {text!r}: "
                f"{len(elements)} element(s), {len(operators)} operator(s)"
            )

        table = PropositionTable.from_text(text)
        if validate and not table.validate():
            found = ", ".join(sorted(str(p) for p in table)) or "none"
            raise PropositionValidationError(
                f"Propositions must be introduced contiguously starting from A (found: {found})"
            )

        logger.debug(f"Parsed {text!r}: {len(elements)} element(s), {len(table)} proposition(s)")
        return cls(elements, operators, table)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @property
    def proposition_count(self) -> int:
        return len(self.table)

    def subexpressions(self) -> Iterator["Expression"]:
        """Yield the directly nested sub-expressions, left to right."""
        for element in self.elements:
            if isinstance(element.token, Expression):
                yield element.token

    def set_values(self, permutation: int) -> None:
        """Assign every table in the tree from a packed permutation (bit i = identifier i)."""
        if not 0 <= permutation < 1 << MAX_PROPOSITIONS:
            raise ValueError(f"Permutation out of range: {permutation}")
        self.table.set_values(permutation)
        for sub in self.subexpressions():
            sub.set_values(permutation)

    def evaluate(self) -> bool:
        """Evaluate left to right using the values assigned by ``set_values``."""
        result = self._element_value(self.elements[0])
        for operator, element in zip(self.operators, self.elements[1:]):
            result = operator.apply(result, self._element_value(element))
        return result

    def evaluate_permutation(self, permutation: int) -> bool:
        self.set_values(permutation)
        return self.evaluate()

    def _element_value(self, element: ExpressionElement) -> bool:
        if isinstance(element.token, Expression):
            value = element.token.evaluate()
        else:
            value = self.table.value(element.token)
        return value != element.negated

    def __str__(self) -> str:
        parts = [str(self.elements[0])]
        for operator, element in zip(self.operators, self.elements[1:]):
            parts.append(operator.value)
            parts.append(str(element))
        return " ".join(parts)


def extract_subexpression(text: str) -> str:
    """
    Return the text between a leading '(' and its matching ')'.

    If the parentheses never balance, the remainder of the string is returned;
    callers are responsible for detecting the missing ')'.
    """
    if not text or text[0] != "(":
        raise InternalInvariantError(f"Subexpression must start with '(': {text!r}")

    depth = 1
    for idx in range(1, len(text)):
        ch = text[idx]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return text[1:idx]
    return text[1:]
