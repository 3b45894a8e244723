"""
Proposition value table.

A ``PropositionTable`` maps each proposition appearing in a piece of
expression text to its current truth value (``None`` until assigned). The key
set is fixed at construction; assignment only overwrites values.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .errors import InternalInvariantError
from .identifiers import (
    MAX_PROPOSITIONS,
    PropositionIdentifier,
    canonical_identifiers,
    is_proposition_char,
)


class PropositionTable:
    """Truth values for the distinct propositions of one expression node."""

    def __init__(self, propositions: Dict[PropositionIdentifier, Optional[bool]]):
        self._propositions = propositions

    @classmethod
    def from_text(cls, text: str) -> "PropositionTable":
        """Build an unvalued table from the distinct proposition letters in ``text``."""
        propositions: Dict[PropositionIdentifier, Optional[bool]] = {}
        for c in text:
            if is_proposition_char(c):
                propositions.setdefault(PropositionIdentifier.from_char(c), None)
        return cls(propositions)

    def __len__(self) -> int:
        return len(self._propositions)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._propositions

    def __iter__(self) -> Iterator[PropositionIdentifier]:
        return iter(self._propositions)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v}" for k, v in self._propositions.items())
        return f"PropositionTable({body})"

    def identifiers(self) -> List[PropositionIdentifier]:
        """Identifiers in the order they first appeared in the source text."""
        return list(self._propositions)

    def is_assigned(self) -> bool:
        return all(v is not None for v in self._propositions.values())

    def set_values(self, permutation: int) -> None:
        """Overwrite every value from a packed permutation (bit i = identifier i)."""
        for identifier in self._propositions:
            self._propositions[identifier] = identifier.mask(permutation)

    def value(self, identifier: PropositionIdentifier) -> bool:
        if identifier not in self._propositions:
            raise InternalInvariantError(f"Proposition {identifier} is not part of this table")
        value = self._propositions[identifier]
        if value is None:
            raise InternalInvariantError(f"Proposition {identifier} evaluated before values were assigned")
        return value

    def validate(self) -> bool:
        """
        Check that the propositions form a contiguous prefix of A, B, C, D.

        ``{A}``, ``{A, B}``, ``{A, B, C}`` and ``{A, B, C, D}`` are valid;
        ``{A, C}`` or ``{B}`` are not, and neither is an empty table.
        """
        count = len(self._propositions)
        if not 1 <= count <= MAX_PROPOSITIONS:
            return False
        return set(self._propositions) == set(canonical_identifiers(count))
