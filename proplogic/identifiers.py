"""
The four proposition identifiers and their bit positions.

Every packed permutation in this package uses the same order: identifier
index ``i`` lives in bit ``i``, so ``A`` is the least significant bit.

    >>> PropositionIdentifier.from_char("c").bit
    4
    >>> PropositionIdentifier.B.mask(0b0010)
    True
"""

from __future__ import annotations

import enum
from typing import List

MAX_PROPOSITIONS = 4


class PropositionIdentifier(enum.Enum):
    A = 0
    B = 1
    C = 2
    D = 3

    @property
    def index(self) -> int:
        return self.value

    @property
    def bit(self) -> int:
        return 1 << self.value

    def mask(self, permutation: int) -> bool:
        """Return this proposition's truth value within a packed permutation."""
        return permutation & self.bit != 0

    def to_char(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_char(cls, c: str) -> "PropositionIdentifier":
        """Convert a proposition letter (either case) to its identifier."""
        if not is_proposition_char(c):
            raise ValueError(f"Invalid proposition character {c!r}")
        return cls[c.upper()]

    @classmethod
    def from_index(cls, index: int) -> "PropositionIdentifier":
        if not 0 <= index < MAX_PROPOSITIONS:
            raise ValueError(f"Proposition index out of range: {index}")
        return cls(index)


def is_proposition_char(c: str) -> bool:
    return len(c) == 1 and c.upper() in PropositionIdentifier.__members__


def canonical_identifiers(count: int) -> List[PropositionIdentifier]:
    """
    Return the first ``count`` identifiers in canonical order.

    Propositions are assumed to be introduced contiguously (A, then B, ...),
    so a count fully determines which identifiers are in play.
    """
    if not 0 <= count <= MAX_PROPOSITIONS:
        raise ValueError(f"Proposition count must be between 0 and {MAX_PROPOSITIONS}, got {count}")
    return [PropositionIdentifier.from_index(i) for i in range(count)]
