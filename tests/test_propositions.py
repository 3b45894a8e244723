"""
Tests for proposition identifiers and proposition tables.
"""

import pytest

from proplogic.errors import InternalInvariantError
from proplogic.identifiers import (
    PropositionIdentifier,
    canonical_identifiers,
    is_proposition_char,
)
from proplogic.table import PropositionTable

A, B, C, D = PropositionIdentifier


class TestPropositionIdentifier:
    """Test identifier conversion and bit masks."""

    def test_from_char_case_insensitive(self):
        assert PropositionIdentifier.from_char("a") is A
        assert PropositionIdentifier.from_char("A") is A
        assert PropositionIdentifier.from_char("d") is D

    def test_from_char_rejects_other_letters(self):
        for c in ["e", "E", "p", "1", "", "AB"]:
            with pytest.raises(ValueError):
                PropositionIdentifier.from_char(c)

    def test_from_index(self):
        assert [PropositionIdentifier.from_index(i) for i in range(4)] == [A, B, C, D]
        with pytest.raises(ValueError):
            PropositionIdentifier.from_index(4)
        with pytest.raises(ValueError):
            PropositionIdentifier.from_index(-1)

    def test_char_rendering(self):
        assert [p.to_char() for p in PropositionIdentifier] == ["A", "B", "C", "D"]
        assert str(C) == "C"

    def test_bits_follow_index(self):
        """A is the least significant bit."""
        assert [p.bit for p in PropositionIdentifier] == [0b0001, 0b0010, 0b0100, 0b1000]

    def test_mask(self):
        assert A.mask(0b0001)
        assert not B.mask(0b0001)
        assert B.mask(0b0011)
        assert D.mask(0b1000)
        assert not D.mask(0b0111)

    def test_is_proposition_char(self):
        assert is_proposition_char("b")
        assert not is_proposition_char("&")
        assert not is_proposition_char("x")

    def test_canonical_identifiers(self):
        assert canonical_identifiers(0) == []
        assert canonical_identifiers(2) == [A, B]
        assert canonical_identifiers(4) == [A, B, C, D]
        with pytest.raises(ValueError):
            canonical_identifiers(5)


class TestPropositionTable:
    """Test table construction, assignment and contiguity validation."""

    def test_from_text_distinct_case_insensitive(self):
        table = PropositionTable.from_text("a & A | (b & !a)")
        assert len(table) == 2
        assert table.identifiers() == [A, B]

    def test_from_text_ignores_non_letters(self):
        table = PropositionTable.from_text("!(C) * + /")
        assert table.identifiers() == [C]

    def test_starts_unassigned(self):
        table = PropositionTable.from_text("A & B")
        assert not table.is_assigned()
        with pytest.raises(InternalInvariantError):
            table.value(A)

    def test_set_values(self):
        table = PropositionTable.from_text("A & B & C")
        table.set_values(0b101)
        assert table.is_assigned()
        assert table.value(A) is True
        assert table.value(B) is False
        assert table.value(C) is True

    def test_set_values_keeps_key_set(self):
        table = PropositionTable.from_text("B")
        table.set_values(0b1111)
        assert table.identifiers() == [B]
        assert A not in table
        with pytest.raises(InternalInvariantError):
            table.value(A)

    def test_validate_propositions(self):
        assert PropositionTable.from_text("A").validate()
        assert PropositionTable.from_text("A & B").validate()
        assert PropositionTable.from_text("B & A").validate()
        assert PropositionTable.from_text("A & B & C").validate()
        assert PropositionTable.from_text("A & B & C & D").validate()

        assert not PropositionTable.from_text("A & C & D").validate()
        assert not PropositionTable.from_text("B & C").validate()
        assert not PropositionTable.from_text("D").validate()

    def test_validate_empty_table(self):
        assert not PropositionTable.from_text("&|!").validate()
