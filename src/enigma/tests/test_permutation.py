"""Tests for cycle-notation permutations."""

import pytest

from conftest import random_wiring
from enigma.core.alphabet import Alphabet
from enigma.core.constants import REFLECTOR_WIRINGS, ROTOR_WIRINGS, UPPER
from enigma.core.errors import DuplicateCycleMember, MalformedCycles, MalformedWiring, NotInAlphabet
from enigma.core.permutation import Permutation


def check_perm(perm, from_alpha, to_alpha):
    """Check PERM maps each character of FROM_ALPHA to the one in TO_ALPHA."""
    assert perm.size() == len(from_alpha)
    for c, e in zip(from_alpha, to_alpha):
        assert perm.permute(c) == e
        assert perm.invert(e) == c
        ci, ei = perm.alphabet.to_int(c), perm.alphabet.to_int(e)
        assert perm.permute(ci) == ei
        assert perm.invert(ei) == ci


class TestPermute:
    """Test forward mapping."""

    def test_identity(self, upper):
        """Test the empty permutation is the identity."""
        check_perm(Permutation("", upper), UPPER, UPPER)
        check_perm(Permutation.identity(upper), UPPER, UPPER)

    def test_permute_index(self, upper):
        """Test index form follows the cycles."""
        perm = Permutation("(AHDC) (POL) (KQW)", upper)
        assert perm.permute(0) == 7
        assert perm.permute(3) == 2
        assert perm.permute(2) == 0

    def test_permute_char(self, upper):
        """Test character form follows the cycles."""
        perm = Permutation("(AHDC) (POL) (KQW)", upper)
        assert perm.permute("A") == "H"
        assert perm.permute("D") == "C"
        assert perm.permute("C") == "A"
        assert perm.permute("L") == "P"

    def test_fixed_point(self, upper):
        """Test characters in no cycle map to themselves."""
        perm = Permutation("(AHDC) (POL) (KQW)", upper)
        assert perm.permute("B") == "B"
        assert perm.permute(1) == 1

    def test_singleton_cycle(self, upper):
        """Test a one-character cycle is a fixed point."""
        perm = Permutation("(A) (BC)", upper)
        assert perm.permute("A") == "A"
        assert perm.permute("B") == "C"

    def test_wraps_index(self, upper):
        """Test out-of-range indices are reduced modulo the size."""
        perm = Permutation("(AHDC) (POL) (KQW)", upper)
        assert perm.permute(26) == 7
        assert perm.permute(-26) == 7
        assert perm.permute(-1) == 25
        assert perm.permute(55) == perm.permute(3)

    def test_whitespace_ignored(self, upper):
        """Test whitespace anywhere in the notation is insignificant."""
        spaced = Permutation("  ( A H D C )\n(P O L)\t(KQW) ", upper)
        packed = Permutation("(AHDC)(POL)(KQW)", upper)
        assert spaced == packed

    def test_full_check(self, upper):
        """Test a permutation against a complete expected mapping."""
        perm = Permutation("(BACD)", Alphabet("ABCD"))
        check_perm(perm, "ABCD", "CADB")


class TestInvert:
    """Test inverse mapping."""

    def test_invert_index(self, upper):
        """Test index form of the inverse."""
        perm = Permutation("(AHDC) (POL) (KQW)", upper)
        assert perm.invert(7) == 0
        assert perm.invert(2) == 3
        assert perm.invert(0) == 2

    def test_invert_char(self, upper):
        """Test character form of the inverse."""
        perm = Permutation("(AHDC) (POL) (KQW)", upper)
        assert perm.invert("H") == "A"
        assert perm.invert("A") == "C"
        assert perm.invert("P") == "L"

    def test_invert_wraps_index(self, upper):
        """Test the inverse reduces indices too."""
        perm = Permutation("(AHDC)", upper)
        assert perm.invert(33) == 0

    def test_roundtrip_random(self, upper):
        """Test invert(permute(i)) == i and permute(invert(i)) == i."""
        for _ in range(10):
            perm = Permutation.from_wiring(random_wiring(UPPER), upper)
            for i in range(upper.size()):
                assert perm.invert(perm.permute(i)) == i
                assert perm.permute(perm.invert(i)) == i


class TestDerangement:
    """Test the derangement check."""

    def test_identity_not_derangement(self, upper):
        """Test the identity has fixed points."""
        assert not Permutation("", upper).derangement()

    def test_partial_not_derangement(self, upper):
        """Test a permutation leaving one letter fixed."""
        perm = Permutation("(ABCDEFGHIJKLMNOPQRSTUVWXY)", upper)
        assert not perm.derangement()

    def test_full_cycle_derangement(self, upper):
        """Test a single 26-cycle is a derangement."""
        assert Permutation(f"({UPPER})", upper).derangement()

    def test_reflector_wirings_derangements(self, upper):
        """Test the historical reflectors are derangements."""
        for wiring in REFLECTOR_WIRINGS.values():
            assert Permutation.from_wiring(wiring, upper).derangement()

    def test_matches_definition(self, upper):
        """Test derangement() is true iff no index maps to itself."""
        for _ in range(20):
            perm = Permutation.from_wiring(random_wiring(UPPER), upper)
            expected = all(perm.permute(i) != i for i in range(upper.size()))
            assert perm.derangement() == expected


class TestFromWiring:
    """Test conversion from substitution strings."""

    def test_simple(self):
        """Test a three-letter rotation."""
        perm = Permutation.from_wiring("BCA", Alphabet("ABC"))
        assert str(perm) == "(ABC)"
        assert perm.cycles == ("ABC",)

    def test_rotor_i(self, upper):
        """Test rotor I converts to its well-known cycles."""
        perm = Permutation.from_wiring(ROTOR_WIRINGS["I"], upper)
        assert perm == Permutation("(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)", upper)

    def test_follows_wiring(self, upper):
        """Test every letter maps to its wiring image."""
        wiring = ROTOR_WIRINGS["III"]
        perm = Permutation.from_wiring(wiring, upper)
        for char, image in zip(UPPER, wiring):
            assert perm.permute(char) == image

    def test_identity_wiring(self, upper):
        """Test the alphabet itself gives the identity."""
        assert Permutation.from_wiring(UPPER, upper) == Permutation.identity(upper)

    def test_bad_length(self, upper):
        """Test a short wiring is rejected."""
        with pytest.raises(MalformedWiring):
            Permutation.from_wiring("BCA", upper)

    def test_repeated_letter(self):
        """Test a wiring with a repeated letter is rejected."""
        with pytest.raises(MalformedWiring):
            Permutation.from_wiring("AAC", Alphabet("ABC"))


class TestPermutationErrors:
    """Test rejection of bad cycle notation."""

    def test_unclosed_cycle(self, upper):
        """Test a trailing token that does not end a cycle."""
        with pytest.raises(MalformedCycles):
            Permutation("(AB) (CD", upper)

    def test_trailing_letters(self, upper):
        """Test letters outside parentheses."""
        with pytest.raises(MalformedCycles):
            Permutation("(AB) CD", upper)

    def test_nested(self, upper):
        """Test nested parentheses."""
        with pytest.raises(MalformedCycles):
            Permutation("(A(B))", upper)

    def test_duplicate_across_cycles(self, upper):
        """Test a letter in two cycles."""
        with pytest.raises(DuplicateCycleMember):
            Permutation("(AB) (BC)", upper)

    def test_duplicate_within_cycle(self, upper):
        """Test a letter twice in one cycle."""
        with pytest.raises(DuplicateCycleMember):
            Permutation("(ABA)", upper)

    def test_not_in_alphabet(self, upper):
        """Test a cycle naming a foreign character."""
        with pytest.raises(NotInAlphabet):
            Permutation("(A1)", upper)

    def test_empty_cycle_ignored(self, upper):
        """Test empty groups are accepted."""
        perm = Permutation("() (AB)", upper)
        assert perm.permute("A") == "B"
        assert perm.cycles == ("AB",)


class TestPermutationConstruction:
    """Test construction is deterministic."""

    def test_same_text_same_behaviour(self, upper):
        """Test two permutations from the same text agree on every input."""
        text = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"
        first = Permutation(text, upper)
        second = Permutation(text, Alphabet(UPPER))
        for i in range(upper.size()):
            assert first.permute(i) == second.permute(i)
            assert first.invert(i) == second.invert(i)
        assert first == second

    def test_str_roundtrip(self, upper):
        """Test str() gives notation that rebuilds the same permutation."""
        perm = Permutation.from_wiring(ROTOR_WIRINGS["VIII"], upper)
        assert Permutation(str(perm), upper) == perm

    def test_alphabet_shared(self, upper):
        """Test the permutation keeps the alphabet it was given."""
        assert Permutation("(AB)", upper).alphabet is upper
