"""Enigma Permutations

A Permutation is a bijection on the index space of an Alphabet, written in
cycle notation::

    (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)

Each character maps to the next one in its cycle, the last wrapping to the
first. Characters that appear in no cycle map to themselves. Whitespace in
the notation is ignored.

Forward and inverse lookups are served from precomputed index tables, so
``permute``/``invert`` are O(1) regardless of the number of cycles.
"""

from __future__ import annotations

import re
from typing import Union, overload

import numpy
import numpy.typing as npt

from enigma.core.alphabet import Alphabet
from enigma.core.errors import DuplicateCycleMember, MalformedCycles, MalformedWiring

__all__ = ["Permutation"]

# Whole notation: zero or more parenthesised groups, nothing else
_CYCLES_RE = re.compile(r"(?:\([^()]*\))*")
_CYCLE_RE = re.compile(r"\(([^()]*)\)")
_WHITESPACE_RE = re.compile(r"\s+")

IndexTable = npt.NDArray[numpy.intp]


class Permutation:
    """A permutation of an alphabet, specified as disjoint cycles.

    Example:
    -------
        alpha = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        perm = Permutation("(AHDC) (POL) (KQW)", alpha)

        perm.permute("A")   # 'H'
        perm.permute(3)     # 2 (D -> C)
        perm.invert("A")    # 'C'
        perm.permute(26)    # 7 (indices wrap around)
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        """Build a permutation from cycle notation.

        Args:
        ----
            cycles: Cycle notation over ALPHABET, e.g. ``"(AB) (CDE)"``.
            alphabet: The alphabet being permuted.

        Raises:
        ------
            MalformedCycles: If the text is not a sequence of ``(...)`` groups.
            NotInAlphabet: If a cycle names a character outside ALPHABET.
            DuplicateCycleMember: If a character appears in more than one place.
        """
        self._alphabet = alphabet
        self._cycles: list[str] = []
        self._forward: IndexTable = numpy.arange(alphabet.size(), dtype=numpy.intp)
        self._inverse: IndexTable = numpy.arange(alphabet.size(), dtype=numpy.intp)
        self._members: set[int] = set()

        condensed = _WHITESPACE_RE.sub("", cycles)
        if not _CYCLES_RE.fullmatch(condensed):
            raise MalformedCycles(f"Wrongly formatted cycles: {cycles!r}")

        for cycle in _CYCLE_RE.findall(condensed):
            if cycle:
                self._add_cycle(cycle)

        self._forward.setflags(write=False)
        self._inverse.setflags(write=False)

    @classmethod
    def identity(cls, alphabet: Alphabet) -> Permutation:
        """Return the permutation that maps every character to itself."""
        return cls("", alphabet)

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> Permutation:
        """Build a permutation from a substitution string.

        Character k of WIRING is the image of character k of ALPHABET, which
        is how historical rotor wirings are usually published.

        Args:
        ----
            wiring: A rearrangement of ALPHABET.
            alphabet: The alphabet being permuted.

        Returns:
        -------
            The same mapping in cycle form.

        Raises:
        ------
            MalformedWiring: If WIRING is not a rearrangement of ALPHABET.

        Example:
        -------
            >>> str(Permutation.from_wiring("BCA", Alphabet("ABC")))
            '(ABC)'
        """
        if len(wiring) != alphabet.size() or set(wiring) != set(alphabet):
            raise MalformedWiring(f"Wiring {wiring!r} is not a rearrangement of {alphabet.chars!r}")

        visited = [False] * alphabet.size()
        cycles = []
        for start in range(alphabet.size()):
            cycle = []
            i = start
            while not visited[i]:
                visited[i] = True
                cycle.append(alphabet.to_char(i))
                i = alphabet.to_int(wiring[i])
            if len(cycle) > 1:
                cycles.append("(" + "".join(cycle) + ")")

        return cls(" ".join(cycles), alphabet)

    def _add_cycle(self, cycle: str) -> None:
        """Add the cycle c0->c1->...->cm->c0, where CYCLE is c0c1...cm."""
        indices = [self._alphabet.to_int(char) for char in cycle]
        for char, idx in zip(cycle, indices):
            if idx in self._members:
                raise DuplicateCycleMember(f"Character {char!r} already appears in a cycle")
            self._members.add(idx)

        for k, idx in enumerate(indices):
            nxt = indices[(k + 1) % len(indices)]
            self._forward[idx] = nxt
            self._inverse[nxt] = idx

        self._cycles.append(cycle)

    @property
    def alphabet(self) -> Alphabet:
        """The alphabet this permutation was built against."""
        return self._alphabet

    @property
    def cycles(self) -> tuple[str, ...]:
        """The non-empty cycles, in the order they were given."""
        return tuple(self._cycles)

    def size(self) -> int:
        """Return the size of the alphabet I permute."""
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        """Return P modulo the size of this permutation."""
        return p % self._alphabet.size()

    @overload
    def permute(self, p: int) -> int: ...

    @overload
    def permute(self, p: str) -> str: ...

    def permute(self, p: Union[int, str]) -> Union[int, str]:
        """Apply this permutation.

        Integer input is reduced modulo the alphabet size first and an index
        is returned. Character input returns a character.
        """
        if isinstance(p, str):
            return self._alphabet.to_char(int(self._forward[self._alphabet.to_int(p)]))
        return int(self._forward[self.wrap(p)])

    @overload
    def invert(self, c: int) -> int: ...

    @overload
    def invert(self, c: str) -> str: ...

    def invert(self, c: Union[int, str]) -> Union[int, str]:
        """Apply the inverse of this permutation (see ``permute``)."""
        if isinstance(c, str):
            return self._alphabet.to_char(int(self._inverse[self._alphabet.to_int(c)]))
        return int(self._inverse[self.wrap(c)])

    def derangement(self) -> bool:
        """Return True iff no index maps to itself."""
        return not bool(numpy.any(self._forward == numpy.arange(self.size())))

    def __str__(self) -> str:
        return " ".join(f"({cycle})" for cycle in self._cycles)

    def __repr__(self) -> str:
        return f"Permutation({str(self)!r}, {self._alphabet!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Permutation):
            return self._alphabet == other._alphabet and numpy.array_equal(self._forward, other._forward)
        return NotImplemented
