"""Enigma Alphabet

Bidirectional mapping between an ordered set of unique characters and the
dense indices ``0 .. size - 1`` that the rotors and permutations work in.

An Alphabet is built once from configuration text and never changes. The
machine and every permutation built against it share the same instance.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from enigma.core.errors import DuplicateAlphabetMember, EmptyAlphabet, NotInAlphabet, OutOfRange

__all__ = ["Alphabet"]


@dataclass(frozen=True, slots=True)
class Alphabet:
    """An ordered set of encodable characters.

    Examples
    --------
        >>> alpha = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        >>> alpha.to_int("C")
        2
        >>> alpha.to_char(25)
        'Z'
        >>> "a" in alpha
        False
    """

    _chars: str
    _index: dict[str, int]

    def __init__(self, chars: str) -> None:
        """Create an Alphabet from CHARS.

        Character number k has index k. No character may repeat.

        Args:
        ----
            chars: The characters of the alphabet, in order.

        Raises:
        ------
            EmptyAlphabet: If CHARS is empty.
            DuplicateAlphabetMember: If a character appears more than once.
        """
        if not chars:
            raise EmptyAlphabet("Alphabet must contain at least one character")

        index: dict[str, int] = {}
        for i, char in enumerate(chars):
            if char in index:
                raise DuplicateAlphabetMember(f"Duplicate character in alphabet: {char!r}")
            index[char] = i

        object.__setattr__(self, "_chars", chars)
        object.__setattr__(self, "_index", index)

    @property
    def chars(self) -> str:
        """The alphabet as a string, in index order."""
        return self._chars

    def size(self) -> int:
        """Return the number of characters."""
        return len(self._chars)

    def contains(self, char: str) -> bool:
        """Return True if CHAR is in this alphabet."""
        return char in self._index

    def to_char(self, index: int) -> str:
        """Return character number INDEX.

        Raises:
        ------
            OutOfRange: If INDEX is not in ``0 .. size - 1``.
        """
        if not 0 <= index < len(self._chars):
            raise OutOfRange(f"Index {index} out of range 0-{len(self._chars) - 1}")
        return self._chars[index]

    def to_int(self, char: str) -> int:
        """Return the index of CHAR.

        Raises:
        ------
            NotInAlphabet: If CHAR is not in this alphabet.
        """
        try:
            return self._index[char]
        except KeyError as err:
            raise NotInAlphabet(f"Character {char!r} is not in the alphabet") from err

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, char: object) -> bool:
        return char in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return self._chars

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Alphabet):
            return self._chars == other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)
