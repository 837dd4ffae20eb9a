"""Enigma Rotors

A rotor is a wheel carrying a Permutation and a rotational setting. Three
kinds exist:

- REFLECTOR: leftmost wheel; its permutation has no fixed points and it
  never turns.
- FIXED: a wheel that never turns (e.g. the M4 Greek wheels).
- MOVING: a wheel that can be stepped by a pawl, with one or more notches.

All kinds share one class; the ``kind`` tag selects the behaviour of
``set``, ``at_notch`` and ``advance``.

Rotors are built once per name when a configuration is loaded and kept in a
RotorPool. A Machine places fresh copies of pool rotors into its slots.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from enigma.core.alphabet import Alphabet
from enigma.core.errors import (
    DuplicateRotorName,
    NotDerangement,
    NotInAlphabet,
    ReflectorPosition,
    UnknownRotor,
)
from enigma.core.permutation import Permutation

__all__ = [
    "RotorKind",
    "Rotor",
    "RotorPool",
]


class RotorKind(IntEnum):
    """Rotor variants."""

    REFLECTOR = 0
    FIXED = 1
    MOVING = 2


@dataclass(eq=False)
class Rotor:
    """A rotor wheel.

    Use the ``reflector``, ``fixed`` and ``moving`` constructors rather than
    instantiating directly; they check the per-kind invariants.

    Example:
    -------
        alpha = Alphabet(UPPER)
        rotor = Rotor.moving("I", Permutation("(AELTPHQXRU) (BKNW)", alpha), "Q")
        rotor.set("Q")
        rotor.at_notch()          # True
        rotor.advance()
        rotor.setting()           # 17 (R)
    """

    name: str
    permutation: Permutation
    kind: RotorKind = RotorKind.FIXED
    notches: frozenset[int] = frozenset()
    _setting: int = field(default=0, init=False, repr=False)

    @classmethod
    def reflector(cls, name: str, perm: Permutation) -> Rotor:
        """Create a reflector named NAME.

        Raises:
        ------
            NotDerangement: If PERM maps any character to itself.
        """
        if not perm.derangement():
            raise NotDerangement(f"Reflector {name} has a fixed point: {perm}")
        return cls(name, perm, RotorKind.REFLECTOR)

    @classmethod
    def fixed(cls, name: str, perm: Permutation) -> Rotor:
        """Create a rotor named NAME that never turns."""
        return cls(name, perm, RotorKind.FIXED)

    @classmethod
    def moving(cls, name: str, perm: Permutation, notches: str) -> Rotor:
        """Create a rotor named NAME with notches at the letters in NOTCHES.

        Raises:
        ------
            NotInAlphabet: If a notch letter is not in the alphabet.
        """
        positions = frozenset(perm.alphabet.to_int(char) for char in notches)
        return cls(name, perm, RotorKind.MOVING, positions)

    def copy(self) -> Rotor:
        """Return a fresh rotor with my wiring and notches, at setting 0."""
        return Rotor(self.name, self.permutation, self.kind, self.notches)

    @property
    def alphabet(self) -> Alphabet:
        """The alphabet my permutation is over."""
        return self.permutation.alphabet

    def size(self) -> int:
        """Return the size of my alphabet."""
        return self.permutation.size()

    def rotates(self) -> bool:
        """Return True iff I have a ratchet and can move."""
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        """Return True iff I reflect."""
        return self.kind is RotorKind.REFLECTOR

    def setting(self) -> int:
        """Return my current setting."""
        return self._setting

    def set(self, posn: Union[int, str]) -> None:
        """Set my rotor to POSN, an index or a character of my alphabet.

        Raises:
        ------
            NotInAlphabet: If POSN is not a member or index of the alphabet.
            ReflectorPosition: If I am a reflector and POSN is not 0.
        """
        if isinstance(posn, str):
            posn = self.alphabet.to_int(posn)
        elif not 0 <= posn < self.size():
            raise NotInAlphabet(f"Setting {posn} out of range for rotor {self.name}")

        if self.kind is RotorKind.REFLECTOR and posn != 0:
            raise ReflectorPosition(f"Reflector {self.name} has only one position")
        self._setting = posn

    def convert_forward(self, p: int) -> int:
        """Return the contact P maps to on the way towards the reflector."""
        perm = self.permutation
        return perm.wrap(perm.permute(p + self._setting) - self._setting)

    def convert_backward(self, e: int) -> int:
        """Return the contact E maps to on the way back from the reflector."""
        perm = self.permutation
        return perm.wrap(perm.invert(e + self._setting) - self._setting)

    def at_notch(self) -> bool:
        """Return True iff I am a moving rotor positioned at a notch."""
        return self.kind is RotorKind.MOVING and self._setting in self.notches

    def advance(self) -> None:
        """Advance me one position, if I am a moving rotor."""
        if self.kind is RotorKind.MOVING:
            self._setting = (self._setting + 1) % self.size()

    def __str__(self) -> str:
        return f"Rotor {self.name}"


class RotorPool:
    """The rotors available to a machine, looked up by name.

    Names compare case-insensitively, so ``beta`` resolves to ``Beta``.
    """

    def __init__(self, rotors: Iterable[Rotor] = ()) -> None:
        self._rotors: dict[str, Rotor] = {}
        for rotor in rotors:
            self.add(rotor)

    def add(self, rotor: Rotor) -> None:
        """Add ROTOR to the pool.

        Raises:
        ------
            DuplicateRotorName: If a rotor with the same name is present.
        """
        key = rotor.name.upper()
        if key in self._rotors:
            raise DuplicateRotorName(f"Rotor {rotor.name} defined more than once")
        self._rotors[key] = rotor

    def resolve(self, name: str) -> Rotor:
        """Return the rotor named NAME.

        Raises:
        ------
            UnknownRotor: If no rotor has that name.
        """
        try:
            return self._rotors[name.upper()]
        except KeyError as err:
            raise UnknownRotor(f"Invalid rotor: {name}") from err

    def names(self) -> list[str]:
        """Return the rotor names, in the order they were added."""
        return [rotor.name for rotor in self._rotors.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._rotors

    def __iter__(self) -> Iterator[Rotor]:
        return iter(self._rotors.values())

    def __len__(self) -> int:
        return len(self._rotors)
