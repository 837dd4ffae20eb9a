"""Enigma Machine

Composes a reflector, a row of rotors and an optional plugboard into the
signal path of a rotor cipher machine.

Slots are numbered left to right; slot 0 holds the reflector. A key press
first steps the rotors, then sends the signal:

    plugboard -> slots n-1 .. 0 (forward) -> slots 1 .. n-1 (backward) -> plugboard

Stepping:
- Only the rightmost ``pawls`` slots can ever move.
- The rightmost rotor moves on every key press.
- A rotor sitting at a notch moves itself and its left neighbour. When the
  middle rotor of three reaches its notch it therefore moves twice in a row
  (the historical "double step").
- Which rotors move is decided from the settings before the key press, then
  all of them move once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Optional, Union, overload

import numpy

from enigma.core.alphabet import Alphabet
from enigma.core.errors import (
    BadMachineShape,
    BadSettingLength,
    DuplicateRotor,
    NotConfigured,
    NotInAlphabet,
    ReflectorRequired,
    TooManyMovingRotors,
    WrongRotorCount,
)
from enigma.core.permutation import Permutation
from enigma.machine.rotor import Rotor, RotorPool

__all__ = ["Machine"]

logger = logging.getLogger(__name__)


class Machine:
    """A complete rotor cipher machine.

    Example:
    -------
        machine = Machine(alpha, 5, 3, pool)
        machine.configure(["B", "Beta", "I", "II", "III"], "AAAA")
        machine.convert("AAAAA")   # 'BDZGO'
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Union[RotorPool, Iterable[Rotor]],
    ) -> None:
        """Create a machine with NUM_ROTORS slots and PAWLS pawls.

        Args:
        ----
            alphabet: The alphabet of every rotor.
            num_rotors: Number of rotor slots, reflector included (> 1).
            pawls: Number of rotors able to move (0 <= pawls < num_rotors).
            all_rotors: The rotors available for insertion.

        Raises:
        ------
            BadMachineShape: If the slot or pawl count is out of range.
        """
        if num_rotors <= 1:
            raise BadMachineShape(f"Must have at least 2 rotor slots, got {num_rotors}")
        if not 0 <= pawls < num_rotors:
            raise BadMachineShape(f"Pawls must be in 0..{num_rotors - 1}, got {pawls}")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls
        self._all_rotors = all_rotors if isinstance(all_rotors, RotorPool) else RotorPool(all_rotors)
        self._slots: list[Rotor] = []
        self._plugboard: Optional[Permutation] = None

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        """The placed rotors, reflector first."""
        return tuple(self._slots)

    @property
    def plugboard(self) -> Optional[Permutation]:
        return self._plugboard

    @property
    def configured(self) -> bool:
        """True once rotors have been inserted."""
        return bool(self._slots)

    def num_rotors(self) -> int:
        """Return the number of rotor slots I have."""
        return self._num_rotors

    def num_pawls(self) -> int:
        """Return the number of pawls (and thus rotating rotors) I have."""
        return self._pawls

    def settings(self) -> str:
        """Return the current settings of the non-reflector rotors as letters."""
        return "".join(self._alphabet.to_char(rotor.setting()) for rotor in self._slots[1:])

    # ── setup ─────────────────────────────────────────────────────

    def insert_rotors(self, names: Sequence[str]) -> None:
        """Fill my slots with the rotors named NAMES, reflector first.

        Every placed rotor starts at setting 0.

        Raises:
        ------
            WrongRotorCount: If NAMES does not name one rotor per slot.
            UnknownRotor: If a name is not in my pool.
            DuplicateRotor: If a rotor is named twice.
            ReflectorRequired: If the first rotor is not a reflector.
            TooManyMovingRotors: If there are more moving rotors than pawls.
        """
        if len(names) != self._num_rotors:
            raise WrongRotorCount(f"Expected {self._num_rotors} rotors, got {len(names)}")

        slots = []
        seen: set[str] = set()
        for name in names:
            template = self._all_rotors.resolve(name)
            key = template.name.upper()
            if key in seen:
                raise DuplicateRotor(f"Rotor {template.name} used more than once")
            seen.add(key)
            slots.append(template.copy())

        if not slots[0].reflecting():
            raise ReflectorRequired(f"First rotor must be a reflector, got {slots[0].name}")

        moving = sum(1 for rotor in slots if rotor.rotates())
        if moving > self._pawls:
            raise TooManyMovingRotors(f"{moving} moving rotors but only {self._pawls} pawls")

        self._slots = slots
        logger.debug(f"Inserted rotors {' '.join(rotor.name for rotor in slots)}")

    def set_rotors(self, setting: str) -> None:
        """Set the non-reflector rotors from SETTING, leftmost first.

        Raises:
        ------
            NotConfigured: If no rotors have been inserted.
            BadSettingLength: If SETTING is not one letter per rotor.
            NotInAlphabet: If a letter is not in the alphabet.
        """
        if not self._slots:
            raise NotConfigured("Insert rotors before setting them")
        self._check_setting(setting)

        for rotor, char in zip(self._slots[1:], setting):
            rotor.set(char)
        logger.debug(f"Rotors set to {setting}")

    def _check_setting(self, setting: str) -> None:
        if len(setting) != self._num_rotors - 1:
            raise BadSettingLength(f"Setting must have {self._num_rotors - 1} characters, got {setting!r}")
        for char in setting:
            if not self._alphabet.contains(char):
                raise NotInAlphabet(f"Initial setting character {char!r} not in alphabet")

    def set_plugboard(self, plugboard: Union[Permutation, str, None]) -> None:
        """Set the plugboard to PLUGBOARD, given as a permutation or cycles.

        ``None`` removes the plugboard.
        """
        if isinstance(plugboard, str):
            plugboard = Permutation(plugboard, self._alphabet)
        self._plugboard = plugboard
        logger.debug(f"Plugboard set to {plugboard}")

    def configure(
        self,
        names: Sequence[str],
        setting: str,
        plugboard: Union[Permutation, str, None] = None,
    ) -> None:
        """Insert rotors, set them and set the plugboard in one step.

        The setting and plugboard are checked before any rotor is placed,
        so a failed call leaves the machine as it was.
        """
        self._check_setting(setting)
        if isinstance(plugboard, str):
            plugboard = Permutation(plugboard, self._alphabet)
        self.insert_rotors(names)
        self.set_rotors(setting)
        self.set_plugboard(plugboard)

    # ── operation ─────────────────────────────────────────────────

    def advance_all(self) -> None:
        """Advance every rotor whose pawl engages on this key press.

        Raises:
        ------
            NotConfigured: If no rotors have been inserted.
        """
        if not self._slots:
            raise NotConfigured("Machine must be set up before advancing")
        n = self._num_rotors
        advance = numpy.zeros(n, dtype=bool)
        for i in range(n - self._pawls + 1, n):
            if self._slots[i].at_notch():
                advance[i - 1] = True
                advance[i] = True
        advance[-1] = True

        for rotor, flag in zip(self._slots, advance):
            if flag:
                rotor.advance()

    @overload
    def convert(self, c: int) -> int: ...

    @overload
    def convert(self, c: str) -> str: ...

    def convert(self, c: Union[int, str]) -> Union[int, str]:
        """Encode or decode C, advancing the rotors first.

        An integer is treated as a single alphabet index and an index is
        returned. A string is converted character by character.

        Raises:
        ------
            NotConfigured: If no rotors have been inserted.
            NotInAlphabet: If a message character is not in the alphabet.
        """
        if not self._slots:
            raise NotConfigured("Machine must be set up before converting")

        if isinstance(c, str):
            return "".join(self._alphabet.to_char(self._convert_index(self._alphabet.to_int(char))) for char in c)
        return self._convert_index(c)

    def _convert_index(self, c: int) -> int:
        self.advance_all()
        if self._plugboard is not None:
            c = self._plugboard.permute(c)
        for rotor in reversed(self._slots):
            c = rotor.convert_forward(c)
        for rotor in self._slots[1:]:
            c = rotor.convert_backward(c)
        if self._plugboard is not None:
            c = self._plugboard.permute(c)
        return c
