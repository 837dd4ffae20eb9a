"""Enigma Configuration

Reads machine descriptions and settings lines.

Configuration text::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ
     5 3
     I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
     Beta N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
     B R       (AE) (BN) (CK) (DQ) (FU) (GY) (HZ) (IJ) (LO) (MP)
               (RX) (SV) (TW)

- Line 1: the alphabet.
- Line 2: number of rotor slots and number of pawls.
- Then one line per rotor: name, type, cycles. The type is ``R`` for a
  reflector, ``N`` for a fixed rotor, or ``M`` followed by the notch letters
  for a moving rotor. A line starting with ``(`` continues the cycles of the
  rotor above it.

Settings line::

    * B Beta III IV I AXLE (YF) (ZH)

reflector and rotor names (one per slot), the initial rotor setting, then
optional plugboard cycles.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from enigma.core.alphabet import Alphabet
from enigma.core.constants import (
    FIXED_WIRINGS,
    M4_NUM_ROTORS,
    M4_PAWLS,
    REFLECTOR_WIRINGS,
    RESERVED_CHARS,
    ROTOR_NOTCHES,
    ROTOR_WIRINGS,
    SETTINGS_MARKER,
    UPPER,
)
from enigma.core.errors import MalformedConfig, MalformedSettings
from enigma.core.permutation import Permutation
from enigma.machine.machine import Machine
from enigma.machine.rotor import Rotor, RotorPool

__all__ = [
    "MachineConfig",
    "Settings",
    "parse_config",
    "load_config",
    "historical_config",
    "parse_settings",
]

logger = logging.getLogger(__name__)

_COUNTS_RE = re.compile(r"(\d+)\s+(\d+)")


@dataclass
class MachineConfig:
    """A loaded machine description.

    Attributes
    ----------
        alphabet: Alphabet shared by every rotor.
        num_rotors: Number of rotor slots, reflector included.
        pawls: Number of slots able to move.
        rotors: Available rotors.
    """

    alphabet: Alphabet
    num_rotors: int
    pawls: int
    rotors: RotorPool

    def build_machine(self) -> Machine:
        """Return a new, not yet set up, machine for this description."""
        return Machine(self.alphabet, self.num_rotors, self.pawls, self.rotors)


@dataclass(frozen=True)
class Settings:
    """A parsed settings line.

    Attributes
    ----------
        rotors: Rotor names, reflector first.
        setting: Initial settings of the non-reflector rotors.
        plugboard: Plugboard cycles, empty for none.
    """

    rotors: tuple[str, ...]
    setting: str
    plugboard: str = ""

    def apply(self, machine: Machine) -> None:
        """Set MACHINE up according to these settings."""
        machine.configure(self.rotors, self.setting, self.plugboard or None)


def _parse_alphabet(line: str) -> Alphabet:
    chars = line.strip().upper()
    if not chars:
        raise MalformedConfig("Invalid or non-existent alphabet in config file")
    for char in chars:
        if char.isspace() or char in RESERVED_CHARS:
            raise MalformedConfig(f"Invalid character in alphabet: {char!r}")

    unique = "".join(dict.fromkeys(chars))
    if unique != chars:
        logger.warning(f"Dropped duplicate characters from alphabet {chars!r}")
    return Alphabet(unique)


def _parse_counts(line: str) -> tuple[int, int]:
    match = _COUNTS_RE.fullmatch(line.strip())
    if match is None:
        raise MalformedConfig(f"Invalid setting for rotor quantity and pawls: {line.strip()!r}")
    return int(match.group(1)), int(match.group(2))


def _build_rotor(name: str, type_spec: str, cycles: str, alphabet: Alphabet) -> Rotor:
    kind, notches = type_spec[0], type_spec[1:]
    if kind not in "MNR":
        raise MalformedConfig(f"Bad rotor description: {name} {type_spec}")
    perm = Permutation(cycles, alphabet)
    if kind == "M":
        return Rotor.moving(name, perm, notches)
    if notches:
        raise MalformedConfig(f"Only moving rotors have notches: {name} {type_spec}")
    if kind == "N":
        return Rotor.fixed(name, perm)
    return Rotor.reflector(name, perm)


def parse_config(text: str) -> MachineConfig:
    """Parse configuration TEXT.

    Args:
    ----
        text: Full configuration, see the module documentation.

    Returns:
    -------
        The machine description.

    Raises:
    ------
        MalformedConfig: If the text does not follow the grammar.
        EnigmaError: Any error raised while building the rotors.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise MalformedConfig("Configuration file truncated")

    alphabet = _parse_alphabet(lines[0])
    num_rotors, pawls = _parse_counts(lines[1])

    # name, type, cycle fragments
    descriptions: list[tuple[str, str, list[str]]] = []
    for line in lines[2:]:
        stripped = line.strip()
        if stripped.startswith("("):
            if not descriptions:
                raise MalformedConfig(f"Cycles with no rotor: {stripped!r}")
            descriptions[-1][2].append(stripped)
            continue

        fields = stripped.split(None, 2)
        if len(fields) < 2:
            raise MalformedConfig(f"Bad rotor description: {stripped!r}")
        name, type_spec = fields[0], fields[1].upper()
        descriptions.append((name, type_spec, fields[2:]))

    pool = RotorPool(
        _build_rotor(name, type_spec, " ".join(cycles).upper(), alphabet)
        for name, type_spec, cycles in descriptions
    )
    logger.debug(f"Loaded {len(pool)} rotors for a {num_rotors}-slot machine with {pawls} pawls")
    return MachineConfig(alphabet, num_rotors, pawls, pool)


def load_config(path: Union[str, Path]) -> MachineConfig:
    """Read and parse the configuration file at PATH."""
    return parse_config(Path(path).read_text(encoding="utf-8"))


def historical_config(num_rotors: int = M4_NUM_ROTORS, pawls: int = M4_PAWLS) -> MachineConfig:
    """Return the naval M4 rotor set over the 26-letter alphabet.

    The pool holds moving rotors I-VIII, the fixed Greek wheels Beta and
    Gamma, and the thin reflectors B and C.
    """
    alphabet = Alphabet(UPPER)
    pool = RotorPool()
    for name, wiring in ROTOR_WIRINGS.items():
        pool.add(Rotor.moving(name, Permutation.from_wiring(wiring, alphabet), ROTOR_NOTCHES[name]))
    for name, wiring in FIXED_WIRINGS.items():
        pool.add(Rotor.fixed(name, Permutation.from_wiring(wiring, alphabet)))
    for name, wiring in REFLECTOR_WIRINGS.items():
        pool.add(Rotor.reflector(name, Permutation.from_wiring(wiring, alphabet)))
    return MachineConfig(alphabet, num_rotors, pawls, pool)


def parse_settings(line: str, num_rotors: int) -> Settings:
    """Parse a settings line for a machine with NUM_ROTORS slots.

    Raises:
    ------
        MalformedSettings: If LINE is not a settings line or is too short.
    """
    stripped = line.strip()
    if not stripped.startswith(SETTINGS_MARKER):
        raise MalformedSettings(f"Settings line must start with {SETTINGS_MARKER!r}: {stripped!r}")

    fields = stripped[len(SETTINGS_MARKER) :].split()
    if len(fields) <= num_rotors:
        raise MalformedSettings(f"Not enough arguments provided: {stripped!r}")

    return Settings(
        rotors=tuple(fields[:num_rotors]),
        setting=fields[num_rotors],
        plugboard=" ".join(fields[num_rotors + 1 :]),
    )
