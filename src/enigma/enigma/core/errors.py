"""Enigma Error Kinds

Every failure the simulator can report is an ``EnigmaError``. Each subclass
carries an ``ErrorKind`` so callers can branch on the kind without matching
on class names or messages.

All errors derive from ``ValueError``: they describe bad configuration or
bad input, never an internal fault.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "ErrorKind",
    "EnigmaError",
    "NotInAlphabet",
    "OutOfRange",
    "EmptyAlphabet",
    "DuplicateAlphabetMember",
    "MalformedCycles",
    "DuplicateCycleMember",
    "MalformedWiring",
    "NotDerangement",
    "ReflectorPosition",
    "BadMachineShape",
    "UnknownRotor",
    "DuplicateRotorName",
    "WrongRotorCount",
    "DuplicateRotor",
    "ReflectorRequired",
    "TooManyMovingRotors",
    "BadSettingLength",
    "NotConfigured",
    "MalformedConfig",
    "MalformedSettings",
]


class ErrorKind(IntEnum):
    """Failure kinds reported by the simulator."""

    # Alphabet and permutation construction
    NOT_IN_ALPHABET = 1
    OUT_OF_RANGE = 2
    EMPTY_ALPHABET = 3
    DUPLICATE_ALPHABET_MEMBER = 4
    MALFORMED_CYCLES = 5
    DUPLICATE_CYCLE_MEMBER = 6
    MALFORMED_WIRING = 7

    # Rotors
    NOT_DERANGEMENT = 10
    REFLECTOR_POSITION = 11

    # Machine setup
    BAD_MACHINE_SHAPE = 20
    UNKNOWN_ROTOR = 21
    DUPLICATE_ROTOR_NAME = 22
    WRONG_ROTOR_COUNT = 23
    DUPLICATE_ROTOR = 24
    REFLECTOR_REQUIRED = 25
    TOO_MANY_MOVING_ROTORS = 26
    BAD_SETTING_LENGTH = 27
    NOT_CONFIGURED = 28

    # Configuration text
    MALFORMED_CONFIG = 30
    MALFORMED_SETTINGS = 31


class EnigmaError(ValueError):
    """Base class for every simulator error."""

    kind: ErrorKind


class NotInAlphabet(EnigmaError):
    kind = ErrorKind.NOT_IN_ALPHABET


class OutOfRange(EnigmaError):
    kind = ErrorKind.OUT_OF_RANGE


class EmptyAlphabet(EnigmaError):
    kind = ErrorKind.EMPTY_ALPHABET


class DuplicateAlphabetMember(EnigmaError):
    kind = ErrorKind.DUPLICATE_ALPHABET_MEMBER


class MalformedCycles(EnigmaError):
    kind = ErrorKind.MALFORMED_CYCLES


class DuplicateCycleMember(EnigmaError):
    kind = ErrorKind.DUPLICATE_CYCLE_MEMBER


class MalformedWiring(EnigmaError):
    kind = ErrorKind.MALFORMED_WIRING


class NotDerangement(EnigmaError):
    kind = ErrorKind.NOT_DERANGEMENT


class ReflectorPosition(EnigmaError):
    kind = ErrorKind.REFLECTOR_POSITION


class BadMachineShape(EnigmaError):
    kind = ErrorKind.BAD_MACHINE_SHAPE


class UnknownRotor(EnigmaError):
    kind = ErrorKind.UNKNOWN_ROTOR


class DuplicateRotorName(EnigmaError):
    kind = ErrorKind.DUPLICATE_ROTOR_NAME


class WrongRotorCount(EnigmaError):
    kind = ErrorKind.WRONG_ROTOR_COUNT


class DuplicateRotor(EnigmaError):
    kind = ErrorKind.DUPLICATE_ROTOR


class ReflectorRequired(EnigmaError):
    kind = ErrorKind.REFLECTOR_REQUIRED


class TooManyMovingRotors(EnigmaError):
    kind = ErrorKind.TOO_MANY_MOVING_ROTORS


class BadSettingLength(EnigmaError):
    kind = ErrorKind.BAD_SETTING_LENGTH


class NotConfigured(EnigmaError):
    kind = ErrorKind.NOT_CONFIGURED


class MalformedConfig(EnigmaError):
    kind = ErrorKind.MALFORMED_CONFIG


class MalformedSettings(EnigmaError):
    kind = ErrorKind.MALFORMED_SETTINGS
