"""Enigma Core Components

This module contains the building blocks the machine is assembled from:
- Alphabet (character <-> index mapping)
- Permutation (cycle notation, forward and inverse lookup)
- Error kinds
- Historical wirings and other constants
"""

from enigma.core.alphabet import Alphabet
from enigma.core.constants import (
    FIXED_WIRINGS,
    GROUP_SIZE,
    M4_NUM_ROTORS,
    M4_PAWLS,
    REFLECTOR_WIRINGS,
    ROTOR_NOTCHES,
    ROTOR_WIRINGS,
    SETTINGS_MARKER,
    UPPER,
)
from enigma.core.errors import EnigmaError, ErrorKind
from enigma.core.permutation import Permutation

__all__ = [
    # Alphabet
    "Alphabet",
    # Permutation
    "Permutation",
    # Errors
    "EnigmaError",
    "ErrorKind",
    # Constants
    "UPPER",
    "GROUP_SIZE",
    "SETTINGS_MARKER",
    "ROTOR_WIRINGS",
    "ROTOR_NOTCHES",
    "FIXED_WIRINGS",
    "REFLECTOR_WIRINGS",
    "M4_NUM_ROTORS",
    "M4_PAWLS",
]
