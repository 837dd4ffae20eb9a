"""
Enigma Constants

Standard alphabet and the published wirings of the German naval (M4)
rotor set.

Wirings are substitution strings: character k of the wiring is the image of
character k of the alphabet with the rotor at position A. Notch letters are
the positions at which a rotor engages the pawl of its left neighbour.
"""

from __future__ import annotations

import string

__all__ = [
    # Alphabet
    "UPPER",
    "GROUP_SIZE",
    "SETTINGS_MARKER",
    "RESERVED_CHARS",
    # Wirings
    "ROTOR_WIRINGS",
    "ROTOR_NOTCHES",
    "FIXED_WIRINGS",
    "REFLECTOR_WIRINGS",
    # Machine shape
    "M4_NUM_ROTORS",
    "M4_PAWLS",
]

# ============================================================================
# Alphabet and text layout
# ============================================================================

UPPER: str = string.ascii_uppercase

# Output is printed in blocks of five letters
GROUP_SIZE: int = 5

# First character of a settings line
SETTINGS_MARKER: str = "*"

# Characters with a meaning in configuration text, never alphabet members
RESERVED_CHARS: str = "()" + SETTINGS_MARKER

# ============================================================================
# Rotor wirings
# ============================================================================

ROTOR_WIRINGS: dict[str, str] = {
    "I": "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
    "II": "AJDKSIRUXBLHWTMCQGZNPYFVOE",
    "III": "BDFHJLCPRTXVZNYEIWGAKMUSQO",
    "IV": "ESOVPZJAYQUIRHXLNFTGKDCMWB",
    "V": "VZBRGITYUPSDNHLXAWMJQOFECK",
    "VI": "JPGVOUMFYQBENHZRDKASXLICTW",
    "VII": "NZJHGRCXMYSWBOUFAIVLPEKQDT",
    "VIII": "FKQHTLXOCBJSPDZRAMEWNIUYGV",
}

ROTOR_NOTCHES: dict[str, str] = {
    "I": "Q",
    "II": "E",
    "III": "V",
    "IV": "J",
    "V": "Z",
    "VI": "ZM",
    "VII": "ZM",
    "VIII": "ZM",
}

# Greek wheels sit between the reflector and the moving rotors
FIXED_WIRINGS: dict[str, str] = {
    "Beta": "LEYJVCNIXWPBQMDRTAKZGFUHOS",
    "Gamma": "FSOKANUERHMBTIYCWLQPZXVGJD",
}

# Thin reflectors
REFLECTOR_WIRINGS: dict[str, str] = {
    "B": "ENKQAUYWJICOPBLMDXZVFTHRGS",
    "C": "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
}

# ============================================================================
# Machine shape
# ============================================================================

# Reflector, one Greek wheel, three moving rotors
M4_NUM_ROTORS: int = 5
M4_PAWLS: int = 3
