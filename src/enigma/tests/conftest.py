"""Pytest configuration and fixtures for pyEnigma tests.

This module provides shared fixtures and configuration for the test suite.
"""

import random

import pytest

from enigma.config import historical_config, parse_config
from enigma.core.alphabet import Alphabet
from enigma.core.constants import UPPER

# Fixed seed for reproducible tests
# Random wirings generated in property tests are the same on every run
RANDOM_SEED = 42

# Enigma I rotors and the wide reflector B, written in cycle notation
ENIGMA_I_CONFIG = """\
ABCDEFGHIJKLMNOPQRSTUVWXYZ
 4 3
 I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
 II ME     (FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)
 III MV    (ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)
 UKW-B R   (AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN) (MO)
           (TZ) (VW)
"""


@pytest.fixture(autouse=True)
def seed_random():
    """Seed the random number generator for reproducible tests."""
    random.seed(RANDOM_SEED)
    yield


@pytest.fixture
def upper():
    """The 26-letter alphabet."""
    return Alphabet(UPPER)


@pytest.fixture
def m4_config():
    """Naval M4 rotor set: 5 slots, 3 pawls."""
    return historical_config()


@pytest.fixture
def m4(m4_config):
    """A machine built from the M4 rotor set, not yet set up."""
    return m4_config.build_machine()


@pytest.fixture
def enigma_i_config():
    """Enigma I rotor set loaded from configuration text."""
    return parse_config(ENIGMA_I_CONFIG)


def random_wiring(alphabet):
    """Return a random rearrangement of ALPHABET."""
    chars = list(alphabet)
    random.shuffle(chars)
    return "".join(chars)
