from enigma.config import MachineConfig, Settings, historical_config, load_config, parse_config, parse_settings
from enigma.core import Alphabet, EnigmaError, ErrorKind, Permutation
from enigma.machine import Machine, Rotor, RotorKind, RotorPool

__all__ = [
    'Alphabet',
    'Permutation',
    'Rotor',
    'RotorKind',
    'RotorPool',
    'Machine',
    'MachineConfig',
    'Settings',
    'parse_config',
    'load_config',
    'historical_config',
    'parse_settings',
    'EnigmaError',
    'ErrorKind',
]
