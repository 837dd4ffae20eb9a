"""Enigma Machine Assembly

This module provides the moving parts of the simulator:
- Rotor (reflector, fixed and moving variants)
- RotorPool (rotors available to a machine, by name)
- Machine (stepping and signal path)
"""

from enigma.machine.machine import Machine
from enigma.machine.rotor import Rotor, RotorKind, RotorPool

__all__ = [
    "Machine",
    "Rotor",
    "RotorKind",
    "RotorPool",
]
