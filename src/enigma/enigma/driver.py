"""
Line-processing driver.

Feeds a stream of input lines through a machine:

- A line starting with ``*`` sets the machine up.
- A blank line is copied to the output.
- Any other line is a message: whitespace is dropped, letters are
  upper-cased, and the converted text is emitted in groups of five.

The first line must be a settings line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from enigma.config import MachineConfig, parse_settings
from enigma.core.constants import SETTINGS_MARKER
from enigma.core.errors import MalformedSettings
from enigma.text import group, normalize

__all__ = ["process"]

logger = logging.getLogger(__name__)


def process(config: MachineConfig, lines: Iterable[str]) -> Iterator[str]:
    """
    Convert LINES with a machine built from CONFIG.

    Args:
        config: Machine description.
        lines: Input lines, with or without trailing newlines.

    Yields:
        One output line (without newline) per settings-free input line.

    Raises:
        MalformedSettings: If the input does not start with settings.
        EnigmaError: If a settings line or message is invalid.
    """
    machine = config.build_machine()
    first = True

    for raw in lines:
        line = raw.rstrip("\r\n")
        if first:
            if not line.startswith(SETTINGS_MARKER):
                raise MalformedSettings("Input must start with settings")
            first = False

        if line.startswith(SETTINGS_MARKER):
            settings = parse_settings(line, machine.num_rotors())
            settings.apply(machine)
            logger.debug(f"Machine set up: {settings}")
        elif not line.strip():
            yield ""
        else:
            yield group(machine.convert(normalize(line)))
