"""
Message text helpers.

Messages are typed without spaces and in upper case, and the output is
printed in groups of five letters, the last group possibly shorter.
"""

from __future__ import annotations

import re

from enigma.core.constants import GROUP_SIZE

__all__ = ["normalize", "group"]

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(line: str) -> str:
    """
    Strip all whitespace from LINE and upper-case it.

    Examples:
        >>> normalize("FROM his shoulder")
        'FROMHISSHOULDER'
    """
    return _WHITESPACE_RE.sub("", line).upper()


def group(msg: str, size: int = GROUP_SIZE) -> str:
    """
    Split MSG into space-separated groups of SIZE characters.

    Examples:
        >>> group("QVPQSOKOILPUBKJ")
        'QVPQS OKOIL PUBKJ'
        >>> group("ABCDEFG")
        'ABCDE FG'
    """
    if size < 1:
        raise ValueError(f"Group size must be positive, got {size}")
    return " ".join(msg[i : i + size] for i in range(0, len(msg), size))
