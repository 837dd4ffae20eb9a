"""
Command-line entry point.

    python -m enigma CONFIG [INPUT [OUTPUT]]

Reads the machine description from CONFIG, then converts the settings and
message lines of INPUT (standard input by default), writing the result to
OUTPUT (standard output by default). Exits with status 1 after printing
``Error: ...`` on any configuration, input or file error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from enigma.config import load_config
from enigma.core.errors import EnigmaError
from enigma.driver import process

logger = logging.getLogger(__name__)


def _open(name: Optional[str], mode: str, default: TextIO) -> TextIO:
    if name is None:
        return default
    return open(name, mode, encoding="utf-8")


def run(config_path: str, input_path: Optional[str] = None, output_path: Optional[str] = None) -> None:
    """Convert INPUT_PATH to OUTPUT_PATH with the machine in CONFIG_PATH."""
    config = load_config(config_path)

    source = _open(input_path, "r", sys.stdin)
    try:
        sink = _open(output_path, "w", sys.stdout)
        try:
            for line in process(config, source):
                sink.write(line + "\n")
        finally:
            if sink is not sys.stdout:
                sink.close()
    finally:
        if source is not sys.stdin:
            source.close()


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="enigma", description="Rotor cipher machine simulator")
    p.add_argument("config", help="machine configuration file")
    p.add_argument("input", nargs="?", help="settings and messages (default: stdin)")
    p.add_argument("output", nargs="?", help="converted messages (default: stdout)")
    p.add_argument("-v", "--verbose", action="store_true", help="log machine setup to stderr")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        run(args.config, args.input, args.output)
    except OSError as err:
        if err.filename is None:
            print(f"Error: {err.strerror or err}", file=sys.stderr)
        else:
            print(f"Error: could not open {err.filename}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as err:
        print(f"Error: input is not valid UTF-8 ({err.reason})", file=sys.stderr)
        return 1
    except EnigmaError as err:
        logger.debug(f"Stopped on {err.kind.name}")
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
