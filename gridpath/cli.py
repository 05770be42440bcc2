"""Command parsing for the puzzle runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


USAGE = """usage:
  gridpath list
  gridpath <year> <day> [input-file]
  gridpath solve <year> <day> [input-file]"""


@dataclass
class CLICommand:
    """Result of parsing the command line."""
    name: str
    args: List[str]


def parse_command(argv: Sequence[str]) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``argv`` or ``None`` if unrecognised.

    A bare ``<year> <day>`` is shorthand for ``solve <year> <day>``.
    """

    parts = [a.strip() for a in argv if a.strip()]
    if not parts:
        return None

    cmd = parts[0].lower()

    if cmd in ("list", "help"):
        return CLICommand(name=cmd, args=[])

    if cmd == "solve":
        args = parts[1:]
    elif cmd.isdigit():
        args = parts
    else:
        return None

    if not 2 <= len(args) <= 3:
        return None
    return CLICommand(name="solve", args=args)


__all__ = ["CLICommand", "USAGE", "parse_command"]
