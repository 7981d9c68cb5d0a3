"""
Command parsing for the text interface.

Turns one line typed by the player into an Exit, Dig or Flag command.
Coordinates are a row letter followed by a 1-based column number,
e.g. ``dig c12``. Board bounds are not checked here.
"""
import logging
from dataclasses import dataclass
from typing import Tuple, Union

logger = logging.getLogger(__name__)

EXIT_WORDS = frozenset({"exit", "e", "quit", "q"})
DIG_WORDS = frozenset({"dig", "d"})
FLAG_WORDS = frozenset({"flag", "f"})
MAX_COLUMN_DIGITS = 9


# ============================================================================
# Errors
# ============================================================================

class CommandError(ValueError):
    """Base class for lines that could not be parsed."""


class UnknownCommand(CommandError):
    """The verb or single word is not a known command."""


class InvalidCoords(CommandError):
    """The coordinate token is malformed."""


# ============================================================================
# Commands
# ============================================================================

@dataclass(frozen=True)
class Exit:
    """End the session."""


@dataclass(frozen=True)
class Dig:
    """Dig the cell at (row, col)."""

    row: int
    col: int


@dataclass(frozen=True)
class Flag:
    """Flag the cell at (row, col)."""

    row: int
    col: int


Command = Union[Exit, Dig, Flag]


# ============================================================================
# Parsing
# ============================================================================

def parse_coord(token: str) -> Tuple[int, int]:
    """
    Parse a coordinate token such as ``a1`` or ``e20``.

    Args:
        token: Lowercase token, row letter first.

    Returns:
        Zero-based (row, col) tuple.

    Raises:
        InvalidCoords: If the token is not a letter followed by a
            positive decimal number.
    """
    if len(token) < 2:
        raise InvalidCoords(f"Coordinate too short: {token!r}")

    letter, number = token[0], token[1:]
    if not "a" <= letter <= "z":
        raise InvalidCoords(f"Row must be a letter: {token!r}")
    if not (number.isascii() and number.isdigit()):
        raise InvalidCoords(f"Column must be a number: {token!r}")

    if len(number) > MAX_COLUMN_DIGITS:
        raise InvalidCoords(f"Column number too long: {number[:12]}...")

    column = int(number)
    if column == 0:
        raise InvalidCoords("Columns are numbered from 1")

    return ord(letter) - ord("a"), column - 1


def parse_command(line: str) -> Command:
    """
    Parse one input line into a command.

    An empty string means the input is exhausted and maps to Exit.

    Raises:
        UnknownCommand: For an unrecognised verb or word.
        InvalidCoords: For a malformed coordinate after any verb.
    """
    if line == "":
        return Exit()

    text = line.lower().strip()
    parts = text.split(None, 1)

    if len(parts) < 2:
        if text in EXIT_WORDS:
            return Exit()
        logger.debug("Unknown command: %r", text)
        raise UnknownCommand(text)

    verb, token = parts
    row, col = parse_coord(token)
    if verb in DIG_WORDS:
        return Dig(row, col)
    if verb in FLAG_WORDS:
        return Flag(row, col)

    logger.debug("Unknown verb: %r", verb)
    raise UnknownCommand(verb)
