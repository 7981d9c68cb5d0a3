"""
Minefield game module.

Provides the board engine, command parsing and the terminal session.
"""
from .cell import Cell, CellStatus
from .board import Board, BoardConfig, DigResult, FlagResult, DEFAULT
from .commands import (
    Command,
    CommandError,
    Dig,
    Exit,
    Flag,
    InvalidCoords,
    UnknownCommand,
    parse_command,
    parse_coord,
)
from .session import Session

__all__ = [
    "Cell",
    "CellStatus",
    "Board",
    "BoardConfig",
    "DigResult",
    "FlagResult",
    "DEFAULT",
    "Command",
    "CommandError",
    "Dig",
    "Exit",
    "Flag",
    "InvalidCoords",
    "UnknownCommand",
    "parse_command",
    "parse_coord",
    "Session",
]
