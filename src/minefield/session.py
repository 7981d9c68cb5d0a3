"""
Interactive terminal session.

Reads commands line by line, forwards them to the board and prints
the board with a short note about the last move.
"""
import logging
import sys
from typing import Optional, TextIO

from .board import Board, DigResult, FlagResult
from .commands import Dig, Exit, Flag, InvalidCoords, UnknownCommand, parse_command

logger = logging.getLogger(__name__)

PROMPT = "Your turn: "
BOOM_MESSAGE = "Boom! You hit a mine."

DIG_NOTES = {
    DigResult.REVEALED: "",
    DigResult.ALREADY_OPEN: "[Already open] ",
    DigResult.ALREADY_FLAGGED: "[Flagged] ",
    DigResult.OUT_OF_BOUNDS: "[Out of bounds] ",
}

FLAG_NOTES = {
    FlagResult.NOT_FLAGGABLE: "[Already open] ",
    FlagResult.OUT_OF_BOUNDS: "[Out of bounds] ",
}


class Session:
    """
    One game played over a pair of text streams.

    Args:
        board: Board to play on.
        stdin: Stream commands are read from.
        stdout: Stream the board and prompts are written to.
    """

    def __init__(
        self,
        board: Board,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.board = board
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout, flush=True)

    def run(self) -> int:
        """
        Play until the player quits or hits a mine.

        Returns:
            0 when the player quit, 1 after an explosion.
        """
        note = ""
        while True:
            self._write(self.board.render())
            self._write(f"{note}{PROMPT}", end="")

            line = self.stdin.readline()
            try:
                command = parse_command(line)
            except UnknownCommand:
                note = "[Unknown command] "
                continue
            except InvalidCoords:
                note = "[Invalid coordinates] "
                continue

            if isinstance(command, Exit):
                self._write()
                return 0

            if isinstance(command, Dig):
                result = self.board.dig(command.row, command.col)
                if result == DigResult.BOOM:
                    return self._lose()
                note = DIG_NOTES[result]
            elif isinstance(command, Flag):
                result = self.board.toggle_flag(command.row, command.col)
                note = FLAG_NOTES.get(result, "")

    def _lose(self) -> int:
        logger.debug("Game lost, revealing board")
        self.board.reveal_all()
        self._write()
        self._write(self.board.render())
        self._write(BOOM_MESSAGE)
        return 1
