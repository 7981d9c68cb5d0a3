"""
Cell module for the minefield board.

Represents individual tiles on the board with their hidden content
(mine or not) and their visible status (unknown/open/flagged/exploded).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellStatus(Enum):
    """Possible visible states of a cell."""

    UNKNOWN = auto()
    OPEN = auto()
    FLAGGED = auto()
    EXPLODED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single tile in the minefield grid.

    Attributes:
        has_mine: Whether this cell hides a mine. Fixed once the board
            has been built.
        status: Current visible status.
        neighbor_mines: Mine count shown by an open cell (0-8). Only
            meaningful while the cell is open.
    """

    has_mine: bool = False
    status: CellStatus = CellStatus.UNKNOWN
    neighbor_mines: int = 0

    def open(self, neighbor_mines: int) -> None:
        """Open the cell, showing its neighbouring mine count."""
        self.status = CellStatus.OPEN
        self.neighbor_mines = neighbor_mines

    def explode(self) -> None:
        """Mark the cell as a detonated mine."""
        self.status = CellStatus.EXPLODED

    def flag(self) -> bool:
        """
        Flag this cell.

        Returns:
            True if the cell went from unknown to flagged, False otherwise.
        """
        if self.status != CellStatus.UNKNOWN:
            return False
        self.status = CellStatus.FLAGGED
        return True

    def unflag(self) -> bool:
        """
        Remove the flag from this cell.

        Returns:
            True if the cell went from flagged back to unknown.
        """
        if self.status != CellStatus.FLAGGED:
            return False
        self.status = CellStatus.UNKNOWN
        return True

    @property
    def is_unknown(self) -> bool:
        """Check if cell is still unknown."""
        return self.status == CellStatus.UNKNOWN

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.status == CellStatus.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.status == CellStatus.FLAGGED

    @property
    def is_exploded(self) -> bool:
        """Check if cell is a detonated mine."""
        return self.status == CellStatus.EXPLODED

    def __str__(self) -> str:
        if self.status == CellStatus.UNKNOWN:
            return "?"
        if self.status == CellStatus.FLAGGED:
            return "X"
        if self.status == CellStatus.EXPLODED:
            return "!"
        if self.neighbor_mines == 0:
            return " "
        return str(self.neighbor_mines)

    def to_observation(self) -> int:
        """
        Convert cell to a compact integer code.

        Returns:
            -1: Unknown cell
            -2: Flagged cell
            0-8: Open cell with neighbouring mine count
            9: Exploded mine
        """
        if self.status == CellStatus.UNKNOWN:
            return -1
        if self.status == CellStatus.FLAGGED:
            return -2
        if self.status == CellStatus.EXPLODED:
            return 9
        return self.neighbor_mines
