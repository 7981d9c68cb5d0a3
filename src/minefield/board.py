"""
Board module for the minefield game.

Implements the game board with mine placement, digging, flagging,
chain reveal of empty regions and the text rendering of the grid.
"""
import logging
import random
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellStatus

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

MAX_ROWS = 26


# ============================================================================
# Constants
# ============================================================================

class DigResult(Enum):
    """Outcome of digging a cell."""

    REVEALED = auto()
    ALREADY_OPEN = auto()
    ALREADY_FLAGGED = auto()
    BOOM = auto()
    OUT_OF_BOUNDS = auto()


class FlagResult(Enum):
    """Outcome of flagging or unflagging a cell."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    ALREADY_FLAGGED = auto()
    NOT_FLAGGED = auto()
    NOT_FLAGGABLE = auto()
    OUT_OF_BOUNDS = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        rows: Number of rows, labelled a-z.
        columns: Number of columns, numbered from 1.
        seed: Optional seed for reproducible mine placement.
    """

    rows: int = 5
    columns: int = 20
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise ValueError("Board dimensions must be positive")
        if self.rows > MAX_ROWS:
            raise ValueError(f"Too many rows (max {MAX_ROWS})")

    @property
    def num_cells(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.columns

    @property
    def min_mines(self) -> int:
        """Smallest mine count a random board may get."""
        return self.num_cells // 6

    @property
    def max_mines(self) -> int:
        """Exclusive upper bound of a random board's mine count."""
        return self.num_cells // 4


# Board size of the classic terminal session
DEFAULT = BoardConfig(5, 20)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Owns the grid of cells, places the mines once at creation and
    answers dig and flag requests. Losing is signalled by a BOOM
    result; winning is left to the caller.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    mines: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mine_count: int = 0

    def __post_init__(self, mines: Optional[Iterable[Position]]) -> None:
        """Initialize the grid and lay the mines."""
        self._init_grid()
        if mines is None:
            self._place_random_mines(random.Random(self.config.seed))
        else:
            self._place_mines(mines)

    @classmethod
    def new(cls, rows: int, columns: int, seed: Optional[int] = None) -> "Board":
        """Create a board with randomly placed mines."""
        return cls(BoardConfig(rows, columns, seed))

    @classmethod
    def with_mines(
        cls, rows: int, columns: int, mines: Iterable[Position]
    ) -> "Board":
        """Create a board with mines at the given (row, col) positions."""
        return cls(BoardConfig(rows, columns), mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create an empty grid of unknown cells."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]

    def _place_random_mines(self, rng: random.Random) -> None:
        """
        Place a random number of mines at random positions.

        The count is drawn from [cells / 6, cells / 4), then that many
        distinct positions are sampled in one pass.
        """
        low, high = self.config.min_mines, self.config.max_mines
        if low >= high:
            raise ValueError(
                f"Board too small for a {self.config.rows}x"
                f"{self.config.columns} minefield"
            )
        count = rng.randrange(low, high)
        positions = [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.columns)
        ]
        self._place_mines(rng.sample(positions, count))

    def _place_mines(self, mines: Iterable[Position]) -> None:
        """Mine every listed position."""
        placed = set()
        for row, col in mines:
            if not self.in_bounds(row, col):
                raise ValueError(f"Mine position out of bounds: ({row}, {col})")
            self._grid[row][col].has_mine = True
            placed.add((row, col))
        if len(placed) >= self.config.num_cells:
            raise ValueError(
                f"Too many mines (max {self.config.num_cells - 1})"
            )
        self._mine_count = len(placed)
        logger.debug(
            "Placed %d mines on %dx%d board",
            self._mine_count, self.config.rows, self.config.columns,
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up to 8 neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].has_mine:
                count += 1
        return count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def dig(self, row: int, col: int) -> DigResult:
        """
        Dig the cell at the given position.

        A mine-free unknown cell is opened together with the empty
        region around it. An unknown mine explodes.

        Args:
            row: Row index to dig.
            col: Column index to dig.

        Returns:
            The DigResult describing what happened.
        """
        if not self.in_bounds(row, col):
            return DigResult.OUT_OF_BOUNDS

        cell = self._grid[row][col]
        if cell.status == CellStatus.OPEN:
            return DigResult.ALREADY_OPEN
        if cell.status == CellStatus.FLAGGED:
            return DigResult.ALREADY_FLAGGED
        if cell.status == CellStatus.EXPLODED:
            return DigResult.BOOM

        if cell.has_mine:
            cell.explode()
            logger.debug("Mine exploded at (%d, %d)", row, col)
            return DigResult.BOOM

        self.chain_reveal(row, col)
        return DigResult.REVEALED

    def chain_reveal(self, row: int, col: int) -> int:
        """
        Open a cell and flood outward through cells with no adjacent mines.

        Cells are opened before their neighbours are queued, so a cell
        is never processed twice. Expansion stops at cells that border
        a mine; those are opened but not expanded.

        Returns:
            Number of cells opened.
        """
        opened = 0
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            if cell.is_open:
                continue

            count = self.count_neighbor_mines(current_row, current_col)
            cell.open(count)
            opened += 1

            if count == 0:
                pending.extend(self._get_neighbors(current_row, current_col))

        logger.debug("Chain reveal from (%d, %d) opened %d cells", row, col, opened)
        return opened

    def flag(self, row: int, col: int) -> FlagResult:
        """
        Put a flag on an unknown cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            FLAGGED on success, otherwise the reason nothing changed.
        """
        if not self.in_bounds(row, col):
            return FlagResult.OUT_OF_BOUNDS
        cell = self._grid[row][col]
        if cell.is_flagged:
            return FlagResult.ALREADY_FLAGGED
        if not cell.flag():
            return FlagResult.NOT_FLAGGABLE
        return FlagResult.FLAGGED

    def unflag(self, row: int, col: int) -> FlagResult:
        """Remove a flag, returning the cell to unknown."""
        if not self.in_bounds(row, col):
            return FlagResult.OUT_OF_BOUNDS
        if not self._grid[row][col].unflag():
            return FlagResult.NOT_FLAGGED
        return FlagResult.UNFLAGGED

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """Flag an unknown cell or clear the flag of a flagged one."""
        if self.in_bounds(row, col) and self._grid[row][col].is_flagged:
            return self.unflag(row, col)
        return self.flag(row, col)

    def reveal_all(self) -> None:
        """
        Disclose the whole board once the game is over.

        Mines are shown as flags, everything else is opened with its
        count regardless of its current status.
        """
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                cell = self._grid[row][col]
                if cell.has_mine:
                    cell.status = CellStatus.FLAGGED
                else:
                    cell.open(self.count_neighbor_mines(row, col))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows on the board."""
        return self.config.rows

    @property
    def columns(self) -> int:
        """Number of columns on the board."""
        return self.config.columns

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return self._mine_count

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = unknown
                -2 = flagged
                0-8 = open with adjacent count
                9 = exploded mine
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def render(self) -> str:
        """
        Render the board as a text grid.

        Columns are numbered from 1 with a tens line above the units
        line once there are more than 9 columns; rows are labelled with
        letters starting at 'a'.
        """
        columns = self.config.columns
        lines = []
        if columns > 9:
            lines.append(
                "  " + "".join(f"{(i // 10) % 10} " for i in range(1, columns + 1))
            )
        lines.append("  " + "".join(f"{i % 10} " for i in range(1, columns + 1)))

        separator = "  -" + "+-" * (columns - 1)
        for row in range(self.config.rows):
            label = chr(ord("a") + row)
            lines.append(f"{label} " + "|".join(str(cell) for cell in self._grid[row]))
            if row != self.config.rows - 1:
                lines.append(separator)

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
