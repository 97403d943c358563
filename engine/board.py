"""
Board for the TicTacToe engine.
Holds the grid of cells, applies and undoes moves, and detects a winner.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import EngineConfig


Position = Tuple[int, int]

# One character per cell in to_string()
SYMBOLS = {
    "X": "X",
    "O": "O",
    None: "_",
}

# Cell values used by to_array() / from_array()
ARRAY_VALUES = {
    "X": 1,
    "O": -1,
    None: 0,
}


class CellMarking(Enum):
    """The two symbols a cell can hold."""
    X = "X"
    O = "O"

    def opposite(self) -> "CellMarking":
        """Get the opposite marking."""
        return CellMarking.O if self == CellMarking.X else CellMarking.X


@dataclass(frozen=True)
class Cell:
    """
    A single board cell.
    """
    mark: Optional[CellMarking] = None  # None means empty

    @property
    def is_empty(self) -> bool:
        return self.mark is None


EMPTY_CELL = Cell()


@dataclass(frozen=True)
class Move:
    """
    A marking placed at (row, col).
    The same value is used to apply the move and to undo it.
    """
    position: Position
    marking: CellMarking

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]


@dataclass
class Board:
    """
    A rectangular TicTacToe board stored row-major.

    row_size is the length of a row (the number of columns) and
    col_size is the length of a column (the number of rows), so a
    position (row, col) is valid when row < col_size and col < row_size.

    Win condition: a full row, a full column, or one of the two
    corner diagonals of length min(row_size, col_size) holding
    a single marking.
    """

    row_size: int = EngineConfig.BOARD_ROW_SIZE
    col_size: int = EngineConfig.BOARD_COL_SIZE

    # Row-major cells, filled with empty cells when not given
    cells: List[Cell] = field(default_factory=list)

    # Every line checked by has_won(), as lists of cell indices
    _lines: List[List[int]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if self.row_size <= 0 or self.col_size <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.row_size}x{self.col_size}"
            )

        size = self.row_size * self.col_size
        if not self.cells:
            self.cells = [EMPTY_CELL] * size
        elif len(self.cells) != size:
            raise ValueError(f"Expected {size} cells, got {len(self.cells)}")

        self._lines = self._build_lines()

    @classmethod
    def with_dimensions(cls, row_size: int, col_size: int) -> "Board":
        """Create an empty board with the given shape."""
        return cls(row_size=row_size, col_size=col_size)

    @classmethod
    def from_array(cls, grid) -> "Board":
        """
        Build a board from a 2D grid of 1 (X), -1 (O) and 0 (empty).

        Args:
            grid: Anything numpy can turn into a 2D integer array,
                shaped (rows, columns).

        Returns:
            A new Board with the grid's markings.
        """
        grid = np.asarray(grid)
        if grid.ndim != 2:
            raise ValueError(f"Expected a 2D grid, got {grid.ndim} dimensions")

        values = {v: k for k, v in ARRAY_VALUES.items()}
        cells = []
        for value in grid.flatten().tolist():
            if value not in values:
                raise ValueError(f"Unknown cell value in grid: {value}")
            mark = values[value]
            cells.append(Cell(CellMarking(mark)) if mark is not None else EMPTY_CELL)

        col_size, row_size = grid.shape
        return cls(row_size=row_size, col_size=col_size, cells=cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __str__(self) -> str:
        return self.to_string()

    # ==================== MOVES ====================

    def apply_move(self, move: Move):
        """Place move.marking at move.position. Out-of-bounds moves are ignored."""
        if self.in_bounds(move.position):
            self.cells[self.cell_index(move.position)] = Cell(move.marking)

    def undo_move(self, move: Move):
        """Clear move.position whatever it holds. Out-of-bounds moves are ignored."""
        if self.in_bounds(move.position):
            self.cells[self.cell_index(move.position)] = EMPTY_CELL

    def moves(self, marking: CellMarking) -> List[Move]:
        """
        Get a move for every empty cell.

        Args:
            marking: Marking to place in each returned move.

        Returns:
            Moves in row-major order, empty when the board is full.
        """
        return [
            Move(self.index_to_pos(i), marking)
            for i, cell in enumerate(self.cells)
            if cell.is_empty
        ]

    def next_move(self, player_marking: CellMarking, stats=None) -> Optional[Move]:
        """
        Get the best move for player_marking, or None if the game is
        already won or the board is full. The board is left unchanged.
        """
        # Deferred: engine.search imports this module
        from .search import best_move
        return best_move(self, player_marking, stats=stats)

    def reset(self):
        """Clear every cell, keeping the dimensions."""
        self.cells = [EMPTY_CELL] * (self.row_size * self.col_size)

    def copy(self) -> "Board":
        return Board(row_size=self.row_size, col_size=self.col_size, cells=list(self.cells))

    # ==================== POSITIONS ====================

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.col_size and 0 <= col < self.row_size

    def index_to_pos(self, index: int) -> Position:
        return (index // self.row_size, index % self.row_size)

    def cell_index(self, pos: Position) -> int:
        return pos[0] * self.row_size + pos[1]

    def get_cell(self, pos: Position) -> Optional[Cell]:
        """Get the cell at pos, or None if pos is off the board."""
        if not self.in_bounds(pos):
            return None
        return self.cells[self.cell_index(pos)]

    # ==================== WIN DETECTION ====================

    def _build_lines(self) -> List[List[int]]:
        rows = [
            [(row, col) for col in range(self.row_size)]
            for row in range(self.col_size)
        ]
        cols = [
            [(row, col) for row in range(self.col_size)]
            for col in range(self.row_size)
        ]

        # Only the two diagonals starting at the top corners
        length = min(self.row_size, self.col_size)
        top_left = [(i, i) for i in range(length)]
        top_right = [(i, self.row_size - 1 - i) for i in range(length)]

        return [
            [self.cell_index(pos) for pos in line]
            for line in rows + cols + [top_left, top_right]
        ]

    def _check_line(self, line: List[int]) -> Optional[CellMarking]:
        """
        Check if a single line is filled with one marking.

        Returns:
            The marking if every cell holds it, None otherwise.
        """
        marking = None
        for index in line:
            mark = self.cells[index].mark
            if mark is None:
                return None  # Empty cell, no winner on this line
            if marking is None:
                marking = mark
            elif mark != marking:
                return None
        return marking

    def has_won(self) -> Optional[CellMarking]:
        """
        Check rows, then columns, then the two corner diagonals.

        Returns:
            The winning marking, or None if no line is complete.
        """
        for line in self._lines:
            winner = self._check_line(line)
            if winner is not None:
                return winner
        return None

    def winning_line(self) -> Optional[List[Position]]:
        """Get the first complete line, in the order has_won() checks them."""
        for line in self._lines:
            if self._check_line(line) is not None:
                return [self.index_to_pos(index) for index in line]
        return None

    def is_full(self) -> bool:
        return all(not cell.is_empty for cell in self.cells)

    def is_draw(self) -> bool:
        """A draw is a full board with no winner."""
        return self.is_full() and self.has_won() is None

    # ==================== SNAPSHOTS ====================

    def to_string(self) -> str:
        """One character per cell (X, O or _), one line per row."""
        lines = []
        for row in range(self.col_size):
            start = row * self.row_size
            cells = self.cells[start:start + self.row_size]
            lines.append("".join(
                SYMBOLS[cell.mark.value if cell.mark else None] for cell in cells
            ))
        return "".join(line + "\n" for line in lines)

    def to_array(self) -> np.ndarray:
        """
        Get the board as an int8 grid shaped (rows, columns).
        X is 1, O is -1 and empty cells are 0.
        """
        flat = [ARRAY_VALUES[cell.mark.value if cell.mark else None] for cell in self.cells]
        return np.array(flat, dtype=np.int8).reshape(self.col_size, self.row_size)
