"""
Move validator for the TicTacToe engine.
Checks human input before it is applied to the board.
"""

from typing import Optional
from dataclasses import dataclass
from .board import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates moves coming from a player.

    The board itself places a marking anywhere it is told to,
    so these rules are checked here:
    1. Game must not be over (no winner, board not full)
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the marking.
            col: Column to place the marking.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        winner = board.has_won()
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner.value} has won."
            )
        if board.is_full():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over! The board is full."
            )

        # Check if row/col are in valid range
        if not board.in_bounds((row, col)):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid position ({row}, {col}). "
                    f"Must be within {board.col_size} rows and {board.row_size} columns."
                )
            )

        # Check if cell is empty
        cell = board.get_cell((row, col))
        if not cell.is_empty:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {cell.mark.value}"
            )

        return ValidationResult(is_valid=True)

    def validate_index(self, board: Board, index: int) -> ValidationResult:
        """Validate a move given as a linear cell index."""
        if not 0 <= index < len(board):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{len(board) - 1}."
            )

        row, col = board.index_to_pos(index)
        return self.validate_move(board, row, col)
