"""
Game session for the TicTacToe engine.
Owns one board and turns player input into engine responses.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board, CellMarking, Move
from .config import EngineConfig
from .move_validator import MoveValidator
from .search import SearchStats


@dataclass
class TurnResult:
    """What happened when a player tried to move."""
    accepted: bool
    human_move: Optional[Move] = None
    engine_move: Optional[Move] = None
    engine_index: Optional[int] = None
    winner: Optional[CellMarking] = None
    is_draw: bool = False
    error_message: Optional[str] = None


class GameSession:
    """
    One game between a human and the engine.

    Game flow:
    1. Human picks a cell (by index or position)
    2. The move is validated and applied
    3. Engine calculates and applies its best response
    4. Repeat until someone wins or the board is full

    Front-ends hold a session and pass it to their event handlers
    instead of sharing the board itself.
    """

    def __init__(
        self,
        human_marking: CellMarking = CellMarking.X,
        row_size: Optional[int] = None,
        col_size: Optional[int] = None,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the session.

        Args:
            human_marking: Which marking the human plays.
            row_size: Length of a row (default from config).
            col_size: Length of a column (default from config).
            config: Engine configuration.
        """
        self.config = config or EngineConfig()
        self.human_marking = human_marking
        self.engine_marking = human_marking.opposite()

        self.board = Board.with_dimensions(
            row_size if row_size is not None else self.config.BOARD_ROW_SIZE,
            col_size if col_size is not None else self.config.BOARD_COL_SIZE
        )
        self.validator = MoveValidator()
        self.last_stats: Optional[SearchStats] = None

    @property
    def winner(self) -> Optional[CellMarking]:
        return self.board.has_won()

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.board.is_full()

    def play(self, row: int, col: int) -> TurnResult:
        """Play the human's marking at (row, col)."""
        if not self.board.in_bounds((row, col)):
            return self._rejected(self.validator.validate_move(self.board, row, col))
        return self.play_index(self.board.cell_index((row, col)))

    def play_index(self, index: int) -> TurnResult:
        """
        Play the human's marking at a linear cell index, then let
        the engine answer.

        Args:
            index: Cell index in row-major order.

        Returns:
            TurnResult. accepted is False, and the board untouched,
            if the cell is taken or off the board, or the game is over.
        """
        result = self.validator.validate_index(self.board, index)
        if not result.is_valid:
            return self._rejected(result)

        human_move = Move(self.board.index_to_pos(index), self.human_marking)
        self.board.apply_move(human_move)

        engine_move = self._engine_move()
        return self._result(human_move, engine_move)

    def engine_opens(self) -> TurnResult:
        """
        Let the engine make the first move.

        Only allowed on an empty board when the human plays O,
        so the engine never moves out of turn.
        """
        if self.human_marking != CellMarking.O:
            return self._rejected_message("The engine only opens when the human plays O.")
        if any(not cell.is_empty for cell in self.board.cells):
            return self._rejected_message("The engine can only open on an empty board.")
        return self._result(None, self._engine_move())

    def reset(self):
        """Reset the game for a new round."""
        self.board.reset()
        self.last_stats = None

    def snapshot(self) -> str:
        return self.board.to_string()

    def _engine_move(self) -> Optional[Move]:
        """Get the engine's best move and apply it."""
        stats = SearchStats()
        move = self.board.next_move(self.engine_marking, stats=stats)
        self.last_stats = stats

        if move is None:
            return None

        self.board.apply_move(move)

        if self.config.DEBUG_MODE:
            print(
                f"Engine evaluated {stats.positions_evaluated} positions. "
                f"Best move: {move.position} (score: {stats.best_score})"
            )

        return move

    def _result(self, human_move: Optional[Move], engine_move: Optional[Move]) -> TurnResult:
        return TurnResult(
            accepted=True,
            human_move=human_move,
            engine_move=engine_move,
            engine_index=(
                self.board.cell_index(engine_move.position) if engine_move else None
            ),
            winner=self.winner,
            is_draw=self.board.is_draw(),
        )

    def _rejected(self, validation) -> TurnResult:
        return self._rejected_message(validation.error_message)

    def _rejected_message(self, message: str) -> TurnResult:
        if self.config.DEBUG_MODE:
            print(f"Move rejected: {message}")
        return TurnResult(accepted=False, error_message=message)
