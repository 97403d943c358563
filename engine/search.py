"""
Minimax search for the TicTacToe engine.
Plays perfectly by searching the whole remaining game tree.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, List, Tuple

from .board import Board, CellMarking, Move


# Score for a win found at depth 0; each extra ply costs one point
WIN_SCORE = 10
DRAW_SCORE = 0

# Starting value for the best candidate score in the move driver
INITIAL_BEST_SCORE = -1000


@dataclass
class SearchStats:
    """Counters filled in by a search, for debugging."""
    positions_evaluated: int = 0
    best_score: Optional[int] = None


@contextmanager
def applied(board: Board, move: Move):
    """
    Apply a move for the duration of a with-block.

    The move is undone on every exit path, so a search branch
    always hands its parent the board it was given.
    """
    board.apply_move(move)
    try:
        yield board
    finally:
        board.undo_move(move)


def minimax(
    board: Board,
    depth: int,
    player_marking: CellMarking,
    is_maximizing: bool,
    stats: Optional[SearchStats] = None
) -> int:
    """
    Minimax algorithm without pruning.

    Args:
        board: Board to evaluate. Changed during the search and
            restored before returning.
        depth: Plies searched so far.
        player_marking: Marking to move at this node.
        is_maximizing: True if the side to move is the maximizing side.
        stats: Optional counters to update.

    Returns:
        The score of the position for the maximizing side.
    """
    if stats is not None:
        stats.positions_evaluated += 1

    winner = board.has_won()
    if winner is not None:
        # The side to move lost if the winner is not them
        if (winner == player_marking) != is_maximizing:
            return -WIN_SCORE - depth  # Loss (slower losses score lower)
        return WIN_SCORE - depth  # Win (prefer faster wins)

    moves = board.moves(player_marking)
    if not moves:
        return DRAW_SCORE

    opposite = player_marking.opposite()

    if is_maximizing:
        best = INITIAL_BEST_SCORE
        for move in moves:
            with applied(board, move):
                best = max(best, minimax(board, depth + 1, opposite, False, stats))
        return best
    else:
        best = -INITIAL_BEST_SCORE
        for move in moves:
            with applied(board, move):
                best = min(best, minimax(board, depth + 1, opposite, True, stats))
        return best


def evaluate_moves(
    board: Board,
    player_marking: CellMarking,
    stats: Optional[SearchStats] = None
) -> List[Tuple[Move, int]]:
    """
    Score every legal move for player_marking.

    Each move is played, scored from the opponent's side (minimizing)
    and taken back.

    Returns:
        (move, score) pairs in row-major order. Empty if the game
        is already won or the board is full.
    """
    if board.has_won() is not None:
        return []

    opposite = player_marking.opposite()
    scored = []
    for move in board.moves(player_marking):
        with applied(board, move):
            scored.append((move, minimax(board, 0, opposite, False, stats)))
    return scored


def best_move(
    board: Board,
    player_marking: CellMarking,
    stats: Optional[SearchStats] = None
) -> Optional[Move]:
    """
    Get the best move for player_marking.

    Ties go to the first move in row-major order.

    Args:
        board: Current board. Left unchanged.
        player_marking: Marking to move.
        stats: Optional counters to update.

    Returns:
        The chosen Move, or None if the game is won or no moves remain.
    """
    best = INITIAL_BEST_SCORE
    chosen = None

    for move, score in evaluate_moves(board, player_marking, stats):
        if score > best:
            best = score
            chosen = move

    if stats is not None and chosen is not None:
        stats.best_score = best

    return chosen
