"""
Engine module for TicTacToe.
Handles the board, win detection, and the minimax opponent.
"""

from .config import EngineConfig
from .board import Board, Cell, CellMarking, Move
from .search import SearchStats, applied, best_move, minimax
from .move_validator import MoveValidator, ValidationResult
from .session import GameSession, TurnResult

__version__ = "1.0.0"
