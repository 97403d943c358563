"""
Engine configuration for the TicTacToe engine.
Board shape and debug settings for a game session.
"""


class EngineConfig:
    """
    Configuration class for session settings.
    Change a value on an instance to override it for one session.

    Search scores and display symbols are fixed by the engine
    and live in engine/search.py and engine/board.py.
    """

    # ==================== BOARD SETTINGS ====================
    # row_size is the length of a row (number of columns),
    # col_size is the length of a column (number of rows)
    BOARD_ROW_SIZE = 3
    BOARD_COL_SIZE = 3

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
