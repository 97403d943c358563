"""
Console front-end for the TicTacToe engine.

This script ties together:
- A GameSession (board, validation, engine responses)
- Keyboard input (a cell index per turn)
- Printing the board and the result

Run this script to play TicTacToe against the engine!
"""

from typing import Optional

from engine import CellMarking, EngineConfig, GameSession, TurnResult


class ConsoleGame:
    """
    Plays one or more games in the terminal.

    Game flow:
    1. Human types the index of a cell
    2. Session validates and applies it
    3. Engine answers with its best move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Type a cell index to play, 'r' to reset, 'q' to quit\n")
        self._print_index_map()

        self.is_running = True
        if self.session.human_marking == CellMarking.O:
            self._report(self.session.engine_opens())

        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.session.is_over:
                self._show_game_result()
                if not self._ask_play_again():
                    break
                self._reset_game()
                continue

            print(self.session.snapshot())
            command = input(f"Play {self.session.human_marking.value} at: ").strip().lower()

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                self._reset_game()
            else:
                index = self._parse_index(command)
                if index is not None:
                    self._report(self.session.play_index(index))

    def _parse_index(self, command: str) -> Optional[int]:
        try:
            return int(command)
        except ValueError:
            print(f"Please type a number 0..{len(self.session.board) - 1}.")
            return None

    def _report(self, result: TurnResult):
        """Print what happened in a turn."""
        if not result.accepted:
            print(f"Illegal move: {result.error_message}")
            return

        if result.human_move is not None:
            print(f"\n>>> You placed {result.human_move.marking.value} at {result.human_move.position}")
        if result.engine_move is not None:
            print(
                f">>> Engine placed {result.engine_move.marking.value} "
                f"at {result.engine_move.position} (cell {result.engine_index})"
            )

    def _print_index_map(self):
        board = self.session.board
        width = len(str(len(board) - 1))
        print("Index map:")
        for row in range(board.col_size):
            print(" ".join(
                str(board.cell_index((row, col))).rjust(width)
                for col in range(board.row_size)
            ))
        print()

    def _show_game_result(self):
        """Show the final result."""
        print("\n" + "="*40)
        print("   GAME OVER")
        print("="*40)
        print(self.session.snapshot())

        winner = self.session.winner
        if winner is None:
            print("It's a draw! Good game!")
        elif winner == self.session.human_marking:
            print("Congratulations! You won!")
        else:
            print("Engine wins! Better luck next time!")

    def _ask_play_again(self) -> bool:
        return input("Play again? [y/N]: ").strip().lower() == "y"

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.reset()
        if self.session.human_marking == CellMarking.O:
            self._report(self.session.engine_opens())


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe Engine")
    parser.add_argument(
        "--human",
        choices=["X", "O"],
        default="X",
        help="Marking the human plays (O lets the engine open)"
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=EngineConfig.BOARD_COL_SIZE,
        help="Number of rows"
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=EngineConfig.BOARD_ROW_SIZE,
        help="Number of columns"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search diagnostics"
    )

    args = parser.parse_args()

    config = EngineConfig()
    config.DEBUG_MODE = args.debug

    # row_size is the length of a row, so it takes the column count
    session = GameSession(
        human_marking=CellMarking(args.human),
        row_size=args.cols,
        col_size=args.rows,
        config=config
    )
    game = ConsoleGame(session)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
