"""
Main entry point for the TicTacToe match.

Runs the Tkinter window by default, or a console game with --no-ui.
The computer always plays optimally; the best a human can get is a draw.
"""

import argparse
import logging
from typing import Optional

from ttt_logic import GameConfig, InMemoryOutcomeRecorder, MatchController, MatchView


class ConsoleGame:
    """
    Plays matches in the terminal.

    Commands:
    - 0-8: mark that cell
    - r: start a new game
    - s: show wins / losses / draws and recent games
    - q: quit
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.recorder = InMemoryOutcomeRecorder()
        self.controller = MatchController(recorder=self.recorder, config=self.config)

    def run(self):
        """Main game loop."""
        print("Commands: 0-8 to move | r reset | s stats | q quit")
        view = self.controller.view
        self._show(view)

        while True:
            try:
                command = input("> ").strip().lower()
            except EOFError:
                break

            if command == "q":
                print("\nGame quit by user.")
                break
            elif command == "r":
                view = self.controller.reset()
                print("\nNew game!")
                self._show(view)
            elif command == "s":
                self._show_stats()
            elif command.isdigit():
                view = self.controller.apply_human_move(int(command))
                if view.illegal_move:
                    print(f"Illegal move: {view.illegal_move.message}")
                    continue
                if view.last_computer_move is not None:
                    print(f"Computer plays {view.last_computer_move}")
                self._show(view)
            else:
                print("Unknown command. Use 0-8, r, s or q.")

    def _show(self, view: MatchView):
        print()
        print(view.board.render())
        print()

        if view.outcome is None:
            print("Your turn! Make your move.")
        elif view.outcome.result == "win":
            print("🎉 Congratulations! You win!")
        elif view.outcome.result == "loss":
            print("🤖 Computer wins! Better luck next time.")
        else:
            print("🤝 It's a draw! Great game!")

        if view.is_terminal:
            print("Press 'r' to play again.")

    def _show_stats(self):
        stats = self.recorder.get_stats()
        print(f"\nWins: {stats.wins}  Losses: {stats.losses}  Draws: {stats.draws}")

        history = self.recorder.get_history(self.config.HISTORY_LIMIT)
        if not history:
            print("No games played yet.")
            return
        print("Recent games:")
        for record in history:
            print(f"  {record.played_at:%H:%M:%S}  {record.result.capitalize()}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against an optimal computer")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.THINKING_DELAY_MS,
        help="Milliseconds before the UI shows the computer's move"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=GameConfig.LOG_LEVEL,
        help="Python logging level"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(thinking_delay_ms=args.delay)
        ui.run()
        return

    game = ConsoleGame()
    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
