"""
TicTacToe UI
A graphical interface for the TicTacToe match using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Wins / losses / draws and the most recent games
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from ttt_logic import GameConfig, InMemoryOutcomeRecorder, MatchController, MatchView

LOGGER = logging.getLogger(__name__)

# Colors
BG = '#1a1a2e'
CELL_BG = '#16213e'
HUMAN_FG = '#10b981'
COMPUTER_FG = '#f87171'
HIGHLIGHT_BG = '#065f46'


class TicTacToeUI:
    """
    Main UI class for the TicTacToe match.

    The controller answers every human move immediately; the UI only waits
    before showing that answer, so the computer appears to think.
    """

    def __init__(self, thinking_delay_ms: int = GameConfig.THINKING_DELAY_MS):
        """Initialize the UI."""
        self.config = GameConfig()
        self.thinking_delay_ms = max(0, thinking_delay_ms)

        self.recorder = InMemoryOutcomeRecorder()
        self.controller = MatchController(recorder=self.recorder, config=self.config)

        # Pending reveal of the computer's move (after() id)
        self._pending_reveal: Optional[str] = None

        self._create_ui()
        self._show_view(self.controller.view)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.configure(bg=BG)
        self.root.minsize(420, 640)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG)
        style.configure('TLabel', background=BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="🎮 Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Stats section
        stats_frame = ttk.Frame(main_frame)
        stats_frame.pack(pady=5)
        self.wins_label = ttk.Label(stats_frame, text="Wins: 0", foreground=HUMAN_FG)
        self.wins_label.pack(side=tk.LEFT, padx=10)
        self.losses_label = ttk.Label(stats_frame, text="Losses: 0", foreground=COMPUTER_FG)
        self.losses_label.pack(side=tk.LEFT, padx=10)
        self.draws_label = ttk.Label(stats_frame, text="Draws: 0", foreground='#fbbf24')
        self.draws_label.pack(side=tk.LEFT, padx=10)

        # Board (3x3 grid of buttons)
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        size = self.config.BOARD_SIZE
        self.board_cells = []
        for index in range(self.config.CELL_COUNT):
            cell = tk.Button(
                self.board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // size, column=index % size, padx=2, pady=2)
            self.board_cells.append(cell)

        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text=f"{self.config.HUMAN_MARK} = You  ", foreground=HUMAN_FG).pack(side=tk.LEFT)
        ttk.Label(legend_frame, text=f"{self.config.COMPUTER_MARK} = Computer", foreground=COMPUTER_FG).pack(side=tk.LEFT)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)
        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        # Recent games
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(main_frame, text="Recent Games", style='Title.TLabel').pack()
        self.history_label = ttk.Label(main_frame, text="", justify=tk.LEFT)
        self.history_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Play the human's move; the computer's reply is shown after a delay."""
        if self._pending_reveal is not None:
            return

        view = self.controller.apply_human_move(index)
        if view.illegal_move:
            self.status_label.configure(text=view.illegal_move.message)
            return

        if view.last_computer_move is None or self.thinking_delay_ms == 0:
            self._show_view(view)
            return

        # Show the board without the computer's mark while it "thinks"
        self._draw_board(view, hidden_cell=view.last_computer_move)
        self._set_cells_enabled(False)
        self.status_label.configure(text="Computer is thinking...")
        self.turn_label.configure(text=f"Turn: Computer ({self.config.COMPUTER_MARK})")
        self._pending_reveal = self.root.after(
            self.thinking_delay_ms, lambda: self._reveal(view)
        )

    def _reveal(self, view: MatchView):
        self._pending_reveal = None
        self._show_view(view)

    def _show_view(self, view: MatchView):
        """Update everything from a match view."""
        self._draw_board(view)
        self._set_cells_enabled(not view.is_terminal)

        if view.outcome is None:
            self.status_label.configure(text="Your turn! Make your move.")
            self.turn_label.configure(text=f"Turn: You ({self.config.HUMAN_MARK})")
        else:
            if view.outcome.result == "win":
                self.status_label.configure(text="🎉 Congratulations! You win!")
            elif view.outcome.result == "loss":
                self.status_label.configure(text="🤖 Computer wins! Better luck next time.")
            else:
                self.status_label.configure(text="🤝 It's a draw! Great game!")
            self.turn_label.configure(text="Game Over")

        self._update_stats()

    def _draw_board(self, view: MatchView, hidden_cell: Optional[int] = None):
        """Update the board grid display."""
        symbols = view.board.symbols()
        winning = set(view.winning_line or ()) if hidden_cell is None else set()

        for index, cell in enumerate(self.board_cells):
            symbol = symbols[index] if index != hidden_cell else self.config.EMPTY_MARK
            if symbol == self.config.HUMAN_MARK:
                fg_color = HUMAN_FG
            elif symbol == self.config.COMPUTER_MARK:
                fg_color = COMPUTER_FG
            else:
                fg_color = 'white'
            bg_color = HIGHLIGHT_BG if index in winning else CELL_BG
            cell.configure(text=symbol.strip(), fg=fg_color, bg=bg_color)

    def _set_cells_enabled(self, enabled: bool):
        state = 'normal' if enabled else 'disabled'
        for cell in self.board_cells:
            cell.configure(state=state)

    def _update_stats(self):
        """Update the stats and recent games panels."""
        stats = self.recorder.get_stats()
        self.wins_label.configure(text=f"Wins: {stats.wins}")
        self.losses_label.configure(text=f"Losses: {stats.losses}")
        self.draws_label.configure(text=f"Draws: {stats.draws}")

        history = self.recorder.get_history(self.config.HISTORY_LIMIT)
        if not history:
            self.history_label.configure(text="No games played yet. Start your first game above!")
            return
        lines = [
            f"{record.played_at.astimezone():%H:%M}  vs Computer  {record.result.capitalize()}"
            for record in history
        ]
        self.history_label.configure(text="\n".join(lines))

    def _reset_game(self):
        """Reset the game."""
        if self._pending_reveal is not None:
            self.root.after_cancel(self._pending_reveal)
            self._pending_reveal = None
        self._show_view(self.controller.reset())

    def _quit(self):
        """Quit the application."""
        LOGGER.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.THINKING_DELAY_MS,
        help="Milliseconds before the computer's move is shown"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, GameConfig.LOG_LEVEL, logging.INFO))

    ui = TicTacToeUI(thinking_delay_ms=args.delay)
    ui.run()


if __name__ == "__main__":
    main()
