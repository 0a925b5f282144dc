"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to move when a human is to play)
- Game status and the last move
- Player type selection for each side
"""

import logging
import random
import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional

from logic.board import Board
from logic.config import GameConfig
from logic.errors import StrategyError
from logic.factory import PlayerKind, create_player
from logic.mark import Mark
from logic.move_validator import MoveValidator
from logic.player import Player

logger = logging.getLogger(__name__)

MARK_COLORS = {Mark.X: '#ff6b6b', Mark.O: '#00ff88', Mark.EMPTY: 'white'}
WIN_BG = '#3b5b2e'
CELL_BG = '#16213e'


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Human sides move by clicking. Computer sides are asked for a move on
    the Tk event loop after a short pause, through the same
    Player.next_move() the console game uses.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the UI."""
        self.rng = random.Random(seed)
        self.validator = MoveValidator()

        self.board = Board()
        self.current = Mark.X
        self.is_over = False
        self.players: Dict[Mark, Optional[Player]] = {Mark.X: None, Mark.O: None}
        self._pending_after: Optional[str] = None

        # Create UI
        self._create_ui()
        self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic-Tac-Toe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="🎮 Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Board (3x3 grid of buttons)
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.cells: List[tk.Button] = []
        for index in range(GameConfig.CELL_COUNT):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
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
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.cells.append(cell)

        # Player selection
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.kind_vars: Dict[Mark, tk.StringVar] = {}
        labels = [kind.label for kind in PlayerKind]
        for mark, default in ((Mark.X, PlayerKind.HUMAN), (Mark.O, PlayerKind.MINIMAX)):
            row_frame = ttk.Frame(main_frame)
            row_frame.pack(fill=tk.X, pady=2)
            ttk.Label(row_frame, text=f"{mark.value} player:", foreground=MARK_COLORS[mark]).pack(side=tk.LEFT)
            var = tk.StringVar(value=default.label)
            ttk.Combobox(
                row_frame, textvariable=var, values=labels, state='readonly', width=16
            ).pack(side=tk.RIGHT)
            self.kind_vars[mark] = var

        # Game status
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.move_label = ttk.Label(main_frame, text="")
        self.move_label.pack()

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="▶ New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._new_game
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

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _selected_kind(self, mark: Mark) -> PlayerKind:
        label = self.kind_vars[mark].get()
        for kind in PlayerKind:
            if kind.label == label:
                return kind
        return PlayerKind.HUMAN

    def _new_game(self):
        """Start a new game with the selected player types."""
        if self._pending_after is not None:
            self.root.after_cancel(self._pending_after)
            self._pending_after = None

        self.board = Board()
        self.current = Mark.X
        self.is_over = False

        for mark in (Mark.X, Mark.O):
            kind = self._selected_kind(mark)
            name = GameConfig.DEFAULT_X_NAME if mark == Mark.X else GameConfig.DEFAULT_O_NAME
            if kind == PlayerKind.HUMAN:
                # Humans move by clicking
                self.players[mark] = None
            elif kind == PlayerKind.RANDOM:
                self.players[mark] = create_player(kind, name, mark, rng=self.rng)
            else:
                self.players[mark] = create_player(kind, name, mark)

        self.move_label.configure(text="")
        self._update_board()
        self._next_turn()

    def _next_turn(self):
        """Prompt the human or schedule the computer."""
        player = self.players[self.current]
        if player is None:
            self.status_label.configure(text=f"{self.current.value} to move - click a cell")
            return

        self.status_label.configure(text=f"{player.name} ({self.current.value}) is thinking...")
        self._pending_after = self.root.after(GameConfig.COMPUTER_DELAY_MS, self._computer_move)

    def _computer_move(self):
        """Ask the computer player for its move."""
        self._pending_after = None
        player = self.players[self.current]

        try:
            move = player.next_move(self.board)
        except StrategyError as e:
            logger.error("Error getting move from %s: %s", player.name, e)
            self.is_over = True
            self.status_label.configure(text=f"Error getting move from {player.name}")
            return

        self._play(move)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if self.is_over or self.players[self.current] is not None:
            return

        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            self.move_label.configure(text=result.error_message)
            return

        self._play(index)

    def _play(self, index: int):
        """Place the current mark and move the game on."""
        if not self.board.place(self.current, index):
            logger.warning("Invalid move %r by %s. Skipping turn.", index, self.current.value)
        else:
            self.move_label.configure(text=f"{self.current.value} placed at {index + 1}")
        self._update_board()

        result = self.board.game_result()
        if result.is_over:
            self.is_over = True
            if result.is_win:
                self.status_label.configure(text=f"🏆 {result.winner.value} WINS!")
            else:
                self.status_label.configure(text="🤝 It's a DRAW!")
            return

        self.current = self.current.opposite()
        self._next_turn()

    def _update_board(self):
        """Redraw the board cells."""
        winning_line = self.board.winning_line() or ()
        for index, cell in enumerate(self.cells):
            mark = self.board[index]
            cell.configure(
                text="" if mark == Mark.EMPTY else mark.value,
                fg=MARK_COLORS[mark],
                bg=WIN_BG if index in winning_line else CELL_BG
            )

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe UI")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random players")

    args = parser.parse_args()

    ui = TicTacToeUI(seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
