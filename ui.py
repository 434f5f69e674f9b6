"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play X)
- Game status and whose turn it is
- Reset and quit buttons

The computer's "thinking" pause is a Tk after() callback; the game
logic itself never waits.
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

# Logic imports
from logic.board import BOARD_SIZE, Mark, row_col_to_cell
from logic.config import GameConfig
from logic.status import status_style
from logic.turn_controller import MoveOutcome, MoveResult, TurnController


# Cell colors per mark: (background, foreground)
CELL_COLORS = {
    Mark.EMPTY: ('#16213e', 'white'),
    Mark.X: ('#065f46', '#10b981'),   # Green for the human
    Mark.O: ('#7f1d1d', '#f87171'),   # Red for the computer
}
WINNING_CELL_BG = '#a16207'

# Status line colors per style tag
STATUS_COLORS = {
    None: '#ffd700',
    "winner": '#00ff88',
    "draw": '#00d4ff',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        controller: Optional[TurnController] = None,
        config: Optional[GameConfig] = None,
        root: Optional[tk.Tk] = None
    ):
        """
        Initialize the UI.

        Args:
            controller: Game to display (default: a new TurnController).
            config: Game settings (default: the controller's).
            root: Tk root window to build into (default: a new one).
        """
        self.controller = controller or TurnController(config=config)
        self.config = config or self.controller.config

        # Pending after() job for the computer move
        self._computer_job: Optional[str] = None

        self.root = root or tk.Tk()
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style(self.root)
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Board
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                cell = row_col_to_cell(row, col)
                button = tk.Button(
                    self.board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=3,
                    height=1,
                    relief='ridge',
                    borderwidth=2,
                    command=lambda c=cell: self._on_cell_click(c)
                )
                button.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(button)

        # Legend
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text=f"{self.controller.human_mark.value} = You  ",
                  foreground='#10b981').pack(side=tk.LEFT)
        ttk.Label(legend_frame, text=f"{self.controller.computer_mark.value} = Computer",
                  foreground='#f87171').pack(side=tk.LEFT)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Current player: -")
        self.turn_label.pack()

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        self.reset_btn = tk.Button(
            control_frame,
            text="↺ Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, cell: int):
        """Handle a click on a board cell."""
        result = self.controller.submit_human_move(cell)

        # Taken cell, game over, or computer still thinking: ignore the click
        if not result.accepted:
            return

        self._refresh()

        if result.outcome == MoveOutcome.COMPUTER_PENDING:
            self._schedule_computer_move(result)

    def _schedule_computer_move(self, result: MoveResult):
        """Let the computer "think" for a moment before it plays."""
        self._computer_job = self.root.after(
            self.config.THINKING_DELAY_MS,
            lambda: self._computer_move(result.generation)
        )

    def _computer_move(self, generation: int):
        """Play the computer's move (runs on the UI thread)."""
        self._computer_job = None
        result = self.controller.run_computer_turn(generation)

        if result.accepted:
            print(f"Computer played cell {result.cell}")
        self._refresh()

    def _refresh(self):
        """Redraw the board and status from the controller."""
        state = self.controller.state
        winning_line = state.winning_line or ()

        for cell, button in enumerate(self.board_cells):
            mark = self.controller.get(cell)
            bg_color, fg_color = CELL_COLORS[mark]
            if cell in winning_line:
                bg_color = WINNING_CELL_BG

            button.configure(
                text=mark.value,
                bg=bg_color,
                fg=fg_color,
                activebackground=bg_color,
                # Game over: nothing left to click
                state='disabled' if state.is_game_over else 'normal',
                disabledforeground=fg_color
            )

        self.status_label.configure(
            text=self.controller.describe(),
            foreground=STATUS_COLORS[status_style(state)]
        )

        if state.is_game_over:
            self.turn_label.configure(text="Game Over")
        else:
            self.turn_label.configure(text=f"Current player: {state.current_turn.value}")

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")

        # A computer move scheduled for the old game must not land on the new one
        if self._computer_job is not None:
            self.root.after_cancel(self._computer_job)
            self._computer_job = None

        self.controller.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")

        if self._computer_job is not None:
            self.root.after_cancel(self._computer_job)
            self._computer_job = None

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
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )

    args = parser.parse_args()

    ui = TicTacToeUI(TurnController(seed=args.seed))
    ui.run()


if __name__ == "__main__":
    main()
