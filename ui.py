"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Whose turn it is, the result and the running score
- Play with Friend / Play with AI / Reset buttons
"""

import tkinter as tk
from tkinter import ttk
import threading
from typing import List

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.game_state import GameState, BOARD_SIZE, cell_to_index
from logic.session import GameSession, GameMode


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, debug: bool = False):
        """Initialize the UI."""
        # Before a mode is picked, the board plays as two humans
        self.session = GameSession(
            GameMode.FRIEND,
            AIPlayer(GameConfig.AI_MARK, verbose=debug)
        )
        self.ai_thinking = False

        self._create_ui()
        self._toggle_buttons(show_play_buttons=True)
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(360, 480)

        font = GameConfig.FONT_FAMILY

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground=GameConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(font, 12), foreground=GameConfig.STATUS_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 5))

        self.turn_label = ttk.Label(main_frame, text="Turn: X", style='Status.TLabel')
        self.turn_label.pack()

        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack(pady=(0, 10))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells: List[tk.Label] = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                cell = tk.Label(
                    board_frame,
                    text="",
                    font=(font, 24, 'bold'),
                    width=4,
                    height=2,
                    bg=GameConfig.CELL_BG,
                    fg=GameConfig.CELL_FG,
                    relief='ridge',
                    borderwidth=2
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                cell.bind('<Button-1>', lambda event, i=cell_to_index(row, col): self._on_cell_click(i))
                self.board_cells.append(cell)

        # Result message
        self.message_label = ttk.Label(main_frame, text="", style='Title.TLabel')
        self.message_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.friend_btn = tk.Button(
            control_frame,
            text="Play with Friend",
            font=(font, 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=14,
            command=lambda: self._start_game(GameMode.FRIEND)
        )
        self.ai_btn = tk.Button(
            control_frame,
            text="Play with AI",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=14,
            command=lambda: self._start_game(GameMode.AI)
        )
        self.reset_btn = tk.Button(
            control_frame,
            text="Reset",
            font=(font, 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=14,
            command=self._reset_game
        )

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _toggle_buttons(self, show_play_buttons: bool):
        """Show either the two mode buttons or the reset button."""
        for btn in (self.friend_btn, self.ai_btn, self.reset_btn):
            btn.pack_forget()

        if show_play_buttons:
            self.friend_btn.pack(side=tk.LEFT, padx=5)
            self.ai_btn.pack(side=tk.LEFT, padx=5)
        else:
            self.reset_btn.pack(side=tk.LEFT, padx=5)

    def _start_game(self, mode: GameMode):
        """Start a round in the chosen mode."""
        print(f"Starting game: {mode.value}")
        self.session.start(mode)
        self.ai_thinking = False
        self._toggle_buttons(show_play_buttons=False)
        self._refresh()

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if self.ai_thinking:
            return

        if not self.session.play(index):
            return

        self._after_move()

    def _after_move(self):
        """Redraw, end the round if needed, or hand over to the AI."""
        self._refresh()

        if self.session.is_game_over:
            self._toggle_buttons(show_play_buttons=False)
        elif self.session.needs_ai_move:
            self.ai_thinking = True
            self.root.after(
                GameConfig.AI_MOVE_DELAY_MS,
                lambda game_state=self.session.game_state: self._start_ai_move(game_state)
            )

    def _start_ai_move(self, game_state: GameState):
        """Run the search off the UI thread."""
        # The round was reset before the delay ran out
        if self.session.game_state is not game_state:
            return

        snapshot = game_state.snapshot()

        threading.Thread(
            target=self._ai_move,
            args=(game_state, snapshot),
            daemon=True
        ).start()

    def _ai_move(self, game_state: GameState, snapshot):
        """Compute the AI's move (runs in background thread)."""
        try:
            move = self.session.ai.best_move(snapshot, self.session.ai.player)
        except Exception as e:
            print(f"AI error: {e}")
            self.root.after(0, lambda: self._abort_ai_move(game_state))
            return

        self.root.after(0, lambda: self._finish_ai_move(game_state, move))

    def _abort_ai_move(self, game_state: GameState):
        """Give the board back to the human after a failed search."""
        if self.session.game_state is game_state:
            self.ai_thinking = False
            self.turn_label.configure(text="AI error!")

    def _finish_ai_move(self, game_state: GameState, move: int):
        """Play the AI's move (runs on UI thread)."""
        # The round was reset while the AI was thinking
        if self.session.game_state is not game_state:
            return

        self.ai_thinking = False
        if self.session.apply_ai_move(move):
            self._after_move()

    def _refresh(self):
        """Update the board, the labels and the winning-line highlight."""
        board = self.session.game_state.board
        line = self.session.outcome.line or ()

        for index, cell in enumerate(self.board_cells):
            if index in line:
                cell.configure(text=board[index], bg=GameConfig.STRIKE_BG, fg=GameConfig.STRIKE_FG)
            else:
                cell.configure(text=board[index], bg=GameConfig.CELL_BG, fg=GameConfig.CELL_FG)

        self.turn_label.configure(text=self.session.status_text())
        self.score_label.configure(text=self.session.score_text())

        if self.session.is_game_over:
            self.message_label.configure(text=self.session.status_text())
        else:
            self.message_label.configure(text="")

    def _reset_game(self):
        """Reset the game and offer the mode buttons again."""
        print("Resetting game...")
        self.session.reset()
        self.ai_thinking = False
        self._toggle_buttons(show_play_buttons=True)
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
