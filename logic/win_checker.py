"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still being played.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import GameState, Mark, Board, EMPTY


Line = Tuple[int, int, int]

# All possible winning lines (cell indices, row-major)
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Status(Enum):
    """Terminal status of a board."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.
    
    A WIN carries the winning mark and the line that made it.
    """
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Line] = None
    
    @classmethod
    def win(cls, mark: Mark, line: Line) -> "Outcome":
        return cls(Status.WIN, Mark(mark), tuple(line))
    
    @property
    def is_terminal(self) -> bool:
        return self.status != Status.ONGOING
    
    @property
    def is_win(self) -> bool:
        return self.status == Status.WIN
    
    @property
    def is_draw(self) -> bool:
        return self.status == Status.DRAW


ONGOING = Outcome(Status.ONGOING)
DRAW = Outcome(Status.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).
    Works on any 9-cell board, legal or not.
    """
    
    WINNING_LINES = WINNING_LINES
    
    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.
        
        Args:
            board: 9 cells in row-major order.
            
        Returns:
            Win for the first complete line found, otherwise Draw if
            the board is full, otherwise Ongoing.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] != EMPTY and board[a] == board[b] == board[c]:
                return Outcome.win(board[a], line)
        
        if EMPTY not in board:
            return DRAW
        
        return ONGOING
    
    def check_winner(self, board: Board) -> Optional[Mark]:
        """Return the winning mark, or None if no winner yet."""
        return self.evaluate(board).winner
    
    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return self.evaluate(board).is_draw
    
    def get_winning_line(self, board: Board) -> Optional[Line]:
        """The winning line as cell indices, or None."""
        return self.evaluate(board).line
    
    def update_game_state(self, game_state: GameState) -> Outcome:
        """
        Record winner/draw information on the game state.
        
        Args:
            game_state: The game state to update.
            
        Returns:
            The outcome of the current board.
        """
        outcome = self.evaluate(game_state.board)
        
        if outcome.is_win:
            game_state.winner = outcome.winner
            game_state.is_game_over = True
        elif outcome.is_draw:
            game_state.is_draw = True
            game_state.is_game_over = True
        
        return outcome


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Evaluate a board with the shared WinChecker."""
    return _checker.evaluate(board)
