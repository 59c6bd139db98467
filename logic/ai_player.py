"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from contextlib import contextmanager
from typing import List, Optional

import numpy as np

from .config import GameConfig
from .game_state import Mark, Board, EMPTY, NUM_CELLS, BOARD_SIZE, empty_cells, index_to_cell
from .win_checker import WinChecker, Status


_CELL_VALUES = (EMPTY, Mark.X.value, Mark.O.value)


class PreconditionViolation(ValueError):
    """The AI was asked to move on a board where no move can be chosen."""


@contextmanager
def _placed(board: List[str], index: int, mark: Mark):
    """Place a mark for the duration of the block, then clear the cell."""
    board[index] = mark.value
    try:
        yield board
    finally:
        board[index] = EMPTY


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.
    
    The AI always plays optimally: it wins if it can, blocks when it
    must, and never loses. The search is exhaustive (no pruning, no
    depth limit) and terminal scores ignore depth, so among several
    winning moves it is not guaranteed to pick the fastest one.
    
    Ties between equally scored moves go to the lowest cell index.
    """
    
    def __init__(self, player: Mark = GameConfig.AI_MARK, verbose: bool = GameConfig.DEBUG_MODE):
        """
        Initialize the AI player.
        
        Args:
            player: Which mark the AI maximizes for (default: O)
            verbose: Print search statistics after every move.
        """
        self.player = Mark(player)
        self.opponent = self.player.opposite()
        self.verbose = verbose
        self.win_checker = WinChecker()
        
        # Nodes visited by the last search (for debugging)
        self.positions_evaluated = 0
    
    def best_move(self, board: Board, side_to_move: Optional[Mark] = None) -> int:
        """
        Get the best move for the current position.
        
        Args:
            board: Snapshot of the 9 cells. Never modified.
            side_to_move: Who is to move, if the caller knows. Must be
                the AI's own mark.
            
        Returns:
            Index (0-8) of the best empty cell.
            
        Raises:
            PreconditionViolation: wrong side, or the board is full
                or already decided.
        """
        if side_to_move is not None and Mark(side_to_move) != self.player:
            raise PreconditionViolation(
                f"It's not {self.player.value}'s turn ({Mark(side_to_move).value} to move)"
            )
        
        scores = self.score_moves(board)
        
        # nanargmax returns the first maximum, i.e. the lowest index wins ties
        move = int(np.nanargmax(scores))
        
        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {move} (score: {scores.flat[move]:.0f})"
            )
        
        return move
    
    def score_moves(self, board: Board) -> np.ndarray:
        """
        Score every empty cell with minimax.
        
        Args:
            board: Snapshot of the 9 cells. Never modified.
            
        Returns:
            3x3 float array of minimax values for the AI (NaN where
            the cell is occupied).
        """
        work = self._checked_copy(board)
        self.positions_evaluated = 0
        
        scores = np.full(NUM_CELLS, np.nan)
        for index in empty_cells(work):
            with _placed(work, index, self.player):
                scores[index] = self._minimax(work, is_maximizing=False)
        
        return scores.reshape(BOARD_SIZE, BOARD_SIZE)
    
    def _checked_copy(self, board: Board) -> List[str]:
        """Copy the snapshot after checking that a move can be chosen."""
        if len(board) != NUM_CELLS:
            raise PreconditionViolation(f"Board must have {NUM_CELLS} cells, got {len(board)}")
        
        if any(cell not in _CELL_VALUES for cell in board):
            raise PreconditionViolation(f"Unknown cell value in {list(board)!r}")

        work = [EMPTY if cell == EMPTY else Mark(cell).value for cell in board]

        outcome = self.win_checker.evaluate(work)
        if outcome.is_win:
            raise PreconditionViolation(f"Game is already won by {outcome.winner.value}")
        if outcome.is_draw:
            raise PreconditionViolation("Board is full")
        
        return work
    
    def _minimax(self, board: List[str], is_maximizing: bool) -> int:
        """
        Minimax value of a position.
        
        Args:
            board: Working board; mutated during the search and
                restored before returning.
            is_maximizing: True if it's the AI's turn.
            
        Returns:
            WIN_SCORE, LOSS_SCORE or DRAW_SCORE under perfect play.
        """
        self.positions_evaluated += 1
        
        outcome = self.win_checker.evaluate(board)
        
        if outcome.status == Status.WIN:
            return GameConfig.WIN_SCORE if outcome.winner == self.player else GameConfig.LOSS_SCORE
        if outcome.status == Status.DRAW:
            return GameConfig.DRAW_SCORE
        
        # Not full here, a full board is a draw or a win
        if is_maximizing:
            best_score = GameConfig.LOSS_SCORE
            for index in empty_cells(board):
                with _placed(board, index, self.player):
                    best_score = max(best_score, self._minimax(board, False))
            return best_score
        else:
            best_score = GameConfig.WIN_SCORE
            for index in empty_cells(board):
                with _placed(board, index, self.opponent):
                    best_score = min(best_score, self._minimax(board, True))
            return best_score
    
    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.
        
        Args:
            board: Current board.
            
        Returns:
            A string describing the suggested move.
        """
        move = self.best_move(board)
        row, col = index_to_cell(move)
        
        return f"Place {self.player.value} at cell {move} (row {row}, col {col})"
