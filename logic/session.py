"""
Game session for TicTacToe.
Owns the current round, the play mode and the running score, and asks
the AI for O's moves when playing against the computer.
"""

from enum import Enum
from typing import Dict, Optional

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, Mark
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome, ONGOING


class GameMode(Enum):
    """Who plays O."""
    FRIEND = "friend"   # Two humans share the board
    AI = "ai"           # The computer answers every X move


class GameSession:
    """
    Controller for a series of rounds.
    
    The front ends (Tkinter window, console) only forward clicks/inputs
    here and redraw from the session's state.
    """
    
    def __init__(self, mode: GameMode = GameMode.AI, ai: Optional[AIPlayer] = None):
        self.mode = mode
        self.ai = ai or AIPlayer(GameConfig.AI_MARK)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        
        # Wins per mark, kept across rounds
        self.scores: Dict[Mark, int] = {Mark.X: 0, Mark.O: 0}
        
        self.game_state = GameState()
        self.outcome: Outcome = ONGOING
    
    def start(self, mode: GameMode):
        """Start a new round in the given mode."""
        self.mode = mode
        self.reset()
    
    def reset(self):
        """Clear the board for a new round. Scores are kept."""
        self.game_state = GameState()
        self.outcome = ONGOING
    
    @property
    def is_game_over(self) -> bool:
        return self.game_state.is_game_over
    
    @property
    def current_player(self) -> Mark:
        return self.game_state.current_player
    
    @property
    def needs_ai_move(self) -> bool:
        """True when it's the computer's turn."""
        return (
            self.mode == GameMode.AI
            and not self.is_game_over
            and self.current_player == self.ai.player
        )
    
    def play(self, index: int) -> bool:
        """
        Play a human move at the given cell.
        
        Args:
            index: Cell index (0-8).
            
        Returns:
            True if the move was made.
        """
        if self.needs_ai_move:
            print(f"Wait for {self.ai.player.value} to move!")
            return False
        
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(result.error_message)
            return False
        
        self._apply(index)
        return True
    
    def ai_move(self) -> int:
        """
        Let the AI play its move.
        
        Returns:
            The cell the AI played.
        """
        move = self.ai.best_move(self.game_state.snapshot(), self.current_player)
        self.apply_ai_move(move)
        return move
    
    def apply_ai_move(self, index: int) -> bool:
        """
        Play a move the AI chose elsewhere (e.g. on a worker thread).
        
        Returns:
            False if it is no longer the AI's turn or the cell is taken.
        """
        if not self.needs_ai_move:
            return False
        
        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(result.error_message)
            return False
        
        self._apply(index)
        return True
    
    def hint(self) -> str:
        """Best move for the player to move, from the AI's point of view."""
        if self.is_game_over:
            return "Game is over!"
        ai = AIPlayer(self.current_player, verbose=self.ai.verbose)
        return ai.get_move_suggestion(self.game_state.snapshot())
    
    def _apply(self, index: int):
        self.game_state.make_move(index)
        self.outcome = self.win_checker.update_game_state(self.game_state)
        
        if self.outcome.is_win:
            self.scores[self.outcome.winner] += 1
    
    def status_text(self) -> str:
        """Turn or result line for display."""
        if self.outcome.is_win:
            return f"{self.outcome.winner.value} Wins!"
        if self.outcome.is_draw:
            return "Draw!"
        return f"Turn: {self.current_player.value}"
    
    def score_text(self) -> str:
        return f"X Wins: {self.scores[Mark.X]} | O Wins: {self.scores[Mark.O]}"
