"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, EMPTY, NUM_CELLS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Rules:
    1. Game must not be over
    2. Cell index must be 0-8
    3. Can only place on empty cells
    """
    
    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            index: Cell to place the mark (0-8).
            
        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )
        
        if not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}."
            )
        
        if game_state.board[index] != EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index]}"
            )
        
        return ValidationResult(is_valid=True)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.
        
        Args:
            game_state: Current game state.
            
        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []
        
        return game_state.get_empty_cells()
