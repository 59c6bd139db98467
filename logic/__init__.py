"""
Logic module for TicTacToe.
Handles game state, rules, the AI opponent and the game session.
"""

from .game_state import GameState, Mark, EMPTY
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome, Status, evaluate
from .ai_player import AIPlayer, PreconditionViolation
from .session import GameSession, GameMode

__version__ = "1.0.0"
