"""
Game configuration for TicTacToe.
Marks, search scores, timing and UI look.
"""

from .game_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    """
    
    # ==================== PLAYERS ====================
    # The human always plays X and moves first; the AI answers as O
    HUMAN_MARK = Mark.X
    AI_MARK = Mark.O
    
    # ==================== SEARCH ====================
    # Terminal values seen from the AI's side.
    # Not weighted by depth: a win in 1 and a win in 5 score the same.
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0
    
    # Pause before the AI answers in the UI (milliseconds)
    AI_MOVE_DELAY_MS = 50
    
    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BG_COLOR = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_FG = 'white'
    STRIKE_BG = '#7f1d1d'       # Cells of the winning line
    STRIKE_FG = '#f87171'
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    FONT_FAMILY = 'Segoe UI'
    
    # ==================== DEBUG SETTINGS ====================
    # Print search statistics after every AI move
    DEBUG_MODE = False
