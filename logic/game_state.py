"""
Game state management for TicTacToe.
Tracks the board, current player, and the moves of the current round.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass, field


# Board cells hold "" (empty), "X" or "O"
EMPTY = ""

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# A board is a sequence of 9 cells in row-major order (index = row * 3 + col)
Board = Sequence[str]


class Mark(str, Enum):
    """The two marks. X always moves first."""
    X = "X"
    O = "O"
    
    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


def new_board() -> List[str]:
    """Create an empty board."""
    return [EMPTY] * NUM_CELLS


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return divmod(index, BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * BOARD_SIZE + col


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, lowest first."""
    return [i for i, cell in enumerate(board) if cell == EMPTY]


@dataclass
class MoveRecord:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Ply of the round (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe round.
    
    Tracks:
    - The 9 cells of the board
    - Current player
    - Move history of this round
    - Game status (ongoing, won, draw)
    """
    
    board: List[str] = field(default_factory=new_board)
    
    # X moves first
    current_player: Mark = Mark.X
    
    moves: List[MoveRecord] = field(default_factory=list)
    
    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False
    
    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.
        
        Args:
            index: Cell index (0-8).
            
        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False
        
        if not 0 <= index < NUM_CELLS:
            print(f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}.")
            return False
        
        if self.board[index] != EMPTY:
            print(f"Cell {index} is already occupied!")
            return False
        
        self.board[index] = self.current_player.value
        self.moves.append(MoveRecord(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        ))
        
        # Winner detection is done by WinChecker; just switch turns here
        self.current_player = self.current_player.opposite()
        
        return True
    
    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return empty_cells(self.board)
    
    def snapshot(self) -> Tuple[str, ...]:
        """Immutable copy of the board, handed to the AI."""
        return tuple(self.board)
    
    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
    
    def print_board(self):
        """Print the board to console."""
        print()
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                index = cell_to_index(row, col)
                cells.append(self.board[index] or str(index))
            print(" " + " | ".join(cells))
            if row < BOARD_SIZE - 1:
                print("---+---+---")
        
        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} Wins!")
            else:
                print("\nDraw!")
        else:
            print(f"\nTurn: {self.current_player.value}")
