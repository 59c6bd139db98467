"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Either way the rounds are run by logic.session.GameSession.
"""

from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.session import GameSession, GameMode


class ConsoleGame:
    """
    Console front end.
    
    Game flow:
    1. Human (X) types a cell number
    2. In AI mode, the computer (O) answers right away
    3. Repeat until someone wins or it's a draw
    4. 'r' starts a new round, the score is kept
    """
    
    PROMPT = "Cell 0-8, 'h' hint, 'r' reset, 'q' quit: "
    
    def __init__(self, mode: GameMode = GameMode.AI, debug: bool = False):
        self.session = GameSession(mode, AIPlayer(GameConfig.AI_MARK, verbose=debug))
        self.is_running = False
        
        print("\n" + "="*60)
        print("   Tic Tac Toe")
        print(f"   Mode: {'Play with AI' if mode == GameMode.AI else 'Play with Friend'}")
        print("="*60 + "\n")
    
    def start(self):
        """Start the game loop."""
        self.is_running = True
        self.session.game_state.print_board()
        
        while self.is_running:
            command = input(self.PROMPT).strip().lower()
            self._handle_command(command)
    
    def _handle_command(self, command: str):
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self._reset_game()
        elif command == "h":
            print(self.session.hint())
        elif command.isdigit():
            self._play(int(command))
        else:
            print(f"Unknown command: {command!r}")
    
    def _play(self, index: int):
        if not self.session.play(index):
            return
        
        if self.session.needs_ai_move:
            print("\n>>> AI is thinking...")
            move = self.session.ai_move()
            print(f">>> AI plays {move}")
        
        self.session.game_state.print_board()
        
        if self.session.is_game_over:
            self._show_game_result()
    
    def _show_game_result(self):
        """Show the result and the running score."""
        print("\n" + "="*60)
        print(f"   {self.session.status_text()}")
        print(f"   {self.session.score_text()}")
        print("="*60)
        print("Press 'r' to play again or 'q' to quit.")
    
    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.reset()
        self.session.game_state.print_board()


def main():
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--friend",
        action="store_true",
        help="Console mode: two players instead of playing against the AI"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI search statistics"
    )
    
    args = parser.parse_args()
    
    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(debug=args.debug)
        ui.run()
        return
    
    mode = GameMode.FRIEND if args.friend else GameMode.AI
    game = ConsoleGame(mode=mode, debug=args.debug)
    
    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
