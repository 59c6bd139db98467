"""
Tests for the game session and the console front end.
"""

from logic.ai_player import AIPlayer
from logic.game_state import Mark, EMPTY
from logic.session import GameSession, GameMode
from logic.win_checker import ONGOING
from main import ConsoleGame


def play_all(session, moves):
    for index in moves:
        assert session.play(index), f"move {index} rejected"


class TestFriendMode:
    def test_players_alternate(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [4, 0])
        assert session.game_state.board[4] == "X"
        assert session.game_state.board[0] == "O"
        assert session.current_player == Mark.X
        assert not session.needs_ai_move

    def test_x_win_counts(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [0, 3, 1, 4, 2])
        assert session.is_game_over
        assert session.outcome.winner == Mark.X
        assert session.outcome.line == (0, 1, 2)
        assert session.scores == {Mark.X: 1, Mark.O: 0}
        assert session.status_text() == "X Wins!"
        assert session.score_text() == "X Wins: 1 | O Wins: 0"

    def test_draw_does_not_count(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [0, 1, 2, 4, 3, 5, 7, 6, 8])
        assert session.outcome.is_draw
        assert session.status_text() == "Draw!"
        assert session.scores == {Mark.X: 0, Mark.O: 0}

    def test_no_moves_after_game_over(self, capsys):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [0, 3, 1, 4, 2])
        assert session.play(8) is False
        assert "Game is already over!" in capsys.readouterr().out
        assert session.game_state.board[8] == EMPTY

    def test_occupied_cell_ignored(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [4])
        assert session.play(4) is False
        assert session.current_player == Mark.O

    def test_reset_keeps_scores(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [0, 3, 1, 4, 2])
        session.reset()
        assert session.game_state.board == [EMPTY] * 9
        assert session.outcome == ONGOING
        assert session.current_player == Mark.X
        assert session.status_text() == "Turn: X"
        assert session.scores[Mark.X] == 1

    def test_hint_for_side_to_move(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [0, 4, 1])
        assert session.hint() == "Place O at cell 2 (row 0, col 2)"

    def test_hint_follows_debug_setting(self, capsys):
        session = GameSession(GameMode.FRIEND, AIPlayer(Mark.O, verbose=True))
        play_all(session, [0, 4, 1])
        session.hint()
        assert "AI evaluated" in capsys.readouterr().out

    def test_hint_quiet_by_default(self, capsys):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [0, 4, 1])
        session.hint()
        assert capsys.readouterr().out == ""


class TestAIMode:
    def test_ai_answers_corner_then_blocks(self):
        session = GameSession(GameMode.AI)
        play_all(session, [0])
        assert session.needs_ai_move
        assert session.ai_move() == 4

        play_all(session, [1])
        assert session.ai_move() == 2
        assert session.outcome == ONGOING
        assert session.current_player == Mark.X

    def test_human_cannot_play_for_ai(self, capsys):
        session = GameSession(GameMode.AI)
        play_all(session, [0])
        assert session.play(1) is False
        assert "Wait for O" in capsys.readouterr().out

    def test_ai_punishes_blunder(self):
        session = GameSession(GameMode.AI)
        ai_moves = []
        for index in (0, 1, 6, 8):
            play_all(session, [index])
            ai_moves.append(session.ai_move())

        assert ai_moves == [4, 2, 3, 5]
        assert session.outcome.winner == Mark.O
        assert session.outcome.line == (3, 4, 5)
        assert session.scores == {Mark.X: 0, Mark.O: 1}
        assert session.status_text() == "O Wins!"

    def test_apply_ai_move_when_not_ai_turn(self):
        session = GameSession(GameMode.AI)
        assert session.apply_ai_move(4) is False
        assert session.game_state.board[4] == EMPTY

    def test_start_switches_mode_and_resets(self):
        session = GameSession(GameMode.FRIEND)
        play_all(session, [4])
        session.start(GameMode.AI)
        assert session.mode == GameMode.AI
        assert session.game_state.board == [EMPTY] * 9


class TestConsoleGame:
    def test_commands(self, monkeypatch, capsys):
        inputs = iter(["4", "x", "r", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

        game = ConsoleGame(GameMode.AI)
        game.start()

        out = capsys.readouterr().out
        assert ">>> AI plays" in out
        assert "Unknown command: 'x'" in out
        assert "Resetting game..." in out
        assert "Game quit by user." in out
        assert game.session.game_state.board == [EMPTY] * 9

    def test_friend_round_shows_result(self, monkeypatch, capsys):
        inputs = iter(["0", "3", "1", "4", "2", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

        game = ConsoleGame(GameMode.FRIEND)
        game.start()

        out = capsys.readouterr().out
        assert "X Wins!" in out
        assert "X Wins: 1 | O Wins: 0" in out
