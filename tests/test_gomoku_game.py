"""
Tests for the Gomoku Game session.
"""
import pytest
from boardgames.gomoku.board import BLACK, WHITE, Board, Outcome
from boardgames.gomoku.game import Game
from boardgames.gomoku.agents.heuristic_agent import HeuristicAgent


def test_game_initialization():
    """Test that a game is initialized correctly."""
    game = Game()

    assert game.board == Board()
    assert game.current_player == BLACK
    assert game.game_state == 'ongoing'
    assert game.winner is None
    assert game.last_move is None
    assert game.can_undo == False


def test_valid_move_switches_player():
    """Test that a valid move places the stone and switches turns."""
    game = Game()

    assert game.make_move(7, 7) == True
    assert game.board.state[7, 7] == BLACK
    assert game.current_player == WHITE
    assert game.last_move == (7, 7)

    assert game.make_move(7, 8) == True
    assert game.board.state[7, 8] == WHITE
    assert game.current_player == BLACK


def test_invalid_move_rejected():
    """Test that invalid moves leave the game untouched."""
    game = Game()
    game.make_move(7, 7)
    before = game.board

    assert game.make_move(7, 7) == False  # Occupied
    assert game.make_move(-1, 0) == False  # Out of bounds
    assert game.make_move(15, 15) == False

    assert game.board is before
    assert game.current_player == WHITE


def test_five_in_a_row_ends_game():
    """Test that completing five ends the game with the right winner."""
    game = Game()
    for col in range(4):
        game.make_move(7, col)   # Black
        game.make_move(8, col)   # White

    assert game.make_move(7, 4) == True
    assert game.game_state == 'win'
    assert game.outcome == Outcome.BLACK
    assert game.winner == BLACK
    assert game.current_player == BLACK, "Turn does not pass after the game ends"

    # No further moves accepted
    assert game.make_move(0, 14) == False


def test_full_board_is_a_draw():
    """Test that filling the last cell without five is a draw."""
    game = Game()
    pattern = [BLACK, BLACK, WHITE, WHITE]
    state = Board().state
    for r in range(15):
        for c in range(15):
            state[r, c] = pattern[(c + 2 * (r % 2) + (r // 2) % 2) % 4]
    last = int(state[14, 14])
    state[14, 14] = 0
    game.board = Board(state)
    game.current_player = last

    assert game.make_move(14, 14) == True
    assert game.game_state == 'draw'
    assert game.outcome == Outcome.TIE
    assert game.winner is None
    assert game.result_for_stats() == 'draw'


def test_undo_in_two_player_game():
    """Test that undo restores black's last move in a two-player game."""
    game = Game()
    game.make_move(7, 7)

    assert game.can_undo
    assert game.undo() == True
    assert game.board == Board()
    assert game.current_player == BLACK
    assert game.undo() == False


def test_ai_reply_clears_undo():
    """Test that the human may undo only until the AI has replied."""
    game = Game(ai_player=WHITE)
    agent = HeuristicAgent(seed=42)

    game.make_move(7, 7)
    assert game.is_ai_turn
    assert game.can_undo

    move = game.play_ai_move(agent)
    assert move is not None
    assert game.board.state[move] == WHITE
    assert game.current_player == BLACK
    assert game.can_undo == False


def test_undo_before_ai_reply():
    """Test that undoing before the AI moves returns the turn to the human."""
    game = Game(ai_player=WHITE)
    game.make_move(7, 7)

    assert game.undo() == True
    assert game.current_player == BLACK
    assert game.board.is_empty()
    assert not game.is_ai_turn


def test_ai_as_black_opens_center():
    """Test that an AI playing black opens in the center."""
    game = Game(ai_player=BLACK)
    assert game.human_player == WHITE
    assert game.play_ai_move(HeuristicAgent(seed=1)) == (7, 7)
    # The AI's own move never opens an undo slot
    assert game.can_undo == False


def test_play_ai_move_only_on_ai_turn():
    """Test that the agent is not consulted on the human's turn."""
    game = Game(ai_player=WHITE)
    assert game.play_ai_move(HeuristicAgent()) is None
    assert game.board.is_empty()


def test_result_for_stats_against_ai():
    """Test outcome reporting from the human side."""
    game = Game(ai_player=WHITE)
    assert game.result_for_stats() is None

    game.outcome = Outcome.WHITE
    assert game.result_for_stats() == 'loss'

    game.outcome = Outcome.BLACK
    assert game.result_for_stats() == 'win'


def test_status_snapshot():
    """Test the render snapshot."""
    game = Game()
    game.make_move(3, 4)
    status = game.status()

    assert status['current_player'] == WHITE
    assert status['game_over'] == False
    assert status['outcome'] == Outcome.ONGOING
    assert status['last_move'] == (3, 4)
