"""
Tests for the Othello Board class.
"""
import numpy as np
import pytest
from boardgames.othello.board import BLACK, WHITE, Board, Outcome


def board_with(black=(), white=()):
    """Build an otherwise empty board with discs at the given cells."""
    board = Board.empty()
    for row, col in black:
        board.state[row, col] = BLACK
    for row, col in white:
        board.state[row, col] = WHITE
    return board


def test_board_initialization():
    """Test that a new board has the four center discs."""
    board = Board()

    assert board.size == 8
    assert board.state.shape == (8, 8)
    assert board.state.dtype == np.int8

    assert board.state[3, 3] == WHITE
    assert board.state[3, 4] == BLACK
    assert board.state[4, 3] == BLACK
    assert board.state[4, 4] == WHITE
    assert np.count_nonzero(board.state) == 4


def test_opening_move_flips_center_disc():
    """Test the standard opening move at (2, 3) for black."""
    board = Board()

    assert board.is_valid_move(2, 3, BLACK)

    after = board.apply_move(2, 3, BLACK)
    assert after.state[2, 3] == BLACK
    assert after.state[3, 3] == BLACK, "White disc at (3, 3) should be flipped"
    assert after.get_score() == {'black': 4, 'white': 1}


def test_opening_valid_moves():
    """Test that each side has exactly four opening moves in row-major order."""
    board = Board()

    assert board.get_valid_moves(BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert board.get_valid_moves(WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_invalid_moves_rejected():
    """Test occupied, out-of-bounds and non-flipping cells."""
    board = Board()

    # Occupied
    assert board.is_valid_move(3, 3, BLACK) == False
    # Out of bounds never raises
    assert board.is_valid_move(-1, 0, BLACK) == False
    assert board.is_valid_move(8, 8, BLACK) == False
    # Empty but nothing to flip
    assert board.is_valid_move(0, 0, BLACK) == False
    assert board.is_valid_move(2, 2, BLACK) == False


def test_flips_only_sandwiched_directions():
    """Test that only runs closed by an own disc are flipped."""
    board = board_with(
        black=[(3, 5), (5, 5)],
        white=[(3, 4), (4, 4), (2, 3), (3, 2), (3, 1)],
    )

    flips = board.flips_for(3, 3, BLACK)
    assert set(flips) == {(3, 4), (4, 4)}

    after = board.apply_move(3, 3, BLACK)
    assert after.state[3, 4] == BLACK
    assert after.state[4, 4] == BLACK
    # Run to the left reaches an empty edge cell, run upward an empty cell
    assert after.state[3, 2] == WHITE
    assert after.state[3, 1] == WHITE
    assert after.state[2, 3] == WHITE


def test_flips_long_run_to_edge():
    """Test a run of several discs closed at the board edge."""
    board = board_with(black=[(0, 7)], white=[(0, 2), (0, 3), (0, 4), (0, 5), (0, 6)])

    after = board.apply_move(0, 1, BLACK)
    assert all(after.state[0, c] == BLACK for c in range(1, 8))


def test_run_ending_at_edge_does_not_flip():
    """Test that opponent discs running off the board are not sandwiched."""
    board = board_with(black=[(0, 0)], white=[(0, 5), (0, 6), (0, 7)])

    assert board.is_valid_move(0, 4, BLACK) == False
    assert board.flips_for(0, 4, BLACK) == []


def test_apply_move_does_not_mutate_input():
    """Test that apply_move returns a new board and leaves the input intact."""
    board = Board()
    saved = board.copy()

    after = board.apply_move(2, 3, BLACK)

    assert after is not board
    assert board == saved
    assert after != saved


def test_score_conservation():
    """Test that every legal move adds exactly one disc."""
    board = Board()
    player = BLACK
    for _ in range(10):
        moves = board.get_valid_moves(player)
        if not moves:
            player = -player
            continue
        before = sum(board.get_score().values())
        board = board.apply_move(*moves[-1], player)
        assert sum(board.get_score().values()) == before + 1
        player = -player


def test_apply_move_without_flips_only_places():
    """Test that an unvalidated move just places the disc."""
    board = Board()
    after = board.apply_move(0, 0, BLACK)

    assert after.state[0, 0] == BLACK
    assert after.get_score() == {'black': 3, 'white': 2}


def test_game_over_when_no_side_can_move():
    """Test terminal detection against both sides' move lists."""
    board = board_with(black=[(0, 0), (0, 1), (0, 2)])

    assert board.get_valid_moves(BLACK) == []
    assert board.get_valid_moves(WHITE) == []
    assert board.is_game_over()

    assert not Board().is_game_over()


def test_game_not_over_when_one_side_can_move():
    """Test that a single side without moves does not end the game."""
    board = board_with(black=[(0, 0), (0, 1), (0, 2)], white=[(1, 0)])

    assert board.get_valid_moves(WHITE) == []
    assert board.get_valid_moves(BLACK) == [(2, 0)]
    assert not board.is_game_over()


@pytest.mark.parametrize("black,white,expected", [
    (3, 1, Outcome.BLACK),
    (1, 3, Outcome.WHITE),
    (2, 2, Outcome.TIE),
])
def test_get_winner(black, white, expected):
    """Test the winner by disc count."""
    board = board_with(
        black=[(0, c) for c in range(black)],
        white=[(7, c) for c in range(white)],
    )
    assert board.get_winner() == expected
