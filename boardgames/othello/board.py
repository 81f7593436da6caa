"""
Board implementation for Othello (Reversi).
"""
from enum import Enum

import numpy as np


BLACK = 1
WHITE = -1
EMPTY = 0

DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def _sandwiched(grid, row, col, dr, dc, player):
    """
    Opponent discs sandwiched along one direction from (row, col).

    Works on a plain nested list, which is much faster to scan than
    indexing the numpy array cell by cell.

    Returns:
        list: Cells to flip, empty unless the run of opponent discs is
        closed by one of `player`'s discs
    """
    run = []
    r, c = row + dr, col + dc
    while 0 <= r < 8 and 0 <= c < 8:
        cell = grid[r][c]
        if cell == EMPTY:
            return []
        if cell == player:
            return run
        run.append((r, c))
        r, c = r + dr, c + dc
    return []


def _is_valid(grid, row, col, player):
    if grid[row][col] != EMPTY:
        return False
    for dr, dc in DIRECTIONS:
        if _sandwiched(grid, row, col, dr, dc, player):
            return True
    return False


class Outcome(Enum):
    """Result of an Othello game."""
    ONGOING = 'ongoing'
    BLACK = 'black'
    WHITE = 'white'
    TIE = 'tie'


class Board:
    """
    Represents an 8x8 Othello board.

    Board state representation:
    - 0: empty cell
    - 1: black disc
    - -1: white disc

    A new board starts with the four center discs in the standard diagonal
    pattern. apply_move returns a new Board; boards are never modified in place.
    """

    size = 8

    def __init__(self, state=None):
        """
        Initialize a board.

        Args:
            state (np.ndarray, optional): Existing 8x8 state to wrap.
                The standard opening position is used when omitted.
        """
        if state is None:
            state = np.zeros((self.size, self.size), dtype=np.int8)
            state[3, 3] = WHITE
            state[3, 4] = BLACK
            state[4, 3] = BLACK
            state[4, 4] = WHITE
        self.state = state

    @classmethod
    def empty(cls):
        """A board with no discs, for setting up positions."""
        return cls(np.zeros((cls.size, cls.size), dtype=np.int8))

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.state, other.state)

    def __repr__(self):
        score = self.get_score()
        return f"Board(black={score['black']}, white={score['white']})"

    def copy(self):
        return Board(self.state.copy())

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def flips_for(self, row, col, player):
        """
        All discs that placing `player` at (row, col) would flip.

        Returns:
            list: (row, col) tuples of opponent discs to flip
        """
        grid = self.state.tolist()
        flips = []
        for dr, dc in DIRECTIONS:
            flips.extend(_sandwiched(grid, row, col, dr, dc, player))
        return flips

    def is_valid_move(self, row, col, player):
        """
        Check if `player` may place a disc at (row, col).

        The cell must be empty and at least one direction must sandwich a
        contiguous run of opponent discs against one of the player's discs.

        Returns:
            bool: True if the move is legal
        """
        if not self.in_bounds(row, col):
            return False
        return _is_valid(self.state.tolist(), row, col, player)

    def apply_move(self, row, col, player):
        """
        Place a disc and flip every sandwiched run.

        Does not validate: an illegal target just gets the disc placed.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)
            player (int): Player (1 for black, -1 for white)

        Returns:
            Board: New board after the move
        """
        new_state = self.state.copy()
        new_state[row, col] = player
        for r, c in self.flips_for(row, col, player):
            new_state[r, c] = player
        return Board(new_state)

    def get_valid_moves(self, player):
        """
        Get all legal moves for `player`.

        Returns:
            list: (row, col) tuples in row-major order
        """
        grid = self.state.tolist()
        return [(row, col)
                for row in range(self.size)
                for col in range(self.size)
                if _is_valid(grid, row, col, player)]

    def get_score(self):
        """
        Count discs on the board.

        Returns:
            dict: {'black': int, 'white': int}
        """
        return {
            'black': int(np.count_nonzero(self.state == BLACK)),
            'white': int(np.count_nonzero(self.state == WHITE)),
        }

    def is_game_over(self):
        """True when neither side has a legal move."""
        return not self.get_valid_moves(BLACK) and not self.get_valid_moves(WHITE)

    def get_winner(self):
        """
        Side with more discs.

        Not gated on is_game_over; callers decide when to ask.

        Returns:
            Outcome: BLACK, WHITE or TIE
        """
        score = self.get_score()
        if score['black'] > score['white']:
            return Outcome.BLACK
        if score['white'] > score['black']:
            return Outcome.WHITE
        return Outcome.TIE
