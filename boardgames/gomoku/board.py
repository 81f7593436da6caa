"""
Board implementation for Gomoku (freestyle five-in-a-row).
"""
from enum import Enum

import numpy as np


BLACK = 1
WHITE = -1
EMPTY = 0

DIRECTIONS = [
    (0, 1),   # Horizontal
    (1, 0),   # Vertical
    (1, 1),   # Diagonal (↘)
    (1, -1),  # Anti-diagonal (↙)
]


class Outcome(Enum):
    """Result of a Gomoku game. ONGOING is never the same as TIE."""
    ONGOING = 'ongoing'
    BLACK = 'black'
    WHITE = 'white'
    TIE = 'tie'

    @classmethod
    def for_player(cls, player):
        return cls.BLACK if player == BLACK else cls.WHITE


class Board:
    """
    Represents a 15x15 Gomoku board.

    Board state representation:
    - 0: empty cell
    - 1: black stone
    - -1: white stone

    Boards are values: apply_move returns a new Board and never touches
    the one it was called on.
    """

    size = 15

    def __init__(self, state=None):
        """
        Initialize a board.

        Args:
            state (np.ndarray, optional): Existing 15x15 state to wrap.
                An empty board is created when omitted.
        """
        if state is None:
            state = np.zeros((self.size, self.size), dtype=np.int8)
        self.state = state

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.state, other.state)

    def __repr__(self):
        return f"Board(stones={int(np.count_nonzero(self.state))})"

    def copy(self):
        return Board(self.state.copy())

    @property
    def center(self):
        return self.size // 2

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_valid_move(self, row, col):
        """
        Check whether a stone may be placed at (row, col).

        Either side may play any empty cell, so there is no player argument.

        Returns:
            bool: True if the position is on the board and empty
        """
        return self.in_bounds(row, col) and self.state[row, col] == EMPTY

    def apply_move(self, row, col, player):
        """
        Place a stone and return the resulting board.

        Does not validate the move; call is_valid_move first.

        Args:
            row (int): Row position (0-14)
            col (int): Column position (0-14)
            player (int): Player (1 for black, -1 for white)

        Returns:
            Board: New board with the stone placed
        """
        new_state = self.state.copy()
        new_state[row, col] = player
        return Board(new_state)

    def get_legal_moves(self):
        """
        Get all empty positions on the board.

        Returns:
            list: List of (row, col) tuples in row-major order
        """
        rows, cols = np.nonzero(self.state == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self):
        return bool(np.all(self.state != EMPTY))

    def is_empty(self):
        return not np.any(self.state)

    def count_direction(self, row, col, dr, dc, player, limit=4):
        """
        Count contiguous stones of `player` walking away from (row, col).

        The starting cell itself is not counted. The walk stops at the board
        edge, at the first cell not holding `player`, or after `limit` stones
        since four more stones already make five.

        Returns:
            int: Number of matching stones found (0..limit)
        """
        count = 0
        r, c = row + dr, col + dc
        while (count < limit and self.in_bounds(r, c) and
               self.state[r, c] == player):
            count += 1
            r, c = r + dr, c + dc
        return count

    def line_length(self, row, col, player, dr, dc):
        """Length of the run through (row, col) along one axis, cell included."""
        return (1 + self.count_direction(row, col, dr, dc, player)
                + self.count_direction(row, col, -dr, -dc, player))

    def has_five(self, row, col, player):
        """True if `player` has five or more in a row through (row, col)."""
        return any(self.line_length(row, col, player, dr, dc) >= 5
                   for dr, dc in DIRECTIONS)

    def is_game_over(self, row, col, player):
        """
        Check whether the move just played at (row, col) ended the game.

        Args:
            row, col: Coordinates of the stone just placed
            player: Player who placed it

        Returns:
            bool: True on five-in-a-row through the cell or a full board
        """
        return self.has_five(row, col, player) or self.is_full()

    def get_winner(self, row, col, player):
        """
        Get the result after `player` played at (row, col).

        Returns:
            Outcome: The player's outcome on five-in-a-row, TIE when the board
            filled up without one, ONGOING otherwise
        """
        if self.has_five(row, col, player):
            return Outcome.for_player(player)
        if self.is_full():
            return Outcome.TIE
        return Outcome.ONGOING
