"""
The Xiangqi board implements piece movement, check and game-end rules.

Rows run 0-9 from black's back rank to red's back rank, columns 0-8.
Red starts on rows 6-9 and moves up the board; the river lies between
rows 4 and 5.
"""
from enum import Enum
from typing import List, Optional

import numpy as np

from .pieces import BLACK, RED, Move, Piece, PieceType, Position, opponent

BOARD_ROWS = 10
BOARD_COLS = 9

ORTHOGONALS = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONALS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

# (row step, col step, leg row, leg col): the leg cell must be empty
HORSE_JUMPS = [
    (2, 1, 1, 0), (2, -1, 1, 0), (-2, 1, -1, 0), (-2, -1, -1, 0),
    (1, 2, 0, 1), (-1, 2, 0, 1), (1, -2, 0, -1), (-1, -2, 0, -1),
]

BACK_RANK = [
    PieceType.CHARIOT, PieceType.HORSE, PieceType.ELEPHANT, PieceType.ADVISOR,
    PieceType.GENERAL,
    PieceType.ADVISOR, PieceType.ELEPHANT, PieceType.HORSE, PieceType.CHARIOT,
]


class Outcome(Enum):
    """Result of a Xiangqi game. ONGOING is distinct from DRAW."""
    ONGOING = 'ongoing'
    RED = 'red'
    BLACK = 'black'
    DRAW = 'draw'

    @classmethod
    def win_for(cls, side):
        return cls.RED if side == RED else cls.BLACK


def is_valid_position(row: int, col: int) -> bool:
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def is_in_palace(pos: Position, side: int) -> bool:
    row, col = pos
    if not 3 <= col <= 5:
        return False
    return 7 <= row <= 9 if side == RED else 0 <= row <= 2


def is_on_own_side(pos: Position, side: int) -> bool:
    return pos[0] >= 5 if side == RED else pos[0] <= 4


def _can_land(grid, row, col, side) -> bool:
    """Empty or holding an enemy piece."""
    return grid[row][col] * side <= 0


def _piece_destinations(grid, row, col) -> List[Position]:
    """Pseudo-legal destinations of the piece on (row, col) of a nested-list grid."""
    code = grid[row][col]
    if code == 0:
        return []
    kind = PieceType(abs(code))
    side = RED if code > 0 else BLACK
    moves: List[Position] = []

    if kind == PieceType.GENERAL or kind == PieceType.ADVISOR:
        steps = ORTHOGONALS if kind == PieceType.GENERAL else DIAGONALS
        for dr, dc in steps:
            r, c = row + dr, col + dc
            if is_in_palace((r, c), side) and _can_land(grid, r, c, side):
                moves.append((r, c))

    elif kind == PieceType.ELEPHANT:
        for dr, dc in DIAGONALS:
            r, c = row + 2 * dr, col + 2 * dc
            if (is_valid_position(r, c) and is_on_own_side((r, c), side)
                    and grid[row + dr][col + dc] == 0
                    and _can_land(grid, r, c, side)):
                moves.append((r, c))

    elif kind == PieceType.HORSE:
        for dr, dc, leg_r, leg_c in HORSE_JUMPS:
            r, c = row + dr, col + dc
            if (is_valid_position(r, c) and grid[row + leg_r][col + leg_c] == 0
                    and _can_land(grid, r, c, side)):
                moves.append((r, c))

    elif kind == PieceType.CHARIOT:
        for dr, dc in ORTHOGONALS:
            r, c = row + dr, col + dc
            while is_valid_position(r, c):
                if grid[r][c] != 0:
                    if _can_land(grid, r, c, side):
                        moves.append((r, c))
                    break
                moves.append((r, c))
                r, c = r + dr, c + dc

    elif kind == PieceType.CANNON:
        for dr, dc in ORTHOGONALS:
            screened = False
            r, c = row + dr, col + dc
            while is_valid_position(r, c):
                if grid[r][c] != 0:
                    if not screened:
                        screened = True
                    else:
                        if _can_land(grid, r, c, side):
                            moves.append((r, c))
                        break
                elif not screened:
                    moves.append((r, c))
                r, c = r + dr, c + dc

    elif kind == PieceType.SOLDIER:
        forward = -1 if side == RED else 1
        r = row + forward
        if is_valid_position(r, col) and _can_land(grid, r, col, side):
            moves.append((r, col))
        # Sideways steps only once across the river
        if not is_on_own_side((row, col), side):
            for dc in (1, -1):
                c = col + dc
                if is_valid_position(row, c) and _can_land(grid, row, c, side):
                    moves.append((row, c))

    return moves


def _general_square(grid, side) -> Optional[Position]:
    target = PieceType.GENERAL.value * side
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLS):
            if grid[row][col] == target:
                return (row, col)
    return None


def _attacked(grid, square, by_side) -> bool:
    """True if any piece of `by_side` has `square` among its destinations."""
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLS):
            if grid[row][col] * by_side > 0 and square in _piece_destinations(grid, row, col):
                return True
    return False


def _leaves_in_check(grid, from_pos, to_pos, side) -> bool:
    """Play from_pos -> to_pos on a scratch copy and test for check."""
    scratch = [list(r) for r in grid]
    scratch[to_pos[0]][to_pos[1]] = scratch[from_pos[0]][from_pos[1]]
    scratch[from_pos[0]][from_pos[1]] = 0
    general = _general_square(scratch, side)
    return general is not None and _attacked(scratch, general, opponent(side))


class Board:
    """
    A 10x9 Xiangqi position.

    Board state representation: signed piece codes in an int8 array,
    0 empty, positive red, negative black, magnitude is the PieceType value.
    Boards are values: apply_move returns a new Board.
    """

    def __init__(self, state=None):
        """
        Initialize a board.

        Args:
            state (np.ndarray, optional): Existing 10x9 state to wrap.
                The standard starting position is used when omitted.
        """
        if state is None:
            state = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
            for side, back, cannons, soldiers in ((BLACK, 0, 2, 3), (RED, 9, 7, 6)):
                for col, kind in enumerate(BACK_RANK):
                    state[back, col] = kind.value * side
                for col in (1, 7):
                    state[cannons, col] = PieceType.CANNON.value * side
                for col in (0, 2, 4, 6, 8):
                    state[soldiers, col] = PieceType.SOLDIER.value * side
        self.state = state

    @classmethod
    def empty(cls) -> "Board":
        return cls(np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8))

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """
        Build a position from ten 9-character strings, top row first.

        Letters follow Xiangqi FEN (k a b n r c p), upper case red,
        '.' marks an empty point.
        """
        if len(rows) != BOARD_ROWS or any(len(r) != BOARD_COLS for r in rows):
            raise ValueError("Expected 10 rows of 9 characters")
        state = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
        for row, text in enumerate(rows):
            for col, character in enumerate(text):
                if character != '.':
                    state[row, col] = Piece.from_letter(character).to_code()
        return cls(state)

    def to_rows(self) -> List[str]:
        rows = []
        for row in self.state.tolist():
            rows.append(''.join(Piece.from_code(code).to_letter() if code else '.'
                                for code in row))
        return rows

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.state, other.state)

    def __repr__(self):
        return "Board(\n  " + "\n  ".join(self.to_rows()) + "\n)"

    def copy(self) -> "Board":
        return Board(self.state.copy())

    def piece_at(self, pos: Position) -> Optional[Piece]:
        row, col = pos
        if not is_valid_position(row, col):
            return None
        return Piece.from_code(int(self.state[row, col]))

    def with_piece(self, pos: Position, piece: Optional[Piece]) -> "Board":
        """New board with `pos` set to `piece` (None clears it)."""
        new_state = self.state.copy()
        new_state[pos] = piece.to_code() if piece else 0
        return Board(new_state)

    def locate_side(self, side: int) -> List[Position]:
        rows, cols = np.nonzero(self.state * side > 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def find_general(self, side: int) -> Optional[Position]:
        return _general_square(self.state.tolist(), side)

    def get_valid_moves(self, pos: Position) -> List[Position]:
        """
        Pseudo-legal destinations for the piece on `pos`.

        Moves that leave the mover's own general in check are NOT removed;
        use get_legal_moves for what may actually be played.

        Returns:
            list: (row, col) destinations, empty for an empty or off-board point
        """
        if not is_valid_position(*pos):
            return []
        return _piece_destinations(self.state.tolist(), *pos)

    def get_legal_moves(self, pos: Position) -> List[Position]:
        """Destinations for the piece on `pos` that keep its general safe."""
        if not is_valid_position(*pos):
            return []
        grid = self.state.tolist()
        code = grid[pos[0]][pos[1]]
        if code == 0:
            return []
        side = RED if code > 0 else BLACK
        return [to for to in _piece_destinations(grid, *pos)
                if not _leaves_in_check(grid, pos, to, side)]

    def make_move_record(self, from_pos: Position, to_pos: Position) -> Move:
        """Describe moving the piece on `from_pos` to `to_pos`."""
        piece = self.piece_at(from_pos)
        if piece is None:
            raise ValueError(f"No piece on {from_pos}")
        return Move(from_pos, to_pos, piece, self.piece_at(to_pos))

    def apply_move(self, move: Move) -> "Board":
        """
        Relocate a piece and return the resulting board.

        Does not validate the move.
        """
        new_state = self.state.copy()
        new_state[move.to_pos] = move.piece.to_code()
        new_state[move.from_pos] = 0
        return Board(new_state)

    def get_all_legal_moves(self, side: int) -> List[Move]:
        """Every check-filtered move for `side`, scanning the board row by row."""
        grid = self.state.tolist()
        moves = []
        for from_pos in self.locate_side(side):
            piece = Piece.from_code(grid[from_pos[0]][from_pos[1]])
            for to_pos in _piece_destinations(grid, *from_pos):
                if not _leaves_in_check(grid, from_pos, to_pos, side):
                    moves.append(Move(from_pos, to_pos, piece,
                                      Piece.from_code(grid[to_pos[0]][to_pos[1]])))
        return moves

    def has_legal_move(self, side: int) -> bool:
        grid = self.state.tolist()
        for from_pos in self.locate_side(side):
            for to_pos in _piece_destinations(grid, *from_pos):
                if not _leaves_in_check(grid, from_pos, to_pos, side):
                    return True
        return False

    def is_in_check(self, side: int) -> bool:
        """
        True if an opposing piece can reach `side`'s general.

        A side without a general on the board is never in check.
        """
        grid = self.state.tolist()
        general = _general_square(grid, side)
        if general is None:
            return False
        return _attacked(grid, general, opponent(side))

    def is_checkmate(self, side: int) -> bool:
        """In check, and no legal move gets out of it."""
        return self.is_in_check(side) and not self.has_legal_move(side)

    def get_game_result(self, side_to_move: int) -> Outcome:
        """
        Result of the position with `side_to_move` about to play.

        Returns:
            Outcome: the other side's win on checkmate, DRAW on stalemate,
            ONGOING otherwise
        """
        if self.has_legal_move(side_to_move):
            return Outcome.ONGOING
        if self.is_in_check(side_to_move):
            return Outcome.win_for(opponent(side_to_move))
        return Outcome.DRAW
