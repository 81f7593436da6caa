"""Xiangqi piece types, pieces and moves."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

RED = 1
BLACK = -1

Position = Tuple[int, int]


class PieceType(Enum):
    GENERAL = 1
    ADVISOR = 2
    ELEPHANT = 3
    HORSE = 4
    CHARIOT = 5
    CANNON = 6
    SOLDIER = 7


PIECE_VALUES: dict[PieceType, int] = {
    PieceType.GENERAL: 1000,
    PieceType.ADVISOR: 20,
    PieceType.ELEPHANT: 20,
    PieceType.HORSE: 40,
    PieceType.CHARIOT: 90,
    PieceType.CANNON: 45,
    PieceType.SOLDIER: 10,
}

# Single-letter notation, upper case for red (as in Xiangqi FEN)
LETTER_TO_PIECE: dict[str, PieceType] = {
    "k": PieceType.GENERAL,
    "a": PieceType.ADVISOR,
    "b": PieceType.ELEPHANT,
    "n": PieceType.HORSE,
    "r": PieceType.CHARIOT,
    "c": PieceType.CANNON,
    "p": PieceType.SOLDIER,
}

PIECE_TO_LETTER: dict[PieceType, str] = {value: key for key, value in LETTER_TO_PIECE.items()}


def opponent(side: int) -> int:
    return -side


def side_name(side: int) -> str:
    return "red" if side == RED else "black"


@dataclass(frozen=True)
class Piece:
    kind: PieceType
    side: int

    @classmethod
    def from_code(cls, code: int) -> Optional["Piece"]:
        """Decode a signed board cell; 0 is an empty cell."""
        if code == 0:
            return None
        return cls(PieceType(abs(code)), RED if code > 0 else BLACK)

    def to_code(self) -> int:
        return self.kind.value * self.side

    @classmethod
    def from_letter(cls, character: str) -> "Piece":
        # upper case: red pieces, lower case: black pieces
        side = RED if character.isupper() else BLACK
        return cls(LETTER_TO_PIECE[character.lower()], side)

    def to_letter(self) -> str:
        letter = PIECE_TO_LETTER[self.kind]
        return letter.upper() if self.side == RED else letter

    @property
    def value(self) -> int:
        return PIECE_VALUES[self.kind]


@dataclass(frozen=True)
class Move:
    """A piece relocation, with the piece it captures if any."""

    from_pos: Position
    to_pos: Position
    piece: Piece
    captured: Optional[Piece] = None
