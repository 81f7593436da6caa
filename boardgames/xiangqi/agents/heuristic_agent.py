"""
Heuristic agent for Xiangqi.

A one-ply, threat-aware move scorer: it takes mate in one, parries the
opponent's mate in one, and otherwise scores moves on material and position.
"""
import logging
import random

from ..board import Outcome
from ..pieces import PIECE_VALUES, RED, PieceType, opponent, side_name

logger = logging.getLogger(__name__)


# Indexed by rows counted from the mover's own back rank
GENERAL_BONUS = [
    [0, 0, 0, 8, 8, 8, 0, 0, 0],
    [0, 0, 0, 8, 8, 8, 0, 0, 0],
    [0, 0, 0, 8, 8, 8, 0, 0, 0],
]

SOLDIER_BONUS = [
    [0, 3, 6, 9, 12, 9, 6, 3, 0],
    [19, 24, 34, 42, 44, 42, 34, 24, 19],
    [19, 24, 32, 37, 37, 37, 32, 24, 19],
    [19, 23, 27, 29, 30, 29, 27, 23, 19],
]

CENTER_COLUMNS = (3, 4, 5)
CENTER_BONUS = 5
ADVANCE_BONUS = 3
ADVANCING_PIECES = (PieceType.SOLDIER, PieceType.HORSE, PieceType.CHARIOT)


def evaluate_move(move, side):
    """
    Static score of `move` for `side`.

    Capture value, general/soldier placement tables, central files and
    forward progress of soldiers, horses and chariots.

    Returns:
        int: Higher is better
    """
    score = 0
    to_row, to_col = move.to_pos

    if move.captured is not None:
        score += PIECE_VALUES[move.captured.kind]

    home_row = 9 - to_row if side == RED else to_row
    if move.piece.kind == PieceType.GENERAL and 0 <= home_row < len(GENERAL_BONUS):
        score += GENERAL_BONUS[home_row][to_col]
    if move.piece.kind == PieceType.SOLDIER and 0 <= home_row < len(SOLDIER_BONUS):
        score += SOLDIER_BONUS[home_row][to_col]

    if to_col in CENTER_COLUMNS:
        score += CENTER_BONUS

    if move.piece.kind in ADVANCING_PIECES:
        forward = to_row < move.from_pos[0] if side == RED else to_row > move.from_pos[0]
        if forward:
            score += ADVANCE_BONUS

    return score


class HeuristicAgent:
    """
    An agent that picks Xiangqi moves by one-ply tactics and static scoring.

    Priority order:
    1. Checkmate now - play any move that mates the opponent
    2. Defend - if the opponent threatens mate next turn, play the first
       move after which none of those mating replies works any more
    3. Scoring - highest evaluate_move score, ties broken at random
    """

    def __init__(self, seed=None):
        """
        Initialize the heuristic agent.

        Args:
            seed (int, optional): Random seed for tie-breaking reproducibility
        """
        self.rng = random.Random(seed)

    def select_action(self, board, side):
        """
        Select a move for `side`.

        Args:
            board: Board with the current position (not modified)
            side: Side to move (1 red, -1 black)

        Returns:
            Move: The chosen move, or None if `side` has no legal move
        """
        try:
            return self._select(board, side)
        except Exception as e:
            logger.warning("Xiangqi heuristic failed: %s, falling back to random move", e)
            legal_moves = board.get_all_legal_moves(side)
            return self.rng.choice(legal_moves) if legal_moves else None

    def _select(self, board, side):
        legal_moves = board.get_all_legal_moves(side)
        if not legal_moves:
            return None

        enemy = opponent(side)
        own_win = Outcome.win_for(side)
        enemy_win = Outcome.win_for(enemy)

        for move in legal_moves:
            if board.apply_move(move).get_game_result(enemy) == own_win:
                logger.debug("%s mates with %s", side_name(side), move)
                return move

        threats = [reply for reply in board.get_all_legal_moves(enemy)
                   if board.apply_move(reply).get_game_result(side) == enemy_win]

        if threats:
            logger.debug("%s faces %d mating replies", side_name(side), len(threats))
            for move in legal_moves:
                after = board.apply_move(move)
                if not any(self._still_mates(after, reply, side, enemy_win) for reply in threats):
                    logger.debug("%s parries mate with %s", side_name(side), move)
                    return move

        best_moves = []
        best_score = float('-inf')
        for move in legal_moves:
            score = evaluate_move(move, side)
            if score > best_score:
                best_score = score
                best_moves = [move]
            elif score == best_score:
                best_moves.append(move)

        return self.rng.choice(best_moves)

    def _still_mates(self, board, reply, side, enemy_win):
        """Whether `reply` is still playable on `board` and still mates `side`."""
        if board.piece_at(reply.from_pos) != reply.piece:
            return False  # the threatening piece was captured
        if reply.to_pos not in board.get_legal_moves(reply.from_pos):
            return False
        replayed = board.make_move_record(reply.from_pos, reply.to_pos)
        return board.apply_move(replayed).get_game_result(side) == enemy_win
