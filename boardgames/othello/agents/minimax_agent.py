"""
Minimax agent for Othello.

Depth-limited minimax with alpha-beta pruning over a positional evaluation.
"""
import logging
import random

from ..board import BLACK, EMPTY

logger = logging.getLogger(__name__)


CORNER_POSITIONS = [(0, 0), (0, 7), (7, 0), (7, 7)]

EDGE_POSITIONS = (
    [(0, c) for c in range(1, 7)] + [(7, c) for c in range(1, 7)] +
    [(r, 0) for r in range(1, 7)] + [(r, 7) for r in range(1, 7)]
)

# Cells next to each corner: taking one while the corner is empty hands
# the corner to the opponent
DANGEROUS_POSITIONS = {
    (0, 0): [(0, 1), (1, 0), (1, 1)],
    (0, 7): [(0, 6), (1, 7), (1, 6)],
    (7, 0): [(6, 0), (7, 1), (6, 1)],
    (7, 7): [(6, 7), (7, 6), (6, 6)],
}

CORNER_WEIGHT = 25
EDGE_WEIGHT = 5
DANGER_WEIGHT = 10
MOBILITY_WEIGHT = 2

_CORNERS = set(CORNER_POSITIONS)
_EDGES = set(EDGE_POSITIONS)
_DANGEROUS = {cell for cells in DANGEROUS_POSITIONS.values() for cell in cells}


def evaluate(board, player):
    """
    Static evaluation of `board` from `player`'s point of view.

    Combines disc differential, corner and edge control, a penalty for
    cells next to an empty corner and mobility.

    Returns:
        int: Higher is better for `player`
    """
    opponent = -player
    state = board.state

    score = int((state == player).sum() - (state == opponent).sum())

    for row, col in CORNER_POSITIONS:
        if state[row, col] == player:
            score += CORNER_WEIGHT
        elif state[row, col] == opponent:
            score -= CORNER_WEIGHT

    for row, col in EDGE_POSITIONS:
        if state[row, col] == player:
            score += EDGE_WEIGHT
        elif state[row, col] == opponent:
            score -= EDGE_WEIGHT

    for corner, cells in DANGEROUS_POSITIONS.items():
        if state[corner] != EMPTY:
            continue
        for row, col in cells:
            if state[row, col] == player:
                score -= DANGER_WEIGHT
            elif state[row, col] == opponent:
                score += DANGER_WEIGHT

    player_moves = len(board.get_valid_moves(player))
    opponent_moves = len(board.get_valid_moves(opponent))
    score += (player_moves - opponent_moves) * MOBILITY_WEIGHT

    return score


def order_moves(moves):
    """
    Corners first, then edges, then inner cells, corner neighbours last.

    The sort is stable, so row-major order is kept within each group.
    Ordering only speeds up pruning; it never changes a search value.
    """
    def rank(move):
        if move in _CORNERS:
            return 0
        if move in _DANGEROUS:
            return 3
        if move in _EDGES:
            return 1
        return 2
    return sorted(moves, key=rank)


def minimax(board, depth, maximizing, player,
            alpha=float('-inf'), beta=float('inf')):
    """
    Alpha-beta minimax, always scored from `player`'s perspective.

    A side with no legal move passes: the same board is searched one ply
    deeper with the other side to move. When neither side can move the
    position is evaluated directly.

    Args:
        board: Position to search
        depth: Remaining plies
        maximizing: True if `player` is to move
        player: Side the evaluation favours
        alpha, beta: Search window; values outside it are only bounds

    Returns:
        float: Minimax value of the position
    """
    if depth == 0:
        return evaluate(board, player)

    current = player if maximizing else -player
    valid_moves = board.get_valid_moves(current)

    if not valid_moves:
        if not board.get_valid_moves(-current):
            return evaluate(board, player)
        return minimax(board, depth - 1, not maximizing, player, alpha, beta)

    valid_moves = order_moves(valid_moves)

    if maximizing:
        best = float('-inf')
        for row, col in valid_moves:
            value = minimax(board.apply_move(row, col, current), depth - 1,
                            False, player, alpha, beta)
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break
        return best

    best = float('inf')
    for row, col in valid_moves:
        value = minimax(board.apply_move(row, col, current), depth - 1,
                        True, player, alpha, beta)
        best = min(best, value)
        beta = min(beta, value)
        if beta <= alpha:
            break
    return best


class MinimaxAgent:
    """
    An agent that searches a fixed number of plies with alpha-beta pruning.

    Every legal move is scored by searching the resulting position with the
    opponent to move; the first move in row-major order with the strictly
    highest score wins.
    """

    def __init__(self, depth=4, seed=None):
        """
        Initialize the minimax agent.

        Args:
            depth (int): Plies searched below each candidate move
            seed (int, optional): Random seed for the error fallback
        """
        self.depth = depth
        self.rng = random.Random(seed)

    def select_action(self, board, player):
        """
        Select the best move for `player`.

        Args:
            board: Board with the current position (not modified)
            player: Side to move (1 black, -1 white)

        Returns:
            tuple: (row, col) of the chosen move, or None if `player` must pass
        """
        valid_moves = board.get_valid_moves(player)
        if not valid_moves:
            return None

        try:
            best_move = valid_moves[0]
            best_score = float('-inf')

            for row, col in valid_moves:
                # A move has to beat best_score, so the search below only
                # needs to be exact above it
                score = minimax(board.apply_move(row, col, player), self.depth,
                                False, player, best_score)
                if score > best_score:
                    best_score = score
                    best_move = (row, col)

            logger.debug("Othello %s picks %s with score %s",
                         'black' if player == BLACK else 'white', best_move, best_score)
            return best_move

        except Exception as e:
            logger.warning("Othello search failed: %s, falling back to random move", e)
            return self.rng.choice(valid_moves)
