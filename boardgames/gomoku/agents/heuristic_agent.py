"""
Heuristic agent for Gomoku.
"""
import logging
import random
import time

from ..board import DIRECTIONS

logger = logging.getLogger(__name__)


class HeuristicAgent:
    """
    An agent that uses pattern scoring with one-ply tactics for move selection.

    Priority order:
    1. Immediate block - if opponent can win in one move, block it
    2. Immediate win - if we can win in one move, take it
    3. Pattern scoring - score candidates on run lengths and center proximity

    Only empty cells next to an existing stone are considered, and scoring
    stops once the wall-clock budget is spent.
    """

    def __init__(self, seed=None, time_limit=2.0, clock=time.monotonic):
        """
        Initialize the heuristic agent.

        Args:
            seed (int, optional): Random seed for tie-breaking reproducibility
            time_limit (float): Seconds allowed for scoring candidates
            clock (callable): Monotonic time source, in seconds
        """
        self.rng = random.Random(seed)
        self.time_limit = time_limit
        self.clock = clock

    def select_action(self, board, player):
        """
        Select the best move using heuristic evaluation.

        Args:
            board: Board with the current position (not modified)
            player: Side to move (1 or -1)

        Returns:
            tuple: (row, col) coordinates of selected move, or None if the board is full
        """
        try:
            return self._select(board, player)
        except Exception as e:
            # Never stall the game on an evaluation error
            logger.warning("Gomoku heuristic failed: %s, falling back to random move", e)
            legal_moves = board.get_legal_moves()
            return self.rng.choice(legal_moves) if legal_moves else None

    def _select(self, board, player):
        if board.is_empty():
            return (board.center, board.center)

        candidates = self.candidate_moves(board)
        if not candidates:
            return None

        opponent = -player

        for row, col in candidates:
            if self._is_winning_move(board, row, col, opponent):
                logger.debug("Blocking opponent win at %s", (row, col))
                return (row, col)

        for row, col in candidates:
            if self._is_winning_move(board, row, col, player):
                logger.debug("Playing winning move at %s", (row, col))
                return (row, col)

        start = self.clock()
        best_moves = []
        best_score = float('-inf')

        for row, col in candidates:
            if self.clock() - start > self.time_limit:
                logger.info("Gomoku time budget of %.2fs exceeded", self.time_limit)
                break

            score = self.score_move(board, row, col, player)

            if score > best_score:
                best_score = score
                best_moves = [(row, col)]
            elif score == best_score:
                best_moves.append((row, col))

        if not best_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(best_moves)

    def candidate_moves(self, board):
        """
        Empty cells within one step (any direction) of a stone.

        Falls back to every empty cell if no stone has an empty neighbour.

        Returns:
            list: (row, col) tuples in discovery order, no duplicates
        """
        seen = set()
        candidates = []
        size = board.size

        for row in range(size):
            for col in range(size):
                if board.state[row, col] == 0:
                    continue
                for dr in (-1, 0, 1):
                    for dc in (-1, 0, 1):
                        if dr == 0 and dc == 0:
                            continue
                        r, c = row + dr, col + dc
                        if board.is_valid_move(r, c) and (r, c) not in seen:
                            seen.add((r, c))
                            candidates.append((r, c))

        if not candidates:
            candidates = board.get_legal_moves()
        return candidates

    def _is_winning_move(self, board, row, col, player):
        """True if `player` placing at (row, col) completes five."""
        if not board.is_valid_move(row, col):
            return False
        return board.apply_move(row, col, player).has_five(row, col, player)

    def score_move(self, board, row, col, player):
        """
        Score a move based on pattern analysis.

        Args:
            board: Current board
            row, col: Move coordinates
            player: Player making the move

        Returns:
            int: Score for this move (higher is better)
        """
        opponent = -player
        center = board.center

        # Proximity to center
        score = max(0, 14 - (abs(row - center) + abs(col - center)))

        if self._is_winning_move(board, row, col, player):
            score += 10000
        if self._is_winning_move(board, row, col, opponent):
            score += 9000  # Almost as urgent as winning

        for dr, dc in DIRECTIONS:
            # Extending our own lines
            own = self._run_through(board, row, col, dr, dc, player) + 1
            score += 5000 if own >= 5 else own * own * 8

            # Cutting opponent lines
            opp = self._run_through(board, row, col, dr, dc, opponent) + 1
            score += 4000 if opp >= 5 else opp * opp * 7

        return score

    def _run_through(self, board, row, col, dr, dc, player):
        """
        Stones of `player` adjacent to (row, col) along one axis.

        Both halves share a cap of four stones.
        """
        forward = board.count_direction(row, col, dr, dc, player)
        backward = board.count_direction(row, col, -dr, -dc, player, limit=4 - forward)
        return forward + backward
