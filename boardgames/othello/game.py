"""
Game implementation for Othello.
"""
import logging

from .board import BLACK, WHITE, Board, Outcome

logger = logging.getLogger(__name__)


class Game:
    """
    Manages an Othello game session.

    Owns the current board and side to move, applies the pass rule after
    every placement and keeps a single undo snapshot.
    """

    stats_key = 'othello'

    def __init__(self, ai_player=None):
        """
        Initialize a new Othello game.

        Args:
            ai_player (int, optional): Side played by the computer
                (1 black, -1 white), or None for human vs human
        """
        self.board = Board()
        self.current_player = BLACK
        self.ai_player = ai_player
        self.outcome = Outcome.ONGOING
        self.last_skipped = None
        self._history = None

    @property
    def game_state(self):
        """
        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self.outcome == Outcome.ONGOING:
            return 'ongoing'
        return 'draw' if self.outcome == Outcome.TIE else 'win'

    @property
    def winner(self):
        if self.outcome == Outcome.BLACK:
            return BLACK
        if self.outcome == Outcome.WHITE:
            return WHITE
        return None

    @property
    def is_ai_turn(self):
        return (self.ai_player is not None and self.outcome == Outcome.ONGOING
                and self.current_player == self.ai_player)

    @property
    def can_undo(self):
        return self._history is not None

    def make_move(self, row, col):
        """
        Place a disc for the current player.

        After the placement the opponent moves next if it has a legal move;
        otherwise the same player moves again; if neither side can move the
        game ends.

        Returns:
            bool: True if the move was played, False if illegal or game over
        """
        if self.outcome != Outcome.ONGOING:
            return False

        player = self.current_player
        if not self.board.is_valid_move(row, col, player):
            logger.debug("Rejected move %s for player %d", (row, col), player)
            return False

        self._history = (self.board, player)
        self.board = self.board.apply_move(row, col, player)
        self._advance_turn(player)
        return True

    def _advance_turn(self, player):
        opponent = -player
        self.last_skipped = None

        if self.board.get_valid_moves(opponent):
            self.current_player = opponent
        elif self.board.get_valid_moves(player):
            # Opponent has to pass, same player moves again
            self.last_skipped = opponent
            self.current_player = player
            logger.info("Player %d has no legal move and passes", opponent)
        else:
            self.outcome = self.board.get_winner()
            self._history = None
            logger.info("Othello finished: %s %s", self.outcome.value, self.board.get_score())

    def play_ai_move(self, agent):
        """
        Ask `agent` for a move for the AI side and play it.

        Returns:
            tuple or None: The move played, or None if nothing was played
        """
        if not self.is_ai_turn:
            return None
        move = agent.select_action(self.board, self.current_player)
        if move is None or not self.make_move(*move):
            logger.warning("AI produced no playable move: %s", move)
            return None
        # The human cannot take back a position the AI has already answered
        self._history = None
        return move

    def undo(self):
        """
        Restore the position from before the last move.

        Returns:
            bool: True if a snapshot was restored
        """
        if not self.can_undo:
            return False
        self.board, self.current_player = self._history
        self._history = None
        self.outcome = Outcome.ONGOING
        self.last_skipped = None
        return True

    def result_for_stats(self):
        """
        Outcome from the human (or, without an AI, black's) point of view.

        Returns:
            str or None: 'win', 'loss', 'draw', or None while ongoing
        """
        if self.outcome == Outcome.ONGOING:
            return None
        if self.outcome == Outcome.TIE:
            return 'draw'
        human = -self.ai_player if self.ai_player is not None else BLACK
        return 'win' if self.winner == human else 'loss'

    def status(self):
        """Snapshot of what a front end needs to render."""
        return {
            'board': self.board,
            'current_player': self.current_player,
            'game_over': self.outcome != Outcome.ONGOING,
            'outcome': self.outcome,
            'score': self.board.get_score(),
            'valid_moves': self.board.get_valid_moves(self.current_player),
            'last_skipped': self.last_skipped,
        }
