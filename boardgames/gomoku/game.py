"""
Game implementation for Gomoku.
"""
import logging

from .board import BLACK, WHITE, Board, Outcome

logger = logging.getLogger(__name__)


class Game:
    """
    Manages a Gomoku game session.

    Handles turn management, game state, single-slot undo and coordinates
    between the board and an optional AI opponent.
    """

    stats_key = 'gomoku'

    def __init__(self, ai_player=None):
        """
        Initialize a new Gomoku game.

        Args:
            ai_player (int, optional): Side played by the computer
                (1 black, -1 white), or None for human vs human
        """
        self.board = Board()
        self.current_player = BLACK  # Black goes first (1=black, -1=white)
        self.ai_player = ai_player
        self.outcome = Outcome.ONGOING
        self.last_move = None
        self._history = None

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self.outcome == Outcome.ONGOING:
            return 'ongoing'
        elif self.outcome == Outcome.TIE:
            return 'draw'
        else:
            return 'win'

    @property
    def winner(self):
        """
        Get the winner of the game.

        Returns:
            int or None: Winner (1 for black, -1 for white) or None if no winner
        """
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
    def human_player(self):
        return -self.ai_player if self.ai_player is not None else BLACK

    @property
    def can_undo(self):
        return self._history is not None

    def make_move(self, row, col):
        """
        Make a move for the current player.

        Args:
            row (int): Row position (0-14)
            col (int): Column position (0-14)

        Returns:
            bool: True if move was successful, False if invalid or game over
        """
        if self.outcome != Outcome.ONGOING:
            return False

        if not self.board.is_valid_move(row, col):
            logger.debug("Rejected move %s for player %d", (row, col), self.current_player)
            return False

        # Only the human side (black without an AI) opens an undo slot
        if self.current_player == self.human_player:
            self._history = (self.board, self.current_player)

        player = self.current_player
        self.board = self.board.apply_move(row, col, player)
        self.last_move = (row, col)

        if self.board.is_game_over(row, col, player):
            self.outcome = self.board.get_winner(row, col, player)
            self._history = None
            logger.info("Gomoku finished: %s", self.outcome.value)
        else:
            self.current_player = -player

        return True

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
        Restore the board from before the last human move.

        Undo is a single slot: it is cleared once used, at game end, and as
        soon as the AI has replied.

        Returns:
            bool: True if a snapshot was restored
        """
        if not self.can_undo:
            return False
        self.board, self.current_player = self._history
        self._history = None
        self.outcome = Outcome.ONGOING
        self.last_move = None
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
        return 'win' if self.winner == self.human_player else 'loss'

    def status(self):
        """Snapshot of what a front end needs to render."""
        return {
            'board': self.board,
            'current_player': self.current_player,
            'game_over': self.outcome != Outcome.ONGOING,
            'outcome': self.outcome,
            'last_move': self.last_move,
        }
