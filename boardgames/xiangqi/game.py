"""
Game implementation for Xiangqi.
"""
import logging

from .board import Board, Outcome
from .pieces import BLACK, RED, opponent, side_name

logger = logging.getLogger(__name__)


class Game:
    """
    Manages a Xiangqi game session.

    Clicks arrive as board coordinates: the first selects one of the side to
    move's pieces and exposes its legal destinations as highlights, the next
    one on a highlighted point plays the move.
    """

    stats_key = 'xiangqi'

    def __init__(self, ai_player=None):
        """
        Initialize a new Xiangqi game.

        Args:
            ai_player (int, optional): Side played by the computer
                (1 red, -1 black), or None for human vs human
        """
        self.board = Board()
        self.current_player = RED
        self.ai_player = ai_player
        self.outcome = Outcome.ONGOING
        self.selected = None
        self.highlights = []
        self.in_check = False
        self.last_move = None
        self._history = None

    @property
    def game_state(self):
        """
        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self.outcome == Outcome.ONGOING:
            return 'ongoing'
        return 'draw' if self.outcome == Outcome.DRAW else 'win'

    @property
    def winner(self):
        if self.outcome == Outcome.RED:
            return RED
        if self.outcome == Outcome.BLACK:
            return BLACK
        return None

    @property
    def is_ai_turn(self):
        return (self.ai_player is not None and self.outcome == Outcome.ONGOING
                and self.current_player == self.ai_player)

    @property
    def human_player(self):
        return opponent(self.ai_player) if self.ai_player is not None else RED

    @property
    def can_undo(self):
        return self._history is not None

    def _clear_selection(self):
        self.selected = None
        self.highlights = []

    def select(self, row, col):
        """
        Select the piece on (row, col) if it belongs to the side to move.

        Selecting the already selected piece deselects it.

        Returns:
            bool: True if a piece is selected afterwards
        """
        if self.outcome != Outcome.ONGOING or self.is_ai_turn:
            return False
        if self.selected == (row, col):
            self._clear_selection()
            return False
        piece = self.board.piece_at((row, col))
        if piece is None or piece.side != self.current_player:
            return False
        self.selected = (row, col)
        self.highlights = self.board.get_legal_moves((row, col))
        return True

    def move_to(self, row, col):
        """
        Move the selected piece to (row, col).

        Returns:
            bool: True if the move was played, False if nothing is selected,
            the target is not a legal destination or the game is over
        """
        if self.outcome != Outcome.ONGOING or self.selected is None:
            return False
        if (row, col) not in self.highlights:
            logger.debug("Rejected move %s -> %s", self.selected, (row, col))
            return False
        move = self.board.make_move_record(self.selected, (row, col))
        self._play(move)
        return True

    def click(self, row, col):
        """
        Handle a click the way the board UI does.

        Own pieces are (re)selected, anything else is tried as a destination
        for the current selection.

        Returns:
            bool: True if the click was accepted
        """
        if self.outcome != Outcome.ONGOING or self.is_ai_turn:
            return False
        piece = self.board.piece_at((row, col))
        if self.selected is None or (piece is not None and piece.side == self.current_player):
            if self.selected == (row, col):
                self._clear_selection()
                return True
            return self.select(row, col)
        return self.move_to(row, col)

    def make_move(self, from_pos, to_pos):
        """
        Play a move given both endpoints.

        Returns:
            bool: True if the move was legal and played
        """
        if self.outcome != Outcome.ONGOING:
            return False
        piece = self.board.piece_at(from_pos)
        if piece is None or piece.side != self.current_player:
            return False
        if to_pos not in self.board.get_legal_moves(from_pos):
            return False
        self._play(self.board.make_move_record(from_pos, to_pos))
        return True

    def _play(self, move):
        mover = self.current_player
        if mover == self.human_player:
            self._history = (self.board, mover)

        self.board = self.board.apply_move(move)
        self.last_move = move
        self._clear_selection()

        next_side = opponent(mover)
        self.outcome = self.board.get_game_result(next_side)
        self.in_check = self.board.is_in_check(next_side)
        if self.outcome != Outcome.ONGOING:
            self._history = None
            logger.info("Xiangqi finished: %s", self.outcome.value)
            return

        self.current_player = next_side
        if self.in_check:
            logger.info("%s is in check", side_name(next_side))

    def play_ai_move(self, agent):
        """
        Ask `agent` for a move for the AI side and play it.

        Returns:
            Move or None: The move played, or None if nothing was played
        """
        if not self.is_ai_turn:
            return None
        self._clear_selection()
        move = agent.select_action(self.board, self.current_player)
        if move is None:
            logger.warning("AI has no move to play")
            return None
        self._play(move)
        # The human cannot take back a position the AI has already answered
        self._history = None
        return move

    def undo(self):
        """
        Restore the position from before the last human move.

        Returns:
            bool: True if a snapshot was restored
        """
        if not self.can_undo:
            return False
        self.board, self.current_player = self._history
        self._history = None
        self.outcome = Outcome.ONGOING
        self.in_check = self.board.is_in_check(self.current_player)
        self.last_move = None
        self._clear_selection()
        return True

    def result_for_stats(self):
        """
        Outcome from the human (or, without an AI, red's) point of view.

        Returns:
            str or None: 'win', 'loss', 'draw', or None while ongoing
        """
        if self.outcome == Outcome.ONGOING:
            return None
        if self.outcome == Outcome.DRAW:
            return 'draw'
        return 'win' if self.winner == self.human_player else 'loss'

    def status(self):
        """Snapshot of what a front end needs to render."""
        return {
            'board': self.board,
            'current_player': self.current_player,
            'game_over': self.outcome != Outcome.ONGOING,
            'outcome': self.outcome,
            'selected': self.selected,
            'highlights': list(self.highlights),
            'in_check': self.in_check,
        }
