#!/usr/bin/env python3
"""
CLI interface for playing Othello, Gomoku or Xiangqi against humans or the AI.
"""
import argparse
import logging
import os
import sys
import time

# Add the parent directory to Python path so we can import boardgames
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from boardgames.config import load_config
from boardgames.stats import StatsStore
from boardgames.gomoku.game import Game as GomokuGame
from boardgames.gomoku.agents.heuristic_agent import HeuristicAgent as GomokuAgent
from boardgames.othello.game import Game as OthelloGame
from boardgames.othello.agents.minimax_agent import MinimaxAgent
from boardgames.xiangqi.game import Game as XiangqiGame
from boardgames.xiangqi.agents.heuristic_agent import HeuristicAgent as XiangqiAgent
from boardgames.xiangqi.pieces import RED, Piece


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def display_grid(state, symbols):
    """Display a board state in ASCII format with row/column headers."""
    rows, cols = state.shape
    header = "   " + "".join(f"{col:2d} " for col in range(cols))
    print("\n" + header)
    print("   " + "---" * cols)
    for row in range(rows):
        cells = "".join(f" {symbols(int(state[row, col]))} " for col in range(cols))
        print(f"{row:2d}|{cells}|{row:2d}")
    print("   " + "---" * cols)
    print(header)


def stone_symbol(cell):
    if cell == 1:
        return "X"  # Black
    if cell == -1:
        return "O"  # White
    return "."


def xiangqi_symbol(cell):
    piece = Piece.from_code(cell)
    return piece.to_letter() if piece else "."


def parse_coords(text, count):
    """
    Parse `count` integers from user input like "7 7", "7,7" or "9 1 7 2".

    Returns:
        tuple or None: The integers, or None if the input is malformed
    """
    parts = text.replace(',', ' ').split()
    if len(parts) != count:
        return None
    try:
        return tuple(int(p) for p in parts)
    except ValueError:
        return None


def player_name(game_key, player):
    if game_key == 'xiangqi':
        return "Red (upper case)" if player == RED else "Black (lower case)"
    return "Black (X)" if player == 1 else "White (O)"


def build_session(game_key, vs_ai, config):
    """
    Create the game session and agent for the chosen game.

    The AI always plays the second side (white, or black in Xiangqi).
    """
    ai_player = -1 if vs_ai else None
    if game_key == 'othello':
        return OthelloGame(ai_player=ai_player), MinimaxAgent(depth=config.othello_depth, seed=config.seed)
    if game_key == 'gomoku':
        return GomokuGame(ai_player=ai_player), GomokuAgent(seed=config.seed, time_limit=config.gomoku_time_limit)
    return XiangqiGame(ai_player=ai_player), XiangqiAgent(seed=config.seed)


def show(game_key, game):
    symbols = xiangqi_symbol if game_key == 'xiangqi' else stone_symbol
    display_grid(game.board.state, symbols)
    if game_key == 'othello':
        score = game.board.get_score()
        print(f"Score - Black: {score['black']}  White: {score['white']}")
        if game.last_skipped is not None:
            print(f"{player_name(game_key, game.last_skipped)} has no legal move and passes.")
    if game_key == 'xiangqi' and game.in_check:
        # After mate the turn stays with the side that delivered it
        checked = game.current_player if game.game_state == 'ongoing' else -game.current_player
        print(f"{player_name(game_key, checked)} is in check!")


def human_turn(game_key, game):
    """
    Read one move from the terminal and play it.

    Returns:
        bool or None: True if a move was played, None if the player quit
    """
    count = 4 if game_key == 'xiangqi' else 2
    example = "'9 1 7 2' (from row col to row col)" if count == 4 else "'7 7'"
    while True:
        text = input(f"{player_name(game_key, game.current_player)}, "
                     f"enter your move {example}, 'undo' or 'quit': ").strip().lower()
        if text in ('quit', 'exit', 'q'):
            return None
        if text == 'undo':
            print("Move taken back." if game.undo() else "Nothing to undo!")
            return True

        coords = parse_coords(text, count)
        if coords is None:
            print(f"Invalid input! Please enter: {example}")
            continue

        if game_key == 'xiangqi':
            accepted = game.make_move(coords[:2], coords[2:])
        else:
            accepted = game.make_move(*coords)
        if accepted:
            return True
        print("Invalid move!")


def main(argv=None):
    """Main game loop."""
    parser = argparse.ArgumentParser(description='Play Othello, Gomoku or Xiangqi')
    parser.add_argument('game', choices=['othello', 'gomoku', 'xiangqi'],
                        help='Which game to play')
    parser.add_argument('--pvp', action='store_true',
                        help='Two human players instead of playing the AI')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON file overriding engine settings')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = load_config(args.config)
    store = StatsStore(config.data_dir)

    game_key = args.game
    game, agent = build_session(game_key, not args.pvp, config)

    print("=" * 60)
    print(f"           {game_key.upper()}")
    print("=" * 60)

    try:
        while game.game_state == 'ongoing':
            show(game_key, game)
            if game.is_ai_turn:
                print(f"{player_name(game_key, game.current_player)} (AI) is thinking...")
                time.sleep(config.ai_delay)
                move = game.play_ai_move(agent)
                if move is None:
                    print("AI could not find a move! Game ending.")
                    break
                print(f"AI plays: {move}")
            elif human_turn(game_key, game) is None:
                print("\nThanks for playing!")
                return
    except (KeyboardInterrupt, EOFError):
        print("\nThanks for playing!")
        return

    show(game_key, game)
    print("\n" + "=" * 60)
    if game.game_state == 'win':
        print(f"GAME OVER - {player_name(game_key, game.winner)} wins!")
    elif game.game_state == 'draw':
        print("GAME OVER - It's a draw!")

    kind = game.result_for_stats()
    if kind is not None:
        stats = store.record(game.stats_key, kind)
        print(f"Played: {stats.played}  Wins: {stats.wins}  "
              f"Losses: {stats.losses}  Draws: {stats.draws}")
    print("=" * 60)


if __name__ == "__main__":
    main()
