#!/usr/bin/env python3
"""
Simple evaluation script that plays the AI agents against each other.
"""
import argparse
import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from boardgames.config import load_config
from boardgames.gomoku.game import Game as GomokuGame
from boardgames.gomoku.agents.heuristic_agent import HeuristicAgent as GomokuAgent
from boardgames.othello.game import Game as OthelloGame
from boardgames.othello.agents.minimax_agent import MinimaxAgent
from boardgames.xiangqi.game import Game as XiangqiGame
from boardgames.xiangqi.agents.heuristic_agent import HeuristicAgent as XiangqiAgent

# Xiangqi has no repetition rule, so self-play needs a move cap
MAX_MOVES = {'othello': 64, 'gomoku': 225, 'xiangqi': 300}


def make_agents(game_key, config, seed1, seed2):
    if game_key == 'othello':
        return (MinimaxAgent(depth=config.othello_depth, seed=seed1),
                MinimaxAgent(depth=config.othello_depth, seed=seed2))
    if game_key == 'gomoku':
        return (GomokuAgent(seed=seed1, time_limit=config.gomoku_time_limit),
                GomokuAgent(seed=seed2, time_limit=config.gomoku_time_limit))
    return XiangqiAgent(seed=seed1), XiangqiAgent(seed=seed2)


def play_game(game_key, agent1, agent2, show_progress=False):
    """
    Play a single game between two agents.

    Args:
        game_key: 'othello', 'gomoku' or 'xiangqi'
        agent1: Agent moving first (black, or red in Xiangqi)
        agent2: Agent moving second
        show_progress: Whether to print move-by-move progress

    Returns:
        int: Winner (1 for agent1, -1 for agent2, 0 for draw or move cap)
    """
    game = {'othello': OthelloGame, 'gomoku': GomokuGame, 'xiangqi': XiangqiGame}[game_key]()
    move_count = 0

    while game.game_state == 'ongoing' and move_count < MAX_MOVES[game_key]:
        player = game.current_player
        current_agent = agent1 if player == 1 else agent2
        # Hand the turn to whichever side is to move
        game.ai_player = player

        move = game.play_ai_move(current_agent)
        if move is None:
            print(f"ERROR: no move played by player {player}")
            break

        if show_progress:
            print(f"Move {move_count + 1}: Player {player} plays {move}")

        move_count += 1

    if show_progress:
        print(f"Game ended after {move_count} moves: {game.game_state}")

    if game.game_state == 'win':
        return game.winner
    return 0


def main(argv=None):
    """Main evaluation function."""
    parser = argparse.ArgumentParser(description='Play the AI agents against each other')
    parser.add_argument('game', choices=['othello', 'gomoku', 'xiangqi'])
    parser.add_argument('--games', type=int, default=10, help='Number of games')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON file overriding engine settings')
    parser.add_argument('--verbose', action='store_true', help='Print every move')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    results = {1: 0, -1: 0, 0: 0}
    start_time = time.time()

    for i in range(args.games):
        agent1, agent2 = make_agents(args.game, config, seed1=2 * i, seed2=2 * i + 1)
        results[play_game(args.game, agent1, agent2, show_progress=args.verbose)] += 1
        print(f"Progress: {i + 1}/{args.games}")

    elapsed = time.time() - start_time
    print(f"\n=== Results after {args.games} {args.game} games ({elapsed:.1f}s) ===")
    print(f"First player wins: {results[1]}")
    print(f"Second player wins: {results[-1]}")
    print(f"Draws / capped: {results[0]}")
    return results


if __name__ == "__main__":
    main()
