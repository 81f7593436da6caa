"""
Win/loss statistics persistence.

The game sessions only report outcomes; this store owns the aggregates and
writes them to a JSON document in the project data directory.
"""
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

GAME_KEYS = ('othello', 'gomoku', 'xiangqi')
RESULT_KINDS = ('win', 'loss', 'draw')


def get_default_data_dir() -> Path:
    """
    Get the default data directory for the project.

    Returns:
        Path: Default data directory (project_root/data)
    """
    current_file = Path(__file__)
    project_root = current_file.parent.parent
    data_dir = project_root / "data"
    data_dir.mkdir(exist_ok=True)
    return data_dir


@dataclass
class GameStats:
    """Aggregate results for one game."""
    played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def with_result(self, kind: str) -> 'GameStats':
        """Return a copy with one more finished game of the given kind."""
        if kind not in RESULT_KINDS:
            raise ValueError(f"Unknown result kind: {kind}")
        return GameStats(
            played=self.played + 1,
            wins=self.wins + (kind == 'win'),
            losses=self.losses + (kind == 'loss'),
            draws=self.draws + (kind == 'draw'),
        )


class StatsStore:
    """
    JSON-backed store of per-game statistics.

    All games share a single stats.json document keyed by game name.
    """

    filename = 'stats.json'

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            data_dir: Directory for stats.json (defaults to project_root/data)
        """
        if data_dir is None:
            data_dir = get_default_data_dir()
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.data_dir / self.filename

    def _load_all(self) -> Dict[str, Dict]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s (%s), starting from empty stats", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get_stats(self, game_key: str) -> GameStats:
        """
        Get the current aggregate for a game.

        Missing or malformed entries yield zeroed stats.
        """
        entry = self._load_all().get(game_key)
        if not isinstance(entry, dict):
            return GameStats()
        try:
            return GameStats(**{k: int(entry.get(k, 0)) for k in ('played', 'wins', 'losses', 'draws')})
        except (TypeError, ValueError):
            logger.warning("Malformed stats entry for %s, resetting", game_key)
            return GameStats()

    def save_stats(self, game_key: str, stats: GameStats):
        """Persist the aggregate for a game."""
        data = self._load_all()
        data[game_key] = asdict(stats)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)
        logger.debug("Saved stats for %s: %s", game_key, data[game_key])

    def record(self, game_key: str, kind: str) -> GameStats:
        """
        Fold one finished game into the stored aggregate.

        Args:
            game_key: 'othello', 'gomoku' or 'xiangqi'
            kind: 'win', 'loss' or 'draw' from the human player's view

        Returns:
            GameStats: The updated aggregate

        Raises:
            ValueError: For an unknown game or result kind
        """
        if game_key not in GAME_KEYS:
            raise ValueError(f"Unknown game: {game_key}")
        stats = self.get_stats(game_key).with_result(kind)
        self.save_stats(game_key, stats)
        return stats
