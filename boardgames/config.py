"""
Engine configuration shared by the game sessions, agents and scripts.
"""
import json
from pathlib import Path
from typing import Dict, Optional, Union


class EngineConfig:
    """Configuration for the rules engines and AI agents."""

    def __init__(self,
                 # Othello search
                 othello_depth: int = 4,

                 # Gomoku wall-clock budget for one decision, in seconds
                 gomoku_time_limit: float = 2.0,

                 # Pause front ends insert before the AI answers, in seconds
                 ai_delay: float = 0.8,

                 # Persistence
                 data_dir: Optional[str] = None,

                 # Random seed for agent tie-breaking (None = nondeterministic)
                 seed: Optional[int] = None):

        self.othello_depth = othello_depth
        self.gomoku_time_limit = gomoku_time_limit
        self.ai_delay = ai_delay
        self.data_dir = data_dir
        self.seed = seed

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'EngineConfig':
        """Create config from dictionary."""
        return cls(**config_dict)

    def save(self, filepath: Union[str, Path]):
        """Write the config as JSON."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


# Accepted JSON types per field; None is only allowed where listed
FIELD_TYPES = {
    'othello_depth': (int,),
    'gomoku_time_limit': (int, float),
    'ai_delay': (int, float),
    'data_dir': (str, type(None)),
    'seed': (int, type(None)),
}


def validate_overrides(overrides: Dict):
    """
    Check config overrides read from JSON.

    Raises:
        ValueError: On unknown keys, values of the wrong type (booleans are
            not numbers here) or negative depths and durations
    """
    unknown = set(overrides) - set(FIELD_TYPES)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    for key, value in overrides.items():
        if isinstance(value, bool) or not isinstance(value, FIELD_TYPES[key]):
            raise ValueError(f"Config key {key!r} has invalid value {value!r}")
        if key in ('othello_depth', 'gomoku_time_limit', 'ai_delay') and value < 0:
            raise ValueError(f"Config key {key!r} must not be negative, got {value!r}")


def load_config(filepath: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Load engine configuration.

    Args:
        filepath: JSON file with overrides for any EngineConfig field.
            Defaults are returned when omitted.

    Returns:
        EngineConfig: Loaded configuration

    Raises:
        ValueError: If the file is not a JSON object, contains keys
            EngineConfig does not know or values of the wrong type
    """
    if filepath is None:
        return EngineConfig()

    with open(filepath, 'r') as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {filepath} must hold a JSON object")
    validate_overrides(overrides)

    return EngineConfig.from_dict(overrides)
