"""
Tests for the engine configuration.
"""
import json
import tempfile
from pathlib import Path

import pytest
from boardgames.config import EngineConfig, load_config


def test_default_config():
    """Test the default engine settings."""
    config = EngineConfig()

    assert config.othello_depth == 4
    assert config.gomoku_time_limit == 2.0
    assert config.ai_delay == 0.8
    assert config.data_dir is None
    assert config.seed is None


def test_config_dict_round_trip():
    config = EngineConfig(othello_depth=2, seed=42)
    restored = EngineConfig.from_dict(config.to_dict())

    assert restored.to_dict() == config.to_dict()


def test_load_config_without_file():
    assert load_config().to_dict() == EngineConfig().to_dict()


def test_load_config_partial_overrides():
    """Test that a file only needs the keys it changes."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "engine.json"
        path.write_text(json.dumps({'othello_depth': 2, 'gomoku_time_limit': 0.5}))

        config = load_config(path)

        assert config.othello_depth == 2
        assert config.gomoku_time_limit == 0.5
        assert config.ai_delay == 0.8


def test_save_and_load():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "configs" / "engine.json"
        EngineConfig(ai_delay=0.0, seed=7).save(path)

        config = load_config(str(path))
        assert config.ai_delay == 0.0
        assert config.seed == 7


def test_load_config_rejects_unknown_keys():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "engine.json"
        path.write_text(json.dumps({'othello_depth': 3, 'search_depth': 9}))

        with pytest.raises(ValueError, match="search_depth"):
            load_config(path)


@pytest.mark.parametrize("overrides", [
    {'othello_depth': "4"},
    {'othello_depth': 2.5},
    {'othello_depth': True},
    {'othello_depth': -1},
    {'gomoku_time_limit': "fast"},
    {'ai_delay': None},
    {'seed': "42"},
    {'data_dir': 3},
])
def test_load_config_rejects_wrong_types(overrides):
    """Test that badly typed values fail at load time, not inside a search."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "engine.json"
        path.write_text(json.dumps(overrides))

        with pytest.raises(ValueError, match=next(iter(overrides))):
            load_config(path)


def test_load_config_accepts_integer_durations():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "engine.json"
        path.write_text(json.dumps({'gomoku_time_limit': 1, 'ai_delay': 0, 'data_dir': 'stats'}))

        config = load_config(path)
        assert config.gomoku_time_limit == 1
        assert config.data_dir == 'stats'


def test_load_config_rejects_non_object():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "engine.json"
        path.write_text(json.dumps([1, 2, 3]))

        with pytest.raises(ValueError):
            load_config(path)
