"""
Tests for win/loss statistics persistence.
"""
import json
import tempfile
from pathlib import Path

import pytest
from boardgames.stats import GameStats, StatsStore


def test_game_stats_with_result():
    """Test that each result kind bumps its counter and the total."""
    stats = GameStats()
    stats = stats.with_result('win').with_result('loss').with_result('draw').with_result('win')

    assert stats == GameStats(played=4, wins=2, losses=1, draws=1)
    assert stats.played == stats.wins + stats.losses + stats.draws


def test_game_stats_rejects_unknown_kind():
    with pytest.raises(ValueError):
        GameStats().with_result('forfeit')


def test_store_initialization():
    """Test that the store creates its data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        data_dir = Path(tmpdir) / "nested" / "data"
        store = StatsStore(data_dir)

        assert store.data_dir == data_dir
        assert data_dir.exists()
        assert store.path == data_dir / "stats.json"


def test_missing_file_yields_zero_stats():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = StatsStore(tmpdir)
        assert store.get_stats('othello') == GameStats()


def test_record_persists_across_instances():
    """Test that recorded results survive reopening the store."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = StatsStore(tmpdir)
        store.record('gomoku', 'win')
        updated = store.record('gomoku', 'loss')

        assert updated == GameStats(played=2, wins=1, losses=1, draws=0)

        reopened = StatsStore(tmpdir)
        assert reopened.get_stats('gomoku') == updated
        # Other games are untouched
        assert reopened.get_stats('xiangqi') == GameStats()


def test_games_share_one_document():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = StatsStore(tmpdir)
        store.record('othello', 'draw')
        store.record('xiangqi', 'win')

        with open(store.path, 'r') as f:
            data = json.load(f)

        assert set(data) == {'othello', 'xiangqi'}
        assert data['othello'] == {'played': 1, 'wins': 0, 'losses': 0, 'draws': 1}


def test_record_rejects_unknown_game_and_kind():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = StatsStore(tmpdir)

        with pytest.raises(ValueError):
            store.record('chess', 'win')
        with pytest.raises(ValueError):
            store.record('othello', 'forfeit')

        assert not store.path.exists()


def test_corrupt_file_starts_from_empty_stats():
    """Test that an unreadable document is treated as no stats."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = StatsStore(tmpdir)
        store.path.write_text("{not json")

        assert store.get_stats('othello') == GameStats()

        # Recording rewrites a valid document
        assert store.record('othello', 'win') == GameStats(played=1, wins=1)
        with open(store.path, 'r') as f:
            assert json.load(f)['othello']['wins'] == 1


def test_malformed_entry_is_reset():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = StatsStore(tmpdir)
        store.path.write_text(json.dumps({'gomoku': {'played': 'many'}, 'othello': [1, 2]}))

        assert store.get_stats('gomoku') == GameStats()
        assert store.get_stats('othello') == GameStats()
