"""Tests for score tracking and best-score stores."""

import json

import pytest
from pydantic import ValidationError

from breakout.scoring import (
    JsonScoreStore,
    MemoryScoreStore,
    ScoreData,
    ScoreTracker,
    default_scores_path,
)


class TestScoreData:
    """Tests for the ScoreData model."""

    def test_defaults(self):
        data = ScoreData()
        assert (data.current, data.best) == (0, 0)

    def test_rejects_negative(self):
        with pytest.raises(ValidationError):
            ScoreData(current=-1)
        with pytest.raises(ValidationError):
            ScoreData(best=-3)

    def test_frozen(self):
        data = ScoreData()
        with pytest.raises(ValidationError):
            data.current = 3

    def test_is_new_best(self):
        assert ScoreData(current=5, best=3).is_new_best
        assert not ScoreData(current=3, best=3).is_new_best


class TestScoreTracker:
    """Tests for the immutable ScoreTracker."""

    def test_record_brick_returns_new_tracker(self):
        tracker = ScoreTracker()
        updated = tracker.record_brick()
        assert updated.current == 1
        assert tracker.current == 0

    def test_record_keeps_best(self):
        tracker = ScoreTracker(ScoreData(best=9)).record_brick()
        assert tracker.best == 9

    def test_finalize_takes_max(self):
        tracker = ScoreTracker(ScoreData(current=4, best=2)).finalize()
        assert tracker.best == 4
        tracker = ScoreTracker(ScoreData(current=1, best=2)).finalize()
        assert tracker.best == 2
        assert tracker.current == 1

    def test_get_stats(self):
        data = ScoreData(current=2, best=1)
        assert ScoreTracker(data).get_stats() == data


class TestMemoryScoreStore:
    """Tests for the in-memory store."""

    def test_round_trip(self):
        store = MemoryScoreStore()
        assert store.get_best_score() == 0
        store.set_best_score(8)
        assert store.get_best_score() == 8

    def test_initial_value(self):
        assert MemoryScoreStore(best=3).get_best_score() == 3


class TestJsonScoreStore:
    """Tests for the JSON file store."""

    def test_missing_file_reads_zero(self, tmp_path):
        store = JsonScoreStore(tmp_path / 'scores.json')
        assert store.get_best_score() == 0

    def test_write_creates_parent_dirs(self, tmp_path):
        path = tmp_path / 'nested' / 'dir' / 'scores.json'
        store = JsonScoreStore(path)
        store.set_best_score(17)
        assert json.loads(path.read_text()) == {'breakout': 17}
        assert JsonScoreStore(path).get_best_score() == 17

    def test_preserves_other_keys(self, tmp_path):
        path = tmp_path / 'scores.json'
        path.write_text(json.dumps({'snake': 30}))
        JsonScoreStore(path).set_best_score(5)
        assert json.loads(path.read_text()) == {'snake': 30, 'breakout': 5}

    def test_custom_key(self, tmp_path):
        path = tmp_path / 'scores.json'
        JsonScoreStore(path, key='level2').set_best_score(6)
        assert JsonScoreStore(path, key='level2').get_best_score() == 6
        assert JsonScoreStore(path).get_best_score() == 0

    @pytest.mark.parametrize("content", [
        'not json',
        '[1, 2, 3]',
        '{"breakout": "ten"}',
        '{"breakout": -4}',
        '{"breakout": true}',
    ])
    def test_bad_content_reads_zero(self, tmp_path, content):
        path = tmp_path / 'scores.json'
        path.write_text(content)
        assert JsonScoreStore(path).get_best_score() == 0

    def test_write_failure_is_ignored(self, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_text('')
        # Parent "directory" is a regular file
        store = JsonScoreStore(blocker / 'scores.json')
        store.set_best_score(3)
        assert store.get_best_score() == 0

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / 'env_scores.json'
        monkeypatch.setenv('BREAKOUT_SCORES_FILE', str(path))
        assert default_scores_path() == path
        assert JsonScoreStore().path == path

    def test_default_path_under_data_dir(self, tmp_path, monkeypatch):
        monkeypatch.delenv('BREAKOUT_SCORES_FILE', raising=False)
        monkeypatch.setattr('breakout.scoring.get_data_dir', lambda: tmp_path)
        assert default_scores_path() == tmp_path / 'scores.json'
