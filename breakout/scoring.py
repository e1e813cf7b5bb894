"""
Score tracking and best-score persistence.

ScoreTracker follows an immutable state pattern: every operation returns
a new tracker wrapping a validated ScoreData. The best score lives in a
ScoreStore, read at session start and written only at terminal events.

Examples:
    >>> tracker = ScoreTracker(ScoreData(best=12))
    >>> tracker = tracker.record_brick().record_brick()
    >>> tracker.current
    2
    >>> tracker.finalize().best
    12
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .logging import get_data_dir, get_logger

log = get_logger('scoring')

DEFAULT_SCORE_KEY = 'breakout'


class ScoreData(BaseModel):
    """Immutable score state.

    Attributes:
        current: Bricks destroyed this session (non-negative)
        best: Best score from earlier sessions (non-negative)

    Examples:
        >>> ScoreData(current=5, best=3).is_new_best
        True
        >>> ScoreData().current
        0
    """
    current: int = 0
    best: int = 0

    model_config = ConfigDict(frozen=True)

    @field_validator('current', 'best')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score values are non-negative."""
        if v < 0:
            raise ValueError(f'Score values must be non-negative, got {v}')
        return v

    @property
    def is_new_best(self) -> bool:
        """True when the current score beats the stored best."""
        return self.current > self.best


class ScoreTracker:
    """Tracks the session score with immutable state.

    Examples:
        >>> tracker = ScoreTracker()
        >>> tracker.record_brick().current
        1
        >>> tracker.current  # Original unchanged
        0
    """

    def __init__(self, score: Optional[ScoreData] = None):
        """Initialize score tracker.

        Args:
            score: Initial score data. If None, starts with zeros.
        """
        self._score = score if score is not None else ScoreData()

    @property
    def current(self) -> int:
        return self._score.current

    @property
    def best(self) -> int:
        return self._score.best

    def record_brick(self) -> 'ScoreTracker':
        """Record one destroyed brick."""
        return ScoreTracker(ScoreData(
            current=self._score.current + 1,
            best=self._score.best,
        ))

    def finalize(self) -> 'ScoreTracker':
        """Fold the current score into the best score: best = max(best, current)."""
        return ScoreTracker(ScoreData(
            current=self._score.current,
            best=max(self._score.best, self._score.current),
        ))

    def get_stats(self) -> ScoreData:
        return self._score

    def __repr__(self) -> str:
        return f"ScoreTracker({self._score!r})"


class ScoreStore(ABC):
    """Persistence collaborator for the best score."""

    @abstractmethod
    def get_best_score(self) -> int:
        """Return the stored best score, 0 if none has been stored."""
        pass

    @abstractmethod
    def set_best_score(self, score: int) -> None:
        """Store a new best score."""
        pass


class MemoryScoreStore(ScoreStore):
    """In-process store. Forgets everything when the process exits."""

    def __init__(self, best: int = 0):
        self._best = best

    def get_best_score(self) -> int:
        return self._best

    def set_best_score(self, score: int) -> None:
        self._best = score


def default_scores_path() -> Path:
    """Default location of the best-score file."""
    env_path = os.environ.get('BREAKOUT_SCORES_FILE')
    if env_path:
        return Path(env_path).expanduser()
    return get_data_dir() / 'scores.json'


class JsonScoreStore(ScoreStore):
    """Best score kept in a small JSON file shared by key.

    File format:
        {"breakout": 40}

    A missing, unreadable or malformed file reads as 0. Write failures are
    logged and ignored.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        key: str = DEFAULT_SCORE_KEY,
    ):
        self._path = Path(path).expanduser() if path else default_scores_path()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _load_all(self) -> dict:
        try:
            with open(self._path) as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Ignoring unreadable score file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring score file %s: expected an object", self._path)
            return {}
        return data

    def get_best_score(self) -> int:
        value = self._load_all().get(self._key, 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            log.warning("Ignoring invalid best score %r in %s", value, self._path)
            return 0
        return value

    def set_best_score(self, score: int) -> None:
        data = self._load_all()
        data[self._key] = score
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            log.warning("Could not save best score to %s: %s", self._path, e)
            return
        log.debug("Saved best score %d to %s", score, self._path)
