"""
Leaderboard Service

Persists finished rounds to a JSON file shared by every player.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Union

from flask import current_app

from ..models.score import ScoreRecord


class LeaderboardError(Exception):
    """The scores file could not be read or written."""


class LeaderboardStore:
    """
    Append-only list of ScoreRecord values kept in one JSON file.

    Appends are a read-modify-write of the whole file, so they are
    serialized with a lock and the new file is moved into place atomically.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def load_all(self) -> List[ScoreRecord]:
        """
        Returns every saved record in insertion order.

        A missing or empty file is an empty leaderboard.

        Raises:
            LeaderboardError: If the file is unreadable or malformed
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise LeaderboardError(f"Failed to read scores: {e}") from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
            if not isinstance(data, list):
                raise ValueError("scores file must contain a list")
            return [ScoreRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise LeaderboardError(f"Malformed scores file: {e}") from e

    def append(self, record: ScoreRecord) -> None:
        """
        Adds a record to the end of the leaderboard.

        Raises:
            LeaderboardError: If the file cannot be read or written
        """
        with self._lock:
            scores = self.load_all()
            scores.append(record)
            self._write([score.to_dict() for score in scores])

    def _write(self, data: list) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as e:
            raise LeaderboardError(f"Failed to save scores: {e}") from e


def get_leaderboard() -> LeaderboardStore:
    """Get the leaderboard store of the current application."""
    return current_app.extensions['leaderboard']
