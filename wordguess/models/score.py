"""
Score Data Models

Contains the leaderboard record written when a player saves a finished round.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .game import GameState


@dataclass(frozen=True)
class ScoreRecord:
    """One finished round on the leaderboard. Never mutated after creation."""
    player: str
    difficulty: str
    word: str
    won: bool
    attempts_left: int
    date: datetime

    @classmethod
    def from_state(cls, state: GameState, date: Optional[datetime] = None) -> "ScoreRecord":
        if not state.finished:
            raise ValueError("Cannot record a round that is still in progress")
        return cls(
            player=state.player,
            difficulty=state.difficulty,
            word=state.secret,
            won=state.won,
            attempts_left=state.attempts_remaining,
            date=date or datetime.now(timezone.utc),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Stored form; keys match the scores file format."""
        return {
            "username": self.player,
            "difficulty": self.difficulty,
            "word": self.word,
            "won": self.won,
            "attempts": self.attempts_left,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreRecord":
        return cls(
            player=data["username"],
            difficulty=data["difficulty"],
            word=data["word"],
            won=bool(data["won"]),
            attempts_left=int(data["attempts"]),
            date=datetime.fromisoformat(data["date"]),
        )
