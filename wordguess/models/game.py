"""
Game Data Models

Contains the round state carried between requests.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from ..config.game_settings import PLACEHOLDER


@dataclass
class GameState:
    """State of one round, owned by the client that plays it."""
    player: str
    difficulty: str
    secret: str
    reveal: List[str]
    attempts_remaining: int
    tried_letters: List[str] = field(default_factory=list)
    message: str = ""
    finished: bool = False
    won: bool = False

    @property
    def display_word(self) -> str:
        """Reveal slots separated by spaces, e.g. ``"C _ _ T"``."""
        return " ".join(self.reveal)

    @property
    def is_solved(self) -> bool:
        return PLACEHOLDER not in self.reveal

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        """
        Rebuild a state from its dict form.

        Raises:
            KeyError: a field is missing
            TypeError: a field has the wrong type
            ValueError: the reveal does not match the secret length
        """
        state = cls(
            player=data["player"],
            difficulty=data["difficulty"],
            secret=data["secret"],
            reveal=list(data["reveal"]),
            attempts_remaining=data["attempts_remaining"],
            tried_letters=list(data["tried_letters"]),
            message=data["message"],
            finished=data["finished"],
            won=data["won"],
        )

        for name in ("player", "difficulty", "secret", "message"):
            if not isinstance(getattr(state, name), str):
                raise TypeError(f"{name} must be a string")
        if not all(isinstance(slot, str) for slot in state.reveal + state.tried_letters):
            raise TypeError("reveal and tried_letters must hold strings")
        # bool is an int subclass, reject it explicitly
        if isinstance(state.attempts_remaining, bool) or not isinstance(state.attempts_remaining, int):
            raise TypeError("attempts_remaining must be an integer")
        if not isinstance(state.finished, bool) or not isinstance(state.won, bool):
            raise TypeError("finished and won must be booleans")
        if len(state.reveal) != len(state.secret):
            raise ValueError("reveal length does not match secret length")

        return state
