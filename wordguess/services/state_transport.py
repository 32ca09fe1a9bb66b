"""
State Transport Service

Carries a round between requests inside a signed JWT stored in a cookie.
The token is signed, not encrypted: the client can read the secret word,
but any change to the state invalidates the token.
"""

import datetime
from typing import Optional

import jwt
from flask import current_app

from ..models.game import GameState


class StateTransport:
    """Encodes GameState values to tokens and back."""

    ALGORITHM = 'HS256'

    def __init__(self, secret_key: str, max_age_seconds: int):
        """
        Args:
            secret_key: Key used to sign tokens
            max_age_seconds: Lifetime of a token, matching the cookie max-age
        """
        self.secret_key = secret_key
        self.max_age_seconds = max_age_seconds

    def encode(self, state: GameState) -> str:
        """
        Sign a round state.

        Args:
            state: Round to encode

        Returns:
            JWT token string
        """
        payload = {
            'game': state.to_dict(),
            'exp': datetime.datetime.now(datetime.timezone.utc)
                   + datetime.timedelta(seconds=self.max_age_seconds),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.ALGORITHM)

    def decode(self, token: Optional[str]) -> Optional[GameState]:
        """
        Verify a token and rebuild its round state.

        Args:
            token: Token from the cookie, possibly missing

        Returns:
            GameState, or None when the token is missing, expired,
            badly signed or does not hold a valid state
        """
        if not token:
            return None

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.ALGORITHM])
            return GameState.from_dict(payload['game'])
        except jwt.InvalidTokenError:
            return None
        except (KeyError, TypeError, ValueError):
            return None


def get_state_transport() -> StateTransport:
    """Get the state transport of the current application."""
    return current_app.extensions['state_transport']
