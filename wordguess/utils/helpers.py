"""
Helper Functions

Contains the cookie plumbing shared by the controllers.
"""

from typing import Optional

from flask import current_app, request

from ..models.game import GameState
from ..services.state_transport import get_state_transport


def load_round(request_obj=None) -> Optional[GameState]:
    """Read the round carried by the request cookie, or None if there is none."""
    if request_obj is None:
        request_obj = request

    token = request_obj.cookies.get(current_app.config['STATE_COOKIE_NAME'])
    return get_state_transport().decode(token)


def store_round(response, state: GameState):
    """Write the round into the response cookie."""
    config = current_app.config
    response.set_cookie(
        config['STATE_COOKIE_NAME'],
        get_state_transport().encode(state),
        max_age=config['STATE_COOKIE_MAX_AGE'],
        path='/',
        httponly=True,
        secure=config['STATE_COOKIE_SECURE'],
        samesite='Strict',
    )
    return response
