"""
Round Decorators

Contains decorators that load the round from the cookie before a view runs.
"""

from functools import wraps
from flask import g, redirect, url_for

from .helpers import load_round


def require_round(finished: bool, redirect_endpoint: str = 'game.index'):
    """
    Decorator to require a round in a given phase for an HTTP endpoint.

    Args:
        finished: True for views that need a finished round, False for
            views that need a round still in progress
        redirect_endpoint: Where to send the client otherwise

    The loaded round is available as ``g.game_state``.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            state = load_round()
            if state is None or state.finished != finished:
                return redirect(url_for(redirect_endpoint), code=303)

            g.game_state = state
            return f(*args, **kwargs)

        return decorated_function

    return decorator
