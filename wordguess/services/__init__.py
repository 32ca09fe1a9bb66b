"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameEngine, MissingInputError, RoundOverError, get_game_engine
from .leaderboard_service import LeaderboardError, LeaderboardStore, get_leaderboard
from .state_transport import StateTransport, get_state_transport
from .word_catalog import ConfigurationError, WordCatalog, load_word_catalog

__all__ = [
    'GameEngine', 'MissingInputError', 'RoundOverError', 'get_game_engine',
    'LeaderboardError', 'LeaderboardStore', 'get_leaderboard',
    'StateTransport', 'get_state_transport',
    'ConfigurationError', 'WordCatalog', 'load_word_catalog'
]
