"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_round
from .helpers import load_round, store_round
from .game_logger import game_logger

__all__ = ['require_round', 'load_round', 'store_round', 'game_logger']
