"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState
from .score import ScoreRecord

__all__ = ['GameState', 'ScoreRecord']
