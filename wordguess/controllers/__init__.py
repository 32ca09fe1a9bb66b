"""
Controllers Package

Contains the Flask blueprints: the browser game flow and the JSON API.
"""

from .game_controller import game_bp
from .api_controller import api_bp

__all__ = ['game_bp', 'api_bp']
