"""
Game Configuration Constants Module

This module defines all game rule constants and the feedback strings shown
to the player. Everything here is immutable; runtime settings (file paths,
cookie options) live in app_config.py.
"""

from typing import Final

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Number of attempts a round starts with.
Type: Final[int] - Immutable to prevent accidental modification
"""

PLACEHOLDER: Final[str] = "_"
"""Marker for a character of the secret word that is not revealed yet."""

# Feedback messages
MSG_EMPTY_GUESS: Final[str] = "please enter a letter or word"
MSG_ALREADY_TRIED: Final[str] = "letter already tried"
MSG_CORRECT_LETTER: Final[str] = "correct letter"
MSG_WRONG_LETTER: Final[str] = "wrong letter"
MSG_CORRECT_WORD: Final[str] = "correct word"
MSG_WRONG_WORD: Final[str] = "wrong word"
MSG_INVALID_ENTRY: Final[str] = "invalid entry"
MSG_HINT_USED: Final[str] = "hint used"
MSG_NO_HINT: Final[str] = "no letter to reveal"
MSG_MISSING_FIELDS: Final[str] = "please fill in all fields"
