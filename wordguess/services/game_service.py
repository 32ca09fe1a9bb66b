"""
Game Service

Contains the core game logic: starting a round, applying letter and word
guesses, and spending attempts on hints.
"""

import random
from typing import List, Optional

from flask import current_app

from ..config.game_settings import (
    MAX_ATTEMPTS,
    PLACEHOLDER,
    MSG_EMPTY_GUESS,
    MSG_ALREADY_TRIED,
    MSG_CORRECT_LETTER,
    MSG_WRONG_LETTER,
    MSG_CORRECT_WORD,
    MSG_WRONG_WORD,
    MSG_INVALID_ENTRY,
    MSG_HINT_USED,
    MSG_NO_HINT,
)
from ..models.game import GameState
from .word_catalog import WordCatalog


class MissingInputError(ValueError):
    """A round cannot start without a player name and a difficulty."""


class RoundOverError(Exception):
    """The round is finished and accepts no more guesses or hints."""


class GameEngine:
    """
    Core game engine for single-player word guessing.

    This class handles:
    - Word selection from the catalog with an injected random generator
    - Guess classification (letter, full word, invalid) and evaluation
    - Hints that reveal a letter at the cost of one attempt
    - Win and loss detection

    The engine keeps no state between calls. It mutates and returns the
    GameState it is given; rule outcomes are reported through the state,
    never raised.
    """

    def __init__(self, catalog: WordCatalog, rng: Optional[random.Random] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def new_round(self, player: str, difficulty: str) -> GameState:
        """
        Starts a round with a random word for the given difficulty.

        Args:
            player: Player name shown on the leaderboard
            difficulty: Catalog key; unknown keys fall back to the default list

        Returns:
            GameState with every character hidden

        Raises:
            MissingInputError: If player or difficulty is empty
        """
        player = (player or "").strip()
        difficulty = (difficulty or "").strip()
        if not player or not difficulty:
            raise MissingInputError("Player name and difficulty are required")

        words = self.catalog.resolve(difficulty)
        secret = words[self.rng.randrange(len(words))].upper()

        return GameState(
            player=player,
            difficulty=difficulty,
            secret=secret,
            reveal=[PLACEHOLDER] * len(secret),
            attempts_remaining=self.max_attempts,
            tried_letters=[],
            message="",
            finished=False,
            won=False,
        )

    def apply_guess(self, state: GameState, raw_guess: str) -> GameState:
        """
        Applies a letter or full-word guess.

        Classification, first match wins:
        1. empty input
        2. a single letter
        3. a word of the secret's length made of letters only
        4. anything else is an invalid entry

        Raises:
            RoundOverError: If the round is already finished
        """
        self._ensure_in_progress(state)

        guess = (raw_guess or "").strip().upper()

        if not guess:
            state.message = MSG_EMPTY_GUESS
        elif len(guess) == 1 and guess.isalpha():
            self._apply_letter(state, guess)
        elif len(guess) == len(state.secret) and guess.isalpha():
            self._apply_word(state, guess)
        else:
            state.message = MSG_INVALID_ENTRY

        return state

    def apply_hint(self, state: GameState) -> GameState:
        """
        Reveals the first hidden character that was not tried yet.

        A hint costs one attempt. It can win the round but never loses it,
        even when it uses up the last attempt.

        Raises:
            RoundOverError: If the round is already finished
        """
        self._ensure_in_progress(state)

        for index, char in enumerate(state.secret):
            if state.reveal[index] == PLACEHOLDER and char not in state.tried_letters:
                state.tried_letters.append(char)
                state.reveal = reveal_letter(state.secret, state.reveal, char)
                state.attempts_remaining -= 1
                state.message = MSG_HINT_USED
                if state.is_solved:
                    state.finished = True
                    state.won = True
                return state

        state.message = MSG_NO_HINT
        return state

    def _apply_letter(self, state: GameState, letter: str) -> None:
        if letter in state.tried_letters:
            state.message = MSG_ALREADY_TRIED
            return

        state.tried_letters.append(letter)

        if letter in state.secret:
            state.message = MSG_CORRECT_LETTER
            state.reveal = reveal_letter(state.secret, state.reveal, letter)
            if state.is_solved:
                state.finished = True
                state.won = True
        else:
            state.attempts_remaining -= 1
            state.message = MSG_WRONG_LETTER
            if state.attempts_remaining <= 0:
                state.finished = True
                state.won = False

    def _apply_word(self, state: GameState, word: str) -> None:
        if word == state.secret:
            state.reveal = list(state.secret)
            state.message = MSG_CORRECT_WORD
            state.finished = True
            state.won = True
        else:
            state.attempts_remaining -= 1
            state.message = MSG_WRONG_WORD
            if state.attempts_remaining <= 0:
                state.finished = True
                state.won = False

    @staticmethod
    def _ensure_in_progress(state: GameState) -> None:
        if state.finished:
            raise RoundOverError("Round is already over")


def reveal_letter(secret: str, reveal: List[str], letter: str) -> List[str]:
    """Return a copy of reveal with every position of letter in secret shown."""
    return [
        char if char == letter else slot
        for char, slot in zip(secret, reveal)
    ]


def get_game_engine() -> GameEngine:
    """Get the game engine of the current application."""
    return current_app.extensions['game_engine']
