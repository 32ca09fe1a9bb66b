"""
Word Catalog Service

Loads the difficulty-keyed word lists and resolves the list a new round
draws from.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple, Union


class ConfigurationError(RuntimeError):
    """The word catalog cannot serve rounds; fatal at startup."""


class WordCatalog:
    """
    Immutable mapping of difficulty -> candidate words.

    The default difficulty must have at least one word, so resolve() can
    always return a non-empty list.
    """

    def __init__(self, words: Mapping[str, Sequence[str]], default_difficulty: str):
        self._words: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {difficulty: tuple(word_list) for difficulty, word_list in words.items()}
        )
        self.default_difficulty = default_difficulty

        if not self._words.get(default_difficulty):
            raise ConfigurationError(
                f"No words available for default difficulty {default_difficulty!r}"
            )

    @property
    def difficulties(self) -> List[str]:
        return list(self._words)

    def words_for(self, difficulty: str) -> Tuple[str, ...]:
        """Words for a difficulty; empty when the difficulty is unknown."""
        return self._words.get(difficulty, ())

    def resolve(self, difficulty: str) -> Tuple[str, ...]:
        """Words for a difficulty, falling back to the default list."""
        return self.words_for(difficulty) or self._words[self.default_difficulty]

    def statistics(self) -> dict:
        """
        Summarizes the catalog for monitoring.

        Returns:
            dict: Statistical information including:
                - total_words: Number of words across all difficulties
                - default_difficulty: Fallback difficulty key
                - difficulties: Per difficulty word count and length range
        """
        per_difficulty = {}
        for difficulty, word_list in self._words.items():
            lengths = [len(word) for word in word_list]
            per_difficulty[difficulty] = {
                "words": len(word_list),
                "min_length": min(lengths) if lengths else 0,
                "max_length": max(lengths) if lengths else 0,
            }

        return {
            "total_words": sum(len(word_list) for word_list in self._words.values()),
            "default_difficulty": self.default_difficulty,
            "difficulties": per_difficulty,
        }


def load_word_catalog(path: Union[str, Path], default_difficulty: str) -> WordCatalog:
    """
    Load a word catalog from a ``difficulty: word`` text file.

    Lines that do not split into exactly two parts on ``:`` are ignored,
    as are entries with an empty word.

    Raises:
        ConfigurationError: If the file cannot be read or the default
            difficulty has no words
    """
    words: Dict[str, List[str]] = {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                parts = line.split(':')
                if len(parts) != 2:
                    continue
                difficulty = parts[0].strip()
                word = parts[1].strip()
                if not word:
                    continue
                words.setdefault(difficulty, []).append(word)
    except OSError as e:
        raise ConfigurationError(f"Word list file not readable: {path} ({e})") from e

    return WordCatalog(words, default_difficulty)
