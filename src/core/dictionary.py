import logging
from typing import Callable, Iterable, Optional

import aiofiles

from config import anagram_config
from core.occurrences import letter_count, word_occurrences

logger = logging.getLogger(__name__)

class Dictionary:
    """Ordered list of dictionary words, loaded once and never modified afterwards.

    Words keep their original casing. Entries without letters, entries
    outside [min_letters, max_letters] and exact duplicates are skipped.
    """
    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        min_letters: int = anagram_config.MIN_LETTERS,
        max_letters: Optional[int] = anagram_config.MAX_LETTERS
    ) -> 'Dictionary':
        """Create a dictionary from a word list without file I/O."""
        d = cls(min_letters, max_letters)
        for word in words:
            d._add(word)
        return d

    def __init__(self,
                 min_letters: int = anagram_config.MIN_LETTERS,
                 max_letters: Optional[int] = anagram_config.MAX_LETTERS,
                 open: Callable = open) -> None:
        if min_letters < 1:
            raise ValueError(f"min_letters must be at least 1, got {min_letters}")
        self._open = open
        self._words: list[str] = []
        self._seen: set[str] = set()
        self._min_letters = min_letters
        self._max_letters = max_letters

    def __len__(self) -> int:
        return len(self._words)

    def words(self) -> list[str]:
        return list(self._words)

    def _add(self, line: str) -> bool:
        word = line.strip()
        if not word or word in self._seen:
            return False
        letters = letter_count(word_occurrences(word))
        if letters < self._min_letters or (self._max_letters is not None and letters > self._max_letters):
            logger.debug(f"skipping dictionary entry {word!r} with {letters} letters")
            return False
        self._seen.add(word)
        self._words.append(word)
        return True

    def read(self, dictionary_file: str) -> None:
        try:
            with self._open(dictionary_file, "r") as f:
                for line in f:
                    self._add(line)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Dictionary not found at {dictionary_file}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not load word list {dictionary_file}: {e}")
            raise
        logger.info(f"Loaded {len(self._words)} words from {dictionary_file}")

    async def read_async(self, dictionary_file: str) -> None:
        try:
            async with aiofiles.open(dictionary_file, mode="r") as f:
                async for line in f:
                    self._add(line)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Dictionary not found at {dictionary_file}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not load word list {dictionary_file}: {e}")
            raise
        logger.info(f"Loaded {len(self._words)} words from {dictionary_file}")
