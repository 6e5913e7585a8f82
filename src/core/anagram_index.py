from collections import defaultdict
import logging
from typing import Iterable

from core.dictionary import Dictionary
from core.occurrences import Occurrences, word_occurrences

logger = logging.getLogger(__name__)

class AnagramIndex:
    """Dictionary words grouped by occurrence list.

    ('a', 1), ('e', 1), ('t', 1) -> ("ate", "eat", "tea")

    Buckets keep dictionary order. Words without letters are never indexed,
    so the empty occurrence list has no bucket.
    """
    @classmethod
    def from_dictionary(cls, dictionary: Dictionary) -> 'AnagramIndex':
        return cls(dictionary.words())

    def __init__(self, words: Iterable[str]) -> None:
        buckets: dict[Occurrences, list[str]] = defaultdict(list)
        count = 0
        for word in words:
            sig = word_occurrences(word)
            if not sig:
                logger.debug(f"not indexing {word!r}: no letters")
                continue
            buckets[sig].append(word)
            count += 1

        self._buckets: dict[Occurrences, tuple[str, ...]] = {
            sig: tuple(bucket) for sig, bucket in buckets.items()}
        self._word_count = count
        logger.info(f"Built in-memory anagram index with {len(self._buckets)} signatures from {count} words")

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, occurrences: Occurrences) -> bool:
        return occurrences in self._buckets

    @property
    def word_count(self) -> int:
        return self._word_count

    def lookup(self, occurrences: Occurrences) -> tuple[str, ...]:
        """All words with exactly these occurrences, or () if there are none."""
        return self._buckets.get(occurrences, ())

    def word_anagrams(self, word: str) -> tuple[str, ...]:
        return self.lookup(word_occurrences(word))
