"""
Sentence anagram search.

An anagram of a sentence uses every letter of every word in the sentence,
split into any number of dictionary words. Two sentences with the same words
in a different order are different anagrams, so for the sentence
["Yes", "man"] and a small dictionary the results include both
["man", "yes"] and ["yes", "man"], as well as ["en", "as", "my"] and its
five reorderings.

The search is depth first over the remaining occurrence list: pick a subset
that is some word's occurrence list, then solve what is left. Every chosen
subset is non-empty, so each step consumes at least one letter and the
recursion depth is bounded by the letter count of the input.
"""
import logging
from typing import Iterable, Iterator, Optional

from config.search_params import SearchParams
from core.anagram_index import AnagramIndex
from core.combinations import combinations
from core.occurrences import Occurrences, sentence_occurrences, subtract

logger = logging.getLogger(__name__)

Sentence = list[str]

class SentenceSearch:
    def __init__(self, index: AnagramIndex, params: Optional[SearchParams] = None) -> None:
        self._index = index
        self._params = params or SearchParams()

    @property
    def params(self) -> SearchParams:
        return self._params

    def iter_anagrams(self, sentence: Iterable[str]) -> Iterator[Sentence]:
        """Yield anagram sentences one at a time, ignoring max_results."""
        yield from self._search(sentence_occurrences(sentence), 0)

    def sentence_anagrams(self, sentence: Iterable[str]) -> list[Sentence]:
        """All anagram sentences of sentence, up to params.max_results of them.

        The empty sentence has exactly one anagram, the empty sentence.
        """
        sentence = list(sentence)
        max_results = self._params.max_results
        results: list[Sentence] = []
        for anagram in self.iter_anagrams(sentence):
            if max_results is not None and len(results) >= max_results:
                logger.warning(f"stopping search for {sentence} after {max_results} anagrams")
                break
            results.append(anagram)
        logger.debug(f"found {len(results)} anagrams of {sentence}")
        return results

    def _search(self, remaining: Occurrences, depth: int) -> Iterator[Sentence]:
        if not remaining:
            yield []
            return
        if self._params.max_words is not None and depth >= self._params.max_words:
            return

        for candidate in combinations(remaining):
            if not candidate:
                continue
            words = self._index.lookup(candidate)
            if not words:
                continue
            for tail in self._search(subtract(remaining, candidate), depth + 1):
                for word in words:
                    yield [word] + tail
