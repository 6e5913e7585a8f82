"""
Anagram engine bound to one dictionary.

TERMINOLOGY:
- Occurrences: sorted (letter, count) tuple describing a word's letters
  (see core.occurrences)
- Signature/bucket: the occurrence list shared by a group of dictionary words
  and the words themselves (see core.anagram_index)
- Sentence: list of words; order matters

Build one Anagrams per dictionary and pass it to whatever needs it. Nothing is
cached at module level, so tests can use small hand-written word lists.
"""
import logging
from typing import Iterable, Iterator, Optional

from config import anagram_config
from config.search_params import SearchParams
from core import combinations as combinations_module
from core import occurrences
from core.anagram_index import AnagramIndex
from core.dictionary import Dictionary
from core.sentence_search import Sentence, SentenceSearch

logger = logging.getLogger(__name__)

class Anagrams:
    @classmethod
    def from_words(cls, words: Iterable[str], params: Optional[SearchParams] = None, **kwargs) -> 'Anagrams':
        """Create an engine from an in-memory word list.

        Args:
            words: Dictionary words, one per entry
            params: Search limits, unlimited by default
            **kwargs: Additional arguments for Dictionary.from_words
        """
        return cls(Dictionary.from_words(words, **kwargs), params)

    @classmethod
    def from_file(cls, dictionary_file: str = anagram_config.DICTIONARY_PATH,
                  params: Optional[SearchParams] = None, **kwargs) -> 'Anagrams':
        """Create an engine from a word list file.

        Raises:
            FileNotFoundError: If dictionary_file does not exist
            OSError: If dictionary_file cannot be read to the end
        """
        dictionary = Dictionary(**kwargs)
        dictionary.read(dictionary_file)
        return cls(dictionary, params)

    @classmethod
    async def from_file_async(cls, dictionary_file: str = anagram_config.DICTIONARY_PATH,
                              params: Optional[SearchParams] = None, **kwargs) -> 'Anagrams':
        dictionary = Dictionary(**kwargs)
        await dictionary.read_async(dictionary_file)
        return cls(dictionary, params)

    def __init__(self, dictionary: Dictionary, params: Optional[SearchParams] = None) -> None:
        self.dictionary = dictionary
        self.index = AnagramIndex.from_dictionary(dictionary)
        self._search = SentenceSearch(self.index, params)
        logger.info(f"anagram engine ready with {self._search.params}")

    word_occurrences = staticmethod(occurrences.word_occurrences)
    sentence_occurrences = staticmethod(occurrences.sentence_occurrences)
    subtract = staticmethod(occurrences.subtract)
    combinations = staticmethod(combinations_module.combinations)

    def word_anagrams(self, word: str) -> list[str]:
        return list(self.index.word_anagrams(word))

    def sentence_anagrams(self, sentence: Iterable[str]) -> list[Sentence]:
        return self._search.sentence_anagrams(sentence)

    def iter_sentence_anagrams(self, sentence: Iterable[str]) -> Iterator[Sentence]:
        return self._search.iter_anagrams(sentence)
