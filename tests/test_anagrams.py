#!/usr/bin/env python3

import unittest

from config.search_params import SearchParams
from core.anagrams import Anagrams
from tests.fixtures.dictionary_helpers import (EAT_DICT, OLIVE_DICT, WORDS_FILE,
                                               YES_MAN_ANAGRAMS, as_set,
                                               create_test_anagrams)


class TestAnagrams(unittest.TestCase):
    def setUp(self):
        self.anagrams = create_test_anagrams(EAT_DICT + OLIVE_DICT)

    def test_word_occurrences(self):
        self.assertEqual((('a', 1), ('e', 1), ('t', 1)), self.anagrams.word_occurrences("Tea"))

    def test_sentence_occurrences(self):
        self.assertEqual(self.anagrams.word_occurrences("olive you"),
                         self.anagrams.sentence_occurrences(["I", "love", "you"]))

    def test_word_anagrams(self):
        self.assertEqual({"eat", "ate", "tea"}, set(self.anagrams.word_anagrams("tea")))
        self.assertEqual(["you", "You"], self.anagrams.word_anagrams("YOU"))
        self.assertEqual([], self.anagrams.word_anagrams("zzz"))

    def test_combinations(self):
        self.assertEqual([()], self.anagrams.combinations(()))
        self.assertEqual(6, len(self.anagrams.combinations(self.anagrams.word_occurrences("aab"))))

    def test_subtract(self):
        self.assertEqual((('t', 1),), self.anagrams.subtract(self.anagrams.word_occurrences("eat"),
                                                             self.anagrams.word_occurrences("ae")))
        with self.assertRaises(ValueError):
            self.anagrams.subtract((), (('a', 1),))

    def test_sentence_anagrams(self):
        result = self.anagrams.sentence_anagrams(["I", "love", "you"])
        self.assertIn(["You", "olive"], result)
        self.assertIn(["olive", "you"], result)

    def test_sentence_anagrams_empty(self):
        self.assertEqual([[]], self.anagrams.sentence_anagrams([]))

    def test_iter_sentence_anagrams(self):
        self.assertEqual(as_set(self.anagrams.sentence_anagrams(["tea"])),
                         as_set(self.anagrams.iter_sentence_anagrams(["tea"])))

    def test_separate_engines_do_not_share_state(self):
        other = Anagrams.from_words(["ate"])
        self.assertEqual(["ate"], other.word_anagrams("tea"))
        self.assertEqual(3, len(self.anagrams.word_anagrams("tea")))

    def test_dictionary_kwargs(self):
        anagrams = create_test_anagrams(OLIVE_DICT, min_letters=2)
        self.assertEqual([], anagrams.word_anagrams("i"))
        self.assertNotIn(["I", "love", "you"], anagrams.sentence_anagrams(["I", "love", "you"]))

    def test_from_file(self):
        anagrams = Anagrams.from_file(WORDS_FILE, SearchParams(max_words=2))
        result = anagrams.sentence_anagrams(["Yes", "man"])
        self.assertEqual({s for s in as_set(YES_MAN_ANAGRAMS) if len(s) <= 2}, as_set(result))

    def test_from_file_missing(self):
        with self.assertRaises(FileNotFoundError):
            Anagrams.from_file("no/such/dictionary.txt")


class TestAnagramsAsync(unittest.IsolatedAsyncioTestCase):
    async def test_from_file_async(self):
        anagrams = await Anagrams.from_file_async(WORDS_FILE)
        self.assertEqual(as_set(YES_MAN_ANAGRAMS), as_set(anagrams.sentence_anagrams(["Yes", "man"])))


if __name__ == '__main__':
    unittest.main()
