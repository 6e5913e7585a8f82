#!/usr/bin/env python3

import argparse
import asyncio
import logging
import os
import sys

# Add src to python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from config import anagram_config
from config.search_params import SearchParams
from core.anagrams import Anagrams

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the anagrams of a word or sentence.")
    parser.add_argument("sentence", nargs="*", help="Words of the sentence to rearrange")
    parser.add_argument("--dictionary", default=anagram_config.DICTIONARY_PATH,
                        help="Word list, one word per line")
    parser.add_argument("--max-results", type=int, help="Stop after this many anagrams")
    parser.add_argument("--max-words", type=int, help="Longest anagram sentence to consider, in words")
    parser.add_argument("--params", type=str, help="Search limits as JSON, overrides --max-results/--max-words")
    parser.add_argument("--words", action="store_true",
                        help="Print single-word anagrams of each argument instead of sentence anagrams")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)

def format_sentence(sentence: list[str]) -> str:
    return " ".join(sentence)

async def main(args: argparse.Namespace) -> int:
    params = SearchParams.from_json(args.params) or SearchParams.from_args(args)
    try:
        anagrams = await Anagrams.from_file_async(args.dictionary, params)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not load dictionary: {e}")
        return 1

    if args.words:
        for word in args.sentence:
            print(f"{word}: {format_sentence(anagrams.word_anagrams(word))}")
        return 0

    for sentence in anagrams.sentence_anagrams(args.sentence):
        print(format_sentence(sentence))
    return 0

if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=anagram_config.LOG_FORMAT)
    sys.exit(asyncio.run(main(args)))
