"""
Letter occurrence lists: the canonical multiset form of a word or sentence.

An occurrence list is a tuple of (letter, count) pairs:
- sorted by letter
- every letter appears once
- every count is positive (absent letters are not stored)

Letters are lower-cased and anything that is not alphabetic is ignored, so
"Eat!" and "tea" share the occurrence list (('a', 1), ('e', 1), ('t', 1)).
Tuples keep occurrence lists hashable so they can key the anagram index.
"""
from collections import Counter
from typing import Iterable

Occurrences = tuple[tuple[str, int], ...]

def _letters(text: str) -> Iterable[str]:
    return (c for c in text.lower() if c.isalpha())

def _canonical(counts: dict[str, int]) -> Occurrences:
    return tuple(sorted((letter, count) for letter, count in counts.items() if count > 0))

def word_occurrences(word: str) -> Occurrences:
    return _canonical(Counter(_letters(word)))

def sentence_occurrences(sentence: Iterable[str]) -> Occurrences:
    # Word boundaries don't matter: "I love you" and "You olive" must match.
    return word_occurrences("".join(sentence))

def letter_count(occurrences: Occurrences) -> int:
    return sum(count for _, count in occurrences)

def is_subset(y: Occurrences, x: Occurrences) -> bool:
    """True if every letter of y appears in x at least as often."""
    available = dict(x)
    return all(count <= available.get(letter, 0) for letter, count in y)

def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """Remove the letters of y from x.

    y must be a subset of x. A letter of y missing from x, or present
    fewer times, raises ValueError rather than producing a negative count.
    """
    remaining = dict(x)
    for letter, count in y:
        left = remaining.get(letter, 0) - count
        if left < 0:
            raise ValueError(
                f"cannot subtract {y} from {x}: "
                f"needs {count} '{letter}' but only {remaining.get(letter, 0)} available")
        remaining[letter] = left
    return _canonical(remaining)
