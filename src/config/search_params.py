"""Limits applied to a sentence anagram search."""
import argparse
import json
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchParams:
    """Budget for one anagram search.

    Exhaustive enumeration can produce an enormous number of sentences for
    long inputs, so callers may cap the number of words per sentence and the
    number of sentences returned. None means unlimited.
    """
    max_results: Optional[int] = None
    max_words: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("max_results", "max_words"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

    @classmethod
    def from_json(cls, json_str: Optional[str]) -> Optional['SearchParams']:
        """Create SearchParams from a JSON string.

        Args:
            json_str: JSON object with optional max_results and max_words keys

        Returns:
            SearchParams instance, or None if json_str is empty/None

        Raises:
            json.JSONDecodeError: If json_str is invalid JSON
        """
        if not json_str or json_str.strip() == "":
            return None

        data = json.loads(json_str)

        return cls(
            max_results=data.get('max_results'),
            max_words=data.get('max_words')
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'SearchParams':
        """Create SearchParams from parsed command-line arguments."""
        return cls(
            max_results=args.max_results,
            max_words=args.max_words
        )

    def __str__(self) -> str:
        return f"SearchParams(max_results={self.max_results}, max_words={self.max_words})"
