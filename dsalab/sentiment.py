"""Word sentiment scores kept in a chained hash table, with a review-rating command."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "WordEntry",
    "HashTable",
    "load_reviews",
    "review_score",
    "classify",
    "main",
]

NEUTRAL_SCORE = 2.0
DEFAULT_TABLE_SIZE = 20071
_HASH_MULTIPLIER = 53


@dataclass
class WordEntry:
    """A word with the running total of its scores and how often it appeared."""

    word: str
    total_score: int
    appearances: int = 1

    def add_appearance(self, score: int) -> None:
        """Record one more appearance of the word with ``score``."""
        self.total_score += score
        self.appearances += 1

    def average(self) -> float:
        """Mean score over all appearances."""
        return self.total_score / self.appearances


class HashTable:
    """A fixed number of buckets, each a list of word entries."""

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("hash table size must be positive")
        self.size = size
        self._buckets: list[list[WordEntry]] = [[] for _ in range(size)]

    def compute_hash(self, word: str) -> int:
        """Bucket index of ``word``: the sum of its character codes times 53, modulo the size."""
        return sum(ord(char) * _HASH_MULTIPLIER for char in word) % self.size

    def _find(self, word: str) -> WordEntry | None:
        return next(
            (entry for entry in self._buckets[self.compute_hash(word)] if entry.word == word),
            None,
        )

    def put(self, word: str, score: int) -> None:
        """Add an appearance of ``word`` with ``score``, creating its entry if needed."""
        entry = self._find(word)
        if entry is None:
            self._buckets[self.compute_hash(word)].append(WordEntry(word, score))
        else:
            entry.add_appearance(score)

    def get_average(self, word: str) -> float:
        """Average score of ``word``, or the neutral 2.0 if it has never been seen."""
        entry = self._find(word)
        return NEUTRAL_SCORE if entry is None else entry.average()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) is not None


def _line_words(text: str) -> Iterator[str]:
    """Split a review line on spaces; the final word loses its last character."""
    if not text:
        return
    while True:
        cut = text.find(" ")
        if cut > 0:
            yield text[:cut]
            text = text[cut + 1:]
        else:
            yield text[:-1]
            return


def load_reviews(table: HashTable, lines: Iterable[str]) -> None:
    """Score every word of each ``<score> <review>`` line into ``table``.

    The character after the score is skipped, and the last character of each
    line (its terminator or final punctuation) is dropped from the last word.
    """
    for raw in lines:
        line = raw.rstrip("\n")
        if not line.strip():
            continue
        match = re.match(r"\s*([+-]?\d+)", line)
        if match is None:
            raise ValueError(f"review line does not start with a score: {line!r}")
        score = int(match.group(1))
        for word in _line_words(line[match.end() + 1:]):
            table.put(word, score)


def review_score(table: HashTable, review: str) -> float | None:
    """Mean word score of ``review``; None when its last space-separated word is empty."""
    words = review.split(" ")
    if not words[-1]:
        return None
    return sum(table.get_average(word) for word in words) / len(words)


def classify(sentiment: float) -> str:
    """Describe an average sentiment score."""
    if sentiment >= 3.0:
        return "Positive Sentiment"
    if sentiment >= 2.0:
        return "Somewhat Positive Sentiment"
    if sentiment >= 1.0:
        return "Somewhat Negative Sentiment"
    return "Negative Sentiment"


def main(argv: list[str] | None = None) -> int:
    """Learn word scores from a review file, then rate reviews typed on standard input."""
    parser = argparse.ArgumentParser(description="Rate movie reviews by word sentiment.")
    parser.add_argument("reviews", nargs="?", default="movieReviews.txt", help="scored reviews")
    parser.add_argument("--size", type=int, default=DEFAULT_TABLE_SIZE, help="hash table size")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    table = HashTable(args.size)
    try:
        with open(args.reviews, encoding="utf-8", newline="") as source:
            load_reviews(table, source)
    except OSError:
        print("could not open file")
        return 1

    while True:
        print("enter a review -- Press return to exit: ")
        try:
            message = input()
        except EOFError:
            break
        sentiment = review_score(table, message)
        if sentiment is None:
            break
        print(f"The review has an average value of {sentiment:g}")
        print(classify(sentiment))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())