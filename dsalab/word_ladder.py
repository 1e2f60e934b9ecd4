"""Shortest word ladders between five-letter words, changing one letter per step."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator

__all__ = ["DictionaryError", "WordLadder", "is_one_letter_off", "main"]

WORD_LENGTH = 5
NO_LADDER = "No Word Ladder Found."


class DictionaryError(Exception):
    """Raised when a dictionary cannot be read or holds a word of the wrong length."""


def is_one_letter_off(first: str, second: str) -> bool:
    """Whether two words of equal length differ in exactly one position."""
    if len(first) != len(second):
        return False
    return sum(a != b for a, b in zip(first, second)) == 1


class WordLadder:
    """A dictionary of five-letter words searched breadth-first for ladders."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words: list[str] = []
        for word in words:
            if len(word) != WORD_LENGTH:
                raise DictionaryError(
                    "Error: all words in dictionary file must be exactly 5 letters in length"
                )
            self.words.append(word)

    @classmethod
    def from_file(cls, path: str) -> WordLadder:
        """Read whitespace-separated words from ``path``."""
        try:
            with open(path, encoding="utf-8") as source:
                text = source.read()
        except OSError as error:
            raise DictionaryError(f"Cannot open file: {path}") from error
        return cls(text.split())

    def find_ladder(self, start: str, end: str) -> list[str] | None:
        """The shortest ladder from ``start`` to ``end``, or None if there is none.

        Both words must be in the dictionary, else ValueError is raised.
        """
        if start not in self.words or end not in self.words:
            raise ValueError("Please enter a valid word(s) for start and/or end words")
        if start == end:
            return [start]
        remaining = list(self.words)
        queue: deque[tuple[str, ...]] = deque([(start,)])
        while queue:
            path = queue.popleft()
            kept: list[str] = []
            for word in remaining:
                if not is_one_letter_off(path[-1], word):
                    kept.append(word)
                    continue
                extended = path + (word,)
                if word == end:
                    return list(extended)
                queue.append(extended)
            remaining = kept
        return None

    def output_ladder(self, start: str, end: str, output_file: str) -> list[str] | None:
        """Write the ladder, one word per line, or the no-ladder message; return the ladder."""
        ladder = self.find_ladder(start, end)
        with open(output_file, "w", encoding="utf-8") as out:
            if ladder is None:
                out.write(NO_LADDER + "\n")
            else:
                out.writelines(f"{word}\n" for word in ladder)
        return ladder


def _tokens() -> Iterator[str]:
    while True:
        try:
            line = input()
        except EOFError:
            return
        yield from line.split()


def _ask_word(tokens: Iterator[str], which: str) -> str | None:
    print(f"Enter the {which} word: ", end="")
    word = next(tokens, None)
    print()
    while word is not None and len(word) != WORD_LENGTH:
        print("Word must have exactly 5 characters.")
        print(f"Please reenter the {which} word: ", end="")
        word = next(tokens, None)
        print()
    return word


def main(argv: list[str] | None = None) -> int:
    """Ask for two words and write the ladder between them to the output file."""
    parser = argparse.ArgumentParser(description="Find a word ladder between two words.")
    parser.add_argument("--dictionary", default="dictionary.txt", help="file of five-letter words")
    parser.add_argument("--output", default="output.txt", help="file to write the ladder to")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    tokens = _tokens()
    first = _ask_word(tokens, "first")
    if first is None:
        return 1
    last = _ask_word(tokens, "last")
    if last is None:
        return 1
    try:
        ladder = WordLadder.from_file(args.dictionary)
        ladder.output_ladder(first, last, args.output)
    except (DictionaryError, ValueError) as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())