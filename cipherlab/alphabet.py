"""Letter statistics and word lists for natural-language alphabets."""

from __future__ import annotations

import functools
import os
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from cipherlab.tools import (
    find_words_by_pattern,
    probabilities_to_sorted_labeled,
    probability_pairs_to_dict,
    square_sum,
)

DEFAULT_WORDS_PATH = Path("/tmp/count_1w.txt")

_ENGLISH_PROBABILITIES: tuple[float, ...] = (
    0.082,  # A
    0.015,  # B
    0.028,  # C
    0.043,  # D
    0.127,  # E
    0.022,  # F
    0.020,  # G
    0.061,  # H
    0.070,  # I
    0.002,  # J
    0.008,  # K
    0.040,  # L
    0.024,  # M
    0.067,  # N
    0.075,  # O
    0.019,  # P
    0.001,  # Q
    0.060,  # R
    0.063,  # S
    0.091,  # T
    0.028,  # U
    0.010,  # V
    0.024,  # W
    0.002,  # X
    0.020,  # Y
    0.001,  # Z
)


class Alphabet(ABC):
    """Letter frequencies and a ranked word list of a language."""

    @abstractmethod
    def probabilities(self) -> Sequence[float]:
        """Return the probability of each letter a..z."""

    @abstractmethod
    def probabilities_square_sum(self) -> float:
        """Return the sum of the squared letter probabilities."""

    @abstractmethod
    def words_count(self) -> Sequence[tuple[str, int]]:
        """Return ``(word, count)`` pairs, most frequent first."""

    @abstractmethod
    def sorted_probabilities_labeled(self) -> Sequence[tuple[float, str]]:
        """Return ``(probability, letter)`` pairs sorted by probability, descending."""

    @abstractmethod
    def letter_prob_dict(self) -> Mapping[str, float]:
        """Return a mapping from lower-case letter to probability."""

    def find_words(
        self,
        pattern: str,
        predicate: Callable[[str], bool] | None = None,
        max_matches: int = 5,
    ) -> list[tuple[int, int, str]]:
        """Return ``(index, count, word)`` for known words matching ``pattern``."""
        return find_words_by_pattern(
            self.words_count(), pattern, predicate, max_matches
        )


def _parse_words(content: str) -> list[tuple[str, int]]:
    """Read whitespace-separated ``word count`` pairs until the first malformed one."""
    tokens = content.split()
    data: list[tuple[str, int]] = []
    for word, number in zip(tokens[::2], tokens[1::2]):
        try:
            count = int(number)
        except ValueError:
            break
        data.append((word, count))
    return data


class EnglishAlphabet(Alphabet):
    """The English alphabet with standard letter frequencies."""

    def __init__(self, words_path: str | os.PathLike[str] = DEFAULT_WORDS_PATH) -> None:
        self._words_path = Path(words_path)
        self._words: list[tuple[str, int]] | None = None
        self._square_sum: float | None = None
        self._sorted: list[tuple[float, str]] | None = None
        self._letter_probs: dict[str, float] | None = None

    def probabilities(self) -> Sequence[float]:
        return _ENGLISH_PROBABILITIES

    def probabilities_square_sum(self) -> float:
        if self._square_sum is None:
            self._square_sum = square_sum(self.probabilities())
        return self._square_sum

    def words_count(self) -> Sequence[tuple[str, int]]:
        if self._words is None:
            if not self._words_path.exists():
                raise FileNotFoundError(
                    f"File not found: {self._words_path}\nWorking dir: {Path.cwd()}"
                )
            try:
                content = self._words_path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                raise OSError(f"Failed to open file: {self._words_path}") from exc
            self._words = _parse_words(content)
        return self._words

    def sorted_probabilities_labeled(self) -> Sequence[tuple[float, str]]:
        if self._sorted is None:
            self._sorted = probabilities_to_sorted_labeled(self.probabilities(), True)
        return self._sorted

    def letter_prob_dict(self) -> Mapping[str, float]:
        if self._letter_probs is None:
            self._letter_probs = probability_pairs_to_dict(
                self.sorted_probabilities_labeled()
            )
        return self._letter_probs


@functools.lru_cache(maxsize=None)
def get_english_alphabet() -> EnglishAlphabet:
    """Return the shared English alphabet instance."""
    return EnglishAlphabet()