"""Shift cipher encryption and frequency-based key recovery."""

from __future__ import annotations

import enum
import math
import os
import random
import string

from cipherlab.alphabet import Alphabet
from cipherlab.helper import load_plain_text, read_file

_ALPHABET_SIZE = 26


class Strategy(enum.Enum):
    """How a candidate key is scored during an attack."""

    DIFF_SQUARE_SUM = "diff_square_sum"
    SUM_SQUARES = "sum_squares"


def random_key() -> str:
    """Return a random lower-case letter key."""
    return random.choice(string.ascii_lowercase)


def encrypt_text(key: str, text: str) -> str:
    """Encrypt lower-case ``text`` with the shift ``key``; the result is upper case."""
    if len(key) != 1 or key not in string.ascii_lowercase:
        raise ValueError(f"Invalid key '{key}'.")
    if any(ch not in string.ascii_letters for ch in text):
        raise ValueError("Fix text to only have alpha chars.")
    if any(ch not in string.ascii_lowercase for ch in text):
        raise ValueError("Fix text to only have lower chars.")
    shift = ord(key) - ord("a")
    return "".join(
        chr((ord(ch) - ord("a") + shift) % _ALPHABET_SIZE + ord("A")) for ch in text
    )


class ShiftAttack:
    """Holds a plain text, its encryption and the key found by an attack."""

    def __init__(self, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self.text = ""
        self.cipher_text = ""
        self.key: str | None = None

    def read_plain_text_file(
        self, file_path: str | os.PathLike[str], max_chars: int | None = None
    ) -> None:
        """Load the plain text from a file, keeping lower-cased letters only."""
        self.text = read_file(file_path, max_chars)
        self.cipher_text = ""

    def load_plain_text(self, text: str) -> None:
        """Load the plain text, keeping lower-cased letters only."""
        self.text = load_plain_text(text)
        self.cipher_text = ""

    def load_cipher_text(self, cipher_text: str) -> None:
        """Load a cipher text of unknown key."""
        self.cipher_text = cipher_text
        self.key = None

    def encrypt(self, key: str | None = None) -> None:
        """Encrypt the plain text with ``key``, or a random key when none is given."""
        if key is None:
            key = random_key()
        self.cipher_text = encrypt_text(key, self.text)
        self.key = key

    def attack(self, strategy: Strategy = Strategy.DIFF_SQUARE_SUM) -> str:
        """Recover the key of the cipher text, store it in ``key`` and return it."""
        self.key = None
        if not isinstance(strategy, Strategy):
            raise ValueError("Unknown strategy.")
        counts = self._cipher_counts()
        total = len(self.cipher_text)
        probabilities = self._alphabet.probabilities()
        target = self._alphabet.probabilities_square_sum()

        best_key: str | None = None
        best_score = math.inf
        for shift, candidate in enumerate(string.ascii_lowercase):
            plain_probs = [
                counts[(k + shift) % _ALPHABET_SIZE] / total
                for k in range(_ALPHABET_SIZE)
            ]
            if strategy is Strategy.DIFF_SQUARE_SUM:
                score = sum(
                    (p - q) ** 2 for p, q in zip(probabilities, plain_probs)
                )
            else:
                score = abs(
                    target - sum(p * q for p, q in zip(probabilities, plain_probs))
                )
            if score < best_score:
                best_key = candidate
                best_score = score

        self.key = best_key
        return best_key

    def _cipher_counts(self) -> list[int]:
        if any(ch not in string.ascii_letters for ch in self.cipher_text):
            raise ValueError("Fix cipher_text to only have alpha chars.")
        if any(ch not in string.ascii_uppercase for ch in self.cipher_text):
            raise ValueError("Fix cipher_text to only have upper chars.")
        if not self.cipher_text:
            raise ValueError("cipher_text is empty.")
        counts = [0] * _ALPHABET_SIZE
        for ch in self.cipher_text:
            counts[ord(ch) - ord("A")] += 1
        return counts