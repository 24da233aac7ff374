"""Vigenère cipher encryption and key recovery by frequency analysis."""

from __future__ import annotations

import os
import random
import string

from cipherlab.alphabet import Alphabet
from cipherlab.helper import load_plain_text, read_file
from cipherlab.shift import ShiftAttack

CHARS_PER_STREAM_TO_ATTACK = 600
KEY_LENGTH_THRESHOLD = 0.007

_ALPHABET_SIZE = 26


def random_vigenere_key(max_size: int = 32) -> str:
    """Return a random lower-case key of length 1 to ``max_size``."""
    if max_size < 1:
        raise ValueError("max_size must be at least 1.")
    length = random.randint(1, max_size)
    return "".join(random.choice(string.ascii_lowercase) for _ in range(length))


def encrypt_text(key: str, text: str) -> str:
    """Encrypt lower-case ``text`` with the Vigenère ``key``; the result is upper case."""
    if not key or any(ch not in string.ascii_lowercase for ch in key):
        raise ValueError(f"Invalid key '{key}'.")
    if any(ch not in string.ascii_letters for ch in text):
        raise ValueError("Fix text to only have alpha chars.")
    if any(ch not in string.ascii_lowercase for ch in text):
        raise ValueError("Fix text to only have lower chars.")
    shifts = [ord(ch) - ord("a") for ch in key]
    return "".join(
        chr((ord(ch) - ord("a") + shifts[i % len(shifts)]) % _ALPHABET_SIZE + ord("A"))
        for i, ch in enumerate(text)
    )


def split_into(s: str, t: int) -> list[str]:
    """Split ``s`` into ``t`` streams, stream ``i`` holding every ``t``-th char from ``i``."""
    if t < 1:
        raise ValueError("t must be at least 1.")
    return [s[offset::t] for offset in range(t)]


def _calculate_diff(
    t: int, cipher_text: str, target_square_sum: float, threshold: float
) -> float:
    """Return the worst distance from ``target_square_sum`` over the first streams."""
    offsets = [0, 1] if len(cipher_text) > 1 else [0]
    worst = 0.0
    for offset in offsets:
        stream = cipher_text[offset::t]
        counts = [0] * _ALPHABET_SIZE
        for ch in stream:
            counts[ord(ch) - ord("A")] += 1
        stream_size = len(stream)
        square_sum = sum((count / stream_size) ** 2 for count in counts)
        diff = abs(target_square_sum - square_sum)
        worst = max(worst, diff)
        if diff > threshold:
            break
    return worst


def find_key_length(cipher_text: str, alphabet: Alphabet) -> tuple[int, float]:
    """Return the smallest plausible key length and its distance from the alphabet.

    Raises ``ValueError`` when the text is too short, not upper-case letters,
    or no key length fits.
    """
    max_key_length = len(cipher_text) // CHARS_PER_STREAM_TO_ATTACK
    if max_key_length < 1:
        raise ValueError(
            "Can't find key length with text smaller than "
            f"{CHARS_PER_STREAM_TO_ATTACK}."
        )
    if any(ch not in string.ascii_letters for ch in cipher_text):
        raise ValueError("Fix cipher_text to only have alpha chars.")
    if any(ch not in string.ascii_uppercase for ch in cipher_text):
        raise ValueError("Fix cipher_text to only have upper chars.")

    target = alphabet.probabilities_square_sum()
    for t in range(1, max_key_length + 1):
        diff = _calculate_diff(t, cipher_text, target, KEY_LENGTH_THRESHOLD)
        if diff <= KEY_LENGTH_THRESHOLD:
            return t, diff
    raise ValueError("Cannot detect key length.")


class VigenereAttack:
    """Holds a plain text, its Vigenère encryption and the key found by an attack."""

    def __init__(self, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self.text = ""
        self.cipher_text = ""
        self.key = ""

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

    def encrypt(self, key: str | None = None) -> None:
        """Encrypt the plain text with ``key``, or a random key when none is given."""
        if key is None:
            key = random_vigenere_key()
        self.cipher_text = encrypt_text(key, self.text)
        self.key = key

    def find_key_length(self) -> tuple[int, float]:
        """Return the detected key length of the cipher text and its distance."""
        return find_key_length(self.cipher_text, self._alphabet)

    def attack(self) -> str:
        """Recover the key of the cipher text, store it in ``key`` and return it."""
        self.key = ""
        key_length, _ = self.find_key_length()
        letters = []
        for stream in split_into(self.cipher_text, key_length):
            shift_attack = ShiftAttack(self._alphabet)
            shift_attack.load_cipher_text(stream)
            letters.append(shift_attack.attack())
        self.key = "".join(letters)
        return self.key